"""Unit tests for MappingRegistry."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from pydantic import ValidationError

from row_shape.core.config import MappingConfig, MappingOptions
from row_shape.core.enums import MappingStyle
from row_shape.core.exceptions import ModelNotFoundError
from row_shape.core.registry import MappingRegistry
from row_shape.mapping.strategies import (
    UnderscoreToCamelCaseMapping,
    UnderscoreToPascalCaseMapping,
)


@dataclass
class Video:
    videoId: int
    title: str


class TestMappingRegistry:
    def test_load_models(self) -> None:
        registry = MappingRegistry(
            MappingOptions(
                models={
                    "users": MappingConfig(style=MappingStyle.UNDERSCORE_TO_CAMEL_CASE),
                    "videos": MappingConfig(style=MappingStyle.UNDERSCORE_TO_PASCAL_CASE),
                }
            )
        )
        assert len(registry) == 2
        assert isinstance(registry.get("users").strategy, UnderscoreToCamelCaseMapping)
        assert isinstance(registry.get("videos").strategy, UnderscoreToPascalCaseMapping)

    def test_options_from_dict(self) -> None:
        registry = MappingRegistry(
            {"models": {"users": {"style": "underscore_to_camel_case"}}}
        )
        assert registry.get("users").map_one({"user_id": 1}) == {"userId": 1}

    def test_invalid_options_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MappingRegistry({"models": {"users": {"style": "kebab"}}})

    def test_target_classes(self) -> None:
        registry = MappingRegistry(
            {"models": {"videos": {"style": "underscore_to_camel_case"}}},
            target_classes={"videos": Video},
        )
        video = registry.get("videos").map_one({"video_id": 7, "title": "Intro"})
        assert video == Video(videoId=7, title="Intro")

    def test_column_overrides_applied(self) -> None:
        registry = MappingRegistry(
            {
                "models": {
                    "users": {
                        "style": "underscore_to_camel_case",
                        "columns": {"uid": "userId"},
                    }
                }
            }
        )
        assert registry.get("users").get_column_name("userId") == "uid"

    def test_has(self) -> None:
        registry = MappingRegistry({"models": {"users": {}}})
        assert registry.has("users") is True
        assert registry.has("missing") is False

    def test_get_missing_raises(self) -> None:
        registry = MappingRegistry({"models": {"users": {}}})
        with pytest.raises(ModelNotFoundError, match="missing"):
            registry.get("missing")

    def test_model_names_sorted(self) -> None:
        registry = MappingRegistry({"models": {"b": {}, "a": {}, "c": {}}})
        assert registry.model_names == ["a", "b", "c"]

    def test_empty_options(self) -> None:
        assert len(MappingRegistry(MappingOptions())) == 0

    def test_same_instance_returned(self) -> None:
        registry = MappingRegistry({"models": {"users": {}}})
        assert registry.get("users") is registry.get("users")
