"""Mapping configuration models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from row_shape.core.enums import MappingStyle
from row_shape.core.values import MAX_SAFE_INTEGER
from row_shape.core.walker import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT


class MappingConfig(BaseModel):
    """Per-model mapping configuration."""

    model_config = ConfigDict(frozen=True)

    style: MappingStyle = MappingStyle.DEFAULT
    convert_big_integer_to_string: bool = False
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, gt=0, le=MAX_DEPTH_LIMIT)
    max_safe_integer: int = Field(default=MAX_SAFE_INTEGER, gt=0)
    reserved_words: list[str] = Field(default_factory=list)
    columns: dict[str, str] = Field(default_factory=dict)

    @field_validator("reserved_words")
    @classmethod
    def _words_not_empty(cls, value: list[str]) -> list[str]:
        if any(not word for word in value):
            raise ValueError("reserved words must be non-empty strings")
        return value

    @field_validator("columns")
    @classmethod
    def _columns_not_empty(cls, value: dict[str, str]) -> dict[str, str]:
        for column, prop in value.items():
            if not column or not prop:
                raise ValueError(f"column override {column!r} -> {prop!r} must be non-empty")
        return value


class MappingOptions(BaseModel):
    """Mapping configuration for a set of models, keyed by model name."""

    models: dict[str, MappingConfig] = Field(default_factory=dict)
