"""Mapping registry - builds one model mapper per registered model.

Registration happens once, when the registry is created:

    options = MappingOptions(models={
        "users": MappingConfig(style=MappingStyle.UNDERSCORE_TO_CAMEL_CASE),
    })
    registry = MappingRegistry(options)
    registry.get("users").map_one(row)
"""

from __future__ import annotations

import logging
from typing import Any

from row_shape.core.config import MappingConfig, MappingOptions
from row_shape.core.exceptions import ModelNotFoundError
from row_shape.mapping.model import ModelMapper
from row_shape.mapping.strategies import create_strategy

logger = logging.getLogger(__name__)


class MappingRegistry:
    """Builds and caches a ModelMapper for every configured model.

    The registry is immutable after loading: build once at startup, then
    read-only access for the lifetime of the application.

    Args:
        options: Per-model mapping configuration.
        target_classes: Optional model-name to class mapping used to build
            typed objects instead of plain documents.
    """

    def __init__(
        self,
        options: MappingOptions | dict[str, Any],
        target_classes: dict[str, type] | None = None,
    ) -> None:
        if not isinstance(options, MappingOptions):
            options = MappingOptions.model_validate(options)
        self._options = options
        self._target_classes = dict(target_classes or {})
        self._mappers: dict[str, ModelMapper[Any]] = {}
        self._load()

    def _load(self) -> None:
        """Create a strategy and mapper for every configured model."""
        for model_name in sorted(self._options.models):
            config = self._options.models[model_name]
            self._mappers[model_name] = self._build(model_name, config)
            logger.debug(
                "Registered model '%s' with %s mapping",
                model_name,
                config.style.value,
            )

    def _build(self, model_name: str, config: MappingConfig) -> ModelMapper[Any]:
        return ModelMapper(
            self._target_classes.get(model_name),
            strategy=create_strategy(config),
            columns=config.columns,
        )

    def get(self, model_name: str) -> ModelMapper[Any]:
        """Look up the mapper registered for *model_name*.

        Raises:
            ModelNotFoundError: If no model matches the given name.
        """
        try:
            return self._mappers[model_name]
        except KeyError:
            raise ModelNotFoundError(model_name) from None

    def has(self, model_name: str) -> bool:
        """Check if a model name is registered."""
        return model_name in self._mappers

    @property
    def model_names(self) -> list[str]:
        """List all registered model names, sorted alphabetically."""
        return sorted(self._mappers.keys())

    def __len__(self) -> int:
        """Number of registered models."""
        return len(self._mappers)
