"""RowShape exception hierarchy.

All exceptions raised by the mapping core derive from RowShapeError so
callers can catch conversion failures without knowing which layer failed.
"""

from __future__ import annotations

from typing import Any


class RowShapeError(Exception):
    """Base exception for all RowShape errors."""


# --- Identifiers ---


class IdentifierError(RowShapeError):
    """Base for identifier conversion errors."""


class InvalidIdentifier(IdentifierError):
    """Raised when a name conversion receives a non-string or empty identifier."""

    def __init__(self, identifier: Any, detail: str) -> None:
        self.identifier = identifier
        super().__init__(f"Invalid identifier {identifier!r}: {detail}")


# --- Structure ---


class StructuralError(RowShapeError):
    """Raised when the walker detects a cycle or exceeds its depth bound."""

    def __init__(self, detail: str, depth: int) -> None:
        self.depth = depth
        super().__init__(f"Cannot convert structure at depth {depth}: {detail}")


# --- Mapping ---


class MappingError(RowShapeError):
    """Base for model mapping errors."""


class ColumnMismatchError(MappingError):
    """Raised when required fields cannot be mapped from row columns."""

    def __init__(self, target_class: str, missing_fields: list[str]) -> None:
        self.target_class = target_class
        self.missing_fields = missing_fields
        super().__init__(f"Cannot map to {target_class}: missing fields {missing_fields}")


# --- Registry ---


class RegistryError(RowShapeError):
    """Base for mapping registry errors."""


class ModelNotFoundError(RegistryError):
    """Raised when a model name is not registered."""

    def __init__(self, model_name: str) -> None:
        self.model_name = model_name
        super().__init__(f"Model not found: '{model_name}'")
