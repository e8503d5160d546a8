"""Mapping layer - translate between rows and documents."""

from __future__ import annotations

from row_shape.mapping.model import ModelMapper
from row_shape.mapping.protocol import TableMappingStrategy
from row_shape.mapping.strategies import (
    BaseTableMapping,
    DefaultTableMapping,
    UnderscoreToCamelCaseMapping,
    UnderscoreToPascalCaseMapping,
    create_strategy,
)

__all__ = [
    "TableMappingStrategy",
    "BaseTableMapping",
    "DefaultTableMapping",
    "UnderscoreToCamelCaseMapping",
    "UnderscoreToPascalCaseMapping",
    "create_strategy",
    "ModelMapper",
]
