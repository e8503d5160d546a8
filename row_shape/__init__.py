"""RowShape - casing and shape mapping between storage rows and documents."""

from __future__ import annotations

from row_shape.core.casing import (
    escape_reserved,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
)
from row_shape.core.config import MappingConfig, MappingOptions
from row_shape.core.enums import MappingStyle, ValueKind
from row_shape.core.exceptions import (
    ColumnMismatchError,
    IdentifierError,
    InvalidIdentifier,
    MappingError,
    ModelNotFoundError,
    RegistryError,
    RowShapeError,
    StructuralError,
)
from row_shape.core.registry import MappingRegistry
from row_shape.core.reserved import RESERVED_WORDS, ReservedWordSet
from row_shape.core.values import ValueNormalizer, classify
from row_shape.core.walker import StructuralWalker
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
    # Strategies
    "TableMappingStrategy",
    "BaseTableMapping",
    "DefaultTableMapping",
    "UnderscoreToCamelCaseMapping",
    "UnderscoreToPascalCaseMapping",
    "create_strategy",
    # Mapping
    "ModelMapper",
    "MappingRegistry",
    # Configuration
    "MappingConfig",
    "MappingOptions",
    # Building blocks
    "to_snake_case",
    "to_camel_case",
    "to_pascal_case",
    "escape_reserved",
    "ReservedWordSet",
    "RESERVED_WORDS",
    "ValueNormalizer",
    "classify",
    "StructuralWalker",
    # Enums
    "MappingStyle",
    "ValueKind",
    # Exceptions
    "RowShapeError",
    "IdentifierError",
    "InvalidIdentifier",
    "StructuralError",
    "MappingError",
    "ColumnMismatchError",
    "RegistryError",
    "ModelNotFoundError",
]
