"""Mapping enumerations."""

from __future__ import annotations

from enum import Enum


class MappingStyle(Enum):
    """Supported table mapping strategies."""

    DEFAULT = "default"
    UNDERSCORE_TO_CAMEL_CASE = "underscore_to_camel_case"
    UNDERSCORE_TO_PASCAL_CASE = "underscore_to_pascal_case"


class ValueKind(Enum):
    """Classification of a single value during structural conversion.

    Members are listed in the order classification is evaluated.
    """

    NULL = "null"
    TEMPORAL = "temporal"
    BIG_INTEGER = "big_integer"
    STRUCTURAL = "structural"
    SCALAR = "scalar"
