"""Leaf value classification and normalization."""

from __future__ import annotations

import datetime
from collections.abc import Mapping
from typing import Any

from row_shape.core.enums import ValueKind

# Largest integer a double-precision float (and therefore a JSON consumer)
# represents exactly.
MAX_SAFE_INTEGER = 2**53 - 1

SEQUENCE_TYPES: tuple[type, ...] = (list, tuple, set, frozenset)
_TEMPORAL_TYPES: tuple[type, ...] = (datetime.date, datetime.time)


def is_big_integer(value: Any, max_safe_integer: int = MAX_SAFE_INTEGER) -> bool:
    """Return True for an ``int`` outside ``[-max_safe_integer, max_safe_integer]``.

    ``bool`` is never a big integer.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return abs(value) > max_safe_integer


def classify(value: Any, max_safe_integer: int = MAX_SAFE_INTEGER) -> ValueKind:
    """Classify *value* into exactly one ValueKind.

    Null, temporal and big-integer checks run before the structural check,
    so leaf types are never recursed into.
    """
    if value is None:
        return ValueKind.NULL
    # datetime.datetime is a subclass of datetime.date
    if isinstance(value, _TEMPORAL_TYPES):
        return ValueKind.TEMPORAL
    if is_big_integer(value, max_safe_integer):
        return ValueKind.BIG_INTEGER
    if isinstance(value, Mapping) or isinstance(value, SEQUENCE_TYPES):
        return ValueKind.STRUCTURAL
    return ValueKind.SCALAR


class ValueNormalizer:
    """Normalizes leaf values for one strategy.

    Args:
        convert_big_integer_to_string: Convert big integers to their decimal
            string form instead of passing them through.
        max_safe_integer: Magnitude above which an ``int`` is a big integer.
    """

    __slots__ = ("_convert_big_integer_to_string", "_max_safe_integer")

    def __init__(
        self,
        convert_big_integer_to_string: bool = False,
        max_safe_integer: int = MAX_SAFE_INTEGER,
    ) -> None:
        self._convert_big_integer_to_string = convert_big_integer_to_string
        self._max_safe_integer = max_safe_integer

    @property
    def convert_big_integer_to_string(self) -> bool:
        return self._convert_big_integer_to_string

    @property
    def max_safe_integer(self) -> int:
        return self._max_safe_integer

    def classify(self, value: Any) -> ValueKind:
        """Classify *value* using this normalizer's big-integer bound."""
        return classify(value, self._max_safe_integer)

    def normalize_leaf(self, value: Any) -> Any:
        """Return the leaf *value*, converting big integers when enabled.

        Every other value is returned as the identical object.
        """
        if self._convert_big_integer_to_string and is_big_integer(value, self._max_safe_integer):
            return str(value)
        return value
