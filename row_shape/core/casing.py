"""Identifier case conversion.

Converts a single identifier between document property casing
(camelCase / PascalCase) and storage column casing (snake_case).
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any

from row_shape.core.exceptions import InvalidIdentifier
from row_shape.core.reserved import ReservedWordSet

# Zero-width split points for snake_case conversion:
#   * an uppercase letter preceded by a lowercase letter       (userId -> user|Id)
#   * an uppercase letter followed by a lowercase letter,
#     when it is not the first character and not after "_"    (HTTPServer -> HTTP|Server)
_SNAKE_SPLIT_PATTERN = re.compile(r"(?<=[a-z])(?=[A-Z])|(?<=[^_])(?=[A-Z][a-z])")


def validate_identifier(name: Any) -> str:
    """Return *name* unchanged if it is a non-empty string.

    Raises:
        InvalidIdentifier: If *name* is not a ``str`` or is empty.
    """
    if not isinstance(name, str):
        raise InvalidIdentifier(name, f"expected str, got {type(name).__name__}")
    if not name:
        raise InvalidIdentifier(name, "identifier must not be empty")
    return name


def to_snake_case(name: str) -> str:
    """Convert a camelCase or PascalCase property name to snake_case.

    Examples:
        >>> to_snake_case("userId")
        'user_id'
        >>> to_snake_case("HTTPServer")
        'http_server'
    """
    return _to_snake_case(validate_identifier(name))


def to_camel_case(name: str) -> str:
    """Convert a snake_case column name to camelCase.

    The first segment is kept as-is. Empty segments produced by leading,
    trailing or repeated underscores are skipped.

    Examples:
        >>> to_camel_case("user_id")
        'userId'
        >>> to_camel_case("select_")
        'select'
    """
    return _to_camel_case(validate_identifier(name))


def to_pascal_case(name: str) -> str:
    """Convert a snake_case column name to PascalCase.

    Examples:
        >>> to_pascal_case("user_id")
        'UserId'
    """
    return _to_pascal_case(validate_identifier(name))


def escape_reserved(name: str, reserved: ReservedWordSet) -> str:
    """Append a trailing underscore when *name* is a reserved word."""
    if name in reserved:
        return f"{name}_"
    return name


def _capitalize_first(segment: str) -> str:
    # str.capitalize() would also lowercase the tail (userId -> Userid)
    return segment[0].upper() + segment[1:]


def _segments(name: str) -> list[str]:
    return [segment for segment in name.split("_") if segment]


@lru_cache(maxsize=1024)
def _to_snake_case(name: str) -> str:
    return _SNAKE_SPLIT_PATTERN.sub("_", name).lower()


@lru_cache(maxsize=1024)
def _to_camel_case(name: str) -> str:
    segments = _segments(name)
    if not segments:
        return name
    head, *tail = segments
    return head + "".join(_capitalize_first(segment) for segment in tail)


@lru_cache(maxsize=1024)
def _to_pascal_case(name: str) -> str:
    segments = _segments(name)
    if not segments:
        return name
    return "".join(_capitalize_first(segment) for segment in segments)
