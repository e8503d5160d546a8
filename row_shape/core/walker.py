"""Recursive structural conversion.

The walker rebuilds a document tree with every mapping key passed through
a name converter and every leaf passed through a ValueNormalizer. The input
is never mutated; the converted tree is only returned once fully built.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any

from row_shape.core.enums import ValueKind
from row_shape.core.exceptions import StructuralError
from row_shape.core.values import ValueNormalizer

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64
# Each nesting level costs up to three interpreter frames; stay well inside
# the default recursion limit of 1000.
MAX_DEPTH_LIMIT = 200


class StructuralWalker:
    """Rebuilds nested mappings and sequences with converted keys.

    Args:
        convert_key: Applied to every mapping key.
        normalizer: Classifies values and normalizes leaves.
        max_depth: Maximum container nesting depth, at most MAX_DEPTH_LIMIT.
            Deeper input raises StructuralError.
        mapping_factory: Creates the output mapping for each input mapping.
    """

    def __init__(
        self,
        convert_key: Callable[[str], str],
        normalizer: ValueNormalizer,
        max_depth: int = DEFAULT_MAX_DEPTH,
        mapping_factory: Callable[[], MutableMapping[str, Any]] = dict,
    ) -> None:
        if not 0 < max_depth <= MAX_DEPTH_LIMIT:
            raise ValueError(
                f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {max_depth}"
            )
        self._convert_key = convert_key
        self._normalizer = normalizer
        self._max_depth = max_depth
        self._mapping_factory = mapping_factory

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def walk(self, value: Any) -> Any:
        """Return a converted copy of *value*.

        Raises:
            StructuralError: On a reference cycle or when nesting exceeds
                max_depth.
            InvalidIdentifier: When a mapping key is not a valid identifier.
        """
        return self._walk(value, 0, set())

    def _walk(self, value: Any, depth: int, path: set[int]) -> Any:
        if self._normalizer.classify(value) is not ValueKind.STRUCTURAL:
            return self._normalizer.normalize_leaf(value)

        if depth > self._max_depth:
            raise StructuralError(f"nesting exceeds max_depth={self._max_depth}", depth)

        # Only containers on the current path count, so shared sub-trees are fine
        marker = id(value)
        if marker in path:
            raise StructuralError(
                f"reference cycle through {type(value).__name__} object", depth
            )
        path.add(marker)
        try:
            if isinstance(value, Mapping):
                return self._walk_mapping(value, depth, path)
            return self._walk_sequence(value, depth, path)
        finally:
            path.discard(marker)

    def _walk_mapping(
        self, value: Mapping[Any, Any], depth: int, path: set[int]
    ) -> MutableMapping[str, Any]:
        result = self._mapping_factory()
        for key, item in value.items():
            converted_key = self._convert_key(key)
            if converted_key in result:
                logger.warning(
                    "Key %r converts to %r which is already present; last value wins",
                    key,
                    converted_key,
                )
            result[converted_key] = self._walk(item, depth + 1, path)
        return result

    def _walk_sequence(self, value: Any, depth: int, path: set[int]) -> Any:
        items = [self._walk(item, depth + 1, path) for item in value]
        if isinstance(value, list):
            return items
        # tuple, set and frozenset keep their container type
        if isinstance(value, tuple) and hasattr(value, "_fields"):
            return type(value)(*items)
        return type(value)(items)
