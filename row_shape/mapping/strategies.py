"""Table mapping strategies.

Strategies translate between storage column names and document property
names, and convert whole documents in either direction. A strategy is
immutable once built and may be shared across threads.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, MutableMapping
from typing import Any

from row_shape.core.casing import (
    escape_reserved,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
    validate_identifier,
)
from row_shape.core.config import MappingConfig
from row_shape.core.enums import MappingStyle, ValueKind
from row_shape.core.reserved import RESERVED_WORDS, ReservedWordSet
from row_shape.core.values import MAX_SAFE_INTEGER, ValueNormalizer
from row_shape.core.walker import DEFAULT_MAX_DEPTH, StructuralWalker

logger = logging.getLogger(__name__)


class BaseTableMapping:
    """Shared implementation of the TableMappingStrategy protocol.

    Subclasses override the two name hooks; structural conversion is the
    same for every strategy.

    Args:
        convert_big_integer_to_string: Convert big integers to decimal
            strings in both directions.
        max_depth: Maximum nesting depth accepted by the structural walkers.
        max_safe_integer: Magnitude above which an ``int`` is a big integer.
        reserved_words: Reserved identifiers escaped in column names.
        document_factory: Creates document mappings on the read path.
    """

    def __init__(
        self,
        convert_big_integer_to_string: bool = False,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        max_safe_integer: int = MAX_SAFE_INTEGER,
        reserved_words: Iterable[str] = RESERVED_WORDS,
        document_factory: Callable[[], MutableMapping[str, Any]] = dict,
    ) -> None:
        self._reserved = ReservedWordSet(reserved_words)
        self._normalizer = ValueNormalizer(convert_big_integer_to_string, max_safe_integer)
        self._document_factory = document_factory
        self._storage_walker = StructuralWalker(
            self.property_name_to_column_name, self._normalizer, max_depth
        )
        self._document_walker = StructuralWalker(
            self.column_name_to_property_name, self._normalizer, max_depth, document_factory
        )
        logger.debug(
            "Created %s (convert_big_integer_to_string=%s, max_depth=%d)",
            type(self).__name__,
            convert_big_integer_to_string,
            max_depth,
        )

    @property
    def reserved_words(self) -> ReservedWordSet:
        return self._reserved

    @property
    def convert_big_integer_to_string(self) -> bool:
        return self._normalizer.convert_big_integer_to_string

    def property_name_to_column_name(self, name: str) -> str:
        """Identity conversion."""
        return validate_identifier(name)

    def column_name_to_property_name(self, name: str) -> str:
        """Identity conversion."""
        return validate_identifier(name)

    def to_storage_row(self, document: Any) -> Any:
        """Convert a document into row shape, converting keys to column names."""
        return self._storage_walker.walk(document)

    def to_document(self, row: Any) -> Any:
        """Convert a row into document shape, converting keys to property names."""
        return self._document_walker.walk(row)

    def to_parameter_list(self, document: Any) -> list[Any]:
        """Flatten *document* into an ordered list of bind parameters.

        * ``None`` yields an empty list.
        * A mapping yields its values in iteration order, each converted
          with to_storage_row.
        * A sequence is already positional; each element is converted.
        * Any other value yields a single-element list holding it unchanged.
        """
        if document is None:
            return []
        if self._normalizer.classify(document) is not ValueKind.STRUCTURAL:
            return [document]
        values = document.values() if isinstance(document, Mapping) else document
        return [self.to_storage_row(value) for value in values]

    def create_document(self) -> MutableMapping[str, Any]:
        """Create a fresh, empty document."""
        return self._document_factory()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"convert_big_integer_to_string={self.convert_big_integer_to_string})"
        )


class DefaultTableMapping(BaseTableMapping):
    """Strategy that keeps names unchanged.

    Documents are still copied recursively and leaves normalized.
    """


class _UnderscoreTableMapping(BaseTableMapping):
    """Snake-case columns with reserved-word escaping."""

    def property_name_to_column_name(self, name: str) -> str:
        """Convert a property name to snake case, escaping reserved words."""
        return escape_reserved(to_snake_case(name), self._reserved)


class UnderscoreToCamelCaseMapping(_UnderscoreTableMapping):
    """Maps snake_case columns to camelCase properties.

    The conversion does not check the source format: columns are assumed to
    be snake case and properties camel case.
    """

    def column_name_to_property_name(self, name: str) -> str:
        """Convert a snake case column name to camel case."""
        return to_camel_case(name)


class UnderscoreToPascalCaseMapping(_UnderscoreTableMapping):
    """Maps snake_case columns to PascalCase properties."""

    def column_name_to_property_name(self, name: str) -> str:
        """Convert a snake case column name to Pascal case."""
        return to_pascal_case(name)


_STRATEGIES: dict[MappingStyle, type[BaseTableMapping]] = {
    MappingStyle.DEFAULT: DefaultTableMapping,
    MappingStyle.UNDERSCORE_TO_CAMEL_CASE: UnderscoreToCamelCaseMapping,
    MappingStyle.UNDERSCORE_TO_PASCAL_CASE: UnderscoreToPascalCaseMapping,
}


def create_strategy(config: MappingConfig | None = None) -> BaseTableMapping:
    """Build the strategy selected by *config*.

    Args:
        config: Mapping configuration. Defaults to ``MappingConfig()``.

    Returns:
        A new strategy instance.
    """
    if config is None:
        config = MappingConfig()
    strategy_class = _STRATEGIES[config.style]
    return strategy_class(
        config.convert_big_integer_to_string,
        max_depth=config.max_depth,
        max_safe_integer=config.max_safe_integer,
        reserved_words=ReservedWordSet().union(config.reserved_words),
    )
