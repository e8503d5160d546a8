"""Table mapping strategy protocol.

Every strategy implements this interface. A model mapper selects one
strategy at registration time and calls it for every row it reads and
every document it writes.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TableMappingStrategy(Protocol):
    """Translates between column names and document property names."""

    def property_name_to_column_name(self, name: str) -> str:
        """Return the column name for a document property name."""
        ...

    def column_name_to_property_name(self, name: str) -> str:
        """Return the document property name for a column name."""
        ...

    def to_storage_row(self, document: Any) -> Any:
        """Convert a document tree into a row-shaped tree."""
        ...

    def to_document(self, row: Any) -> Any:
        """Convert a row-shaped tree into a document tree."""
        ...

    def to_parameter_list(self, document: Any) -> list[Any]:
        """Flatten a document into positional bind parameters."""
        ...

    def create_document(self) -> Any:
        """Create a fresh, empty document."""
        ...
