"""Reserved CQL keywords.

Column names that collide with one of these words are escaped with a
trailing underscore by the snake-case strategies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

RESERVED_WORDS: frozenset[str] = frozenset(
    word.lower()
    for word in (
        "ADD", "ALLOW", "ALTER", "AND", "APPLY", "ASC", "AUTHORIZE", "BATCH",
        "BEGIN", "BY", "COLUMNFAMILY", "CREATE", "DELETE", "DESC", "DESCRIBE",
        "DROP", "ENTRIES", "EXECUTE", "FROM", "FULL", "GRANT", "IF", "IN",
        "INDEX", "INFINITY", "INSERT", "INTO", "KEYSPACE", "LIMIT", "MODIFY",
        "NAN", "NORECURSIVE", "NOT", "NULL", "OF", "ON", "OR", "ORDER",
        "PRIMARY", "RENAME", "REPLACE", "REVOKE", "SCHEMA", "SELECT", "SET",
        "TABLE", "TO", "TOKEN", "TRUNCATE", "UNLOGGED", "UPDATE", "USE",
        "USING", "VIEW", "WHERE", "WITH",
    )
)


class ReservedWordSet:
    """Immutable, case-insensitive set of reserved identifiers.

    Args:
        words: Reserved words. Defaults to the CQL keyword list.
    """

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = RESERVED_WORDS) -> None:
        self._words = frozenset(word.lower() for word in words)

    def __contains__(self, word: Any) -> bool:
        return isinstance(word, str) and word.lower() in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"ReservedWordSet({len(self._words)} words)"

    def union(self, extra: Iterable[str]) -> ReservedWordSet:
        """Return a new set containing these words plus *extra*."""
        return ReservedWordSet(self._words | {word.lower() for word in extra})
