"""Unit tests for ReservedWordSet."""

from __future__ import annotations

from row_shape.core.reserved import RESERVED_WORDS, ReservedWordSet


class TestReservedWordSet:
    def test_default_words_loaded(self) -> None:
        words = ReservedWordSet()
        assert len(words) == len(RESERVED_WORDS)
        assert "select" in words

    def test_case_insensitive_lookup(self) -> None:
        words = ReservedWordSet()
        assert "SELECT" in words
        assert "Where" in words

    def test_non_reserved_word(self) -> None:
        assert "user_id" not in ReservedWordSet()

    def test_non_string_not_contained(self) -> None:
        assert None not in ReservedWordSet()
        assert 1 not in ReservedWordSet()

    def test_iteration_sorted(self) -> None:
        words = list(ReservedWordSet(["with", "add", "limit"]))
        assert words == ["add", "limit", "with"]

    def test_union_returns_new_set(self) -> None:
        base = ReservedWordSet()
        extended = base.union(["Status"])
        assert "status" in extended
        assert "status" not in base
        assert len(extended) == len(base) + 1

    def test_module_constant_lowercase(self) -> None:
        assert all(word == word.lower() for word in RESERVED_WORDS)
        assert "columnfamily" in RESERVED_WORDS
