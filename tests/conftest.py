"""Shared test fixtures."""

from __future__ import annotations

import pytest

from row_shape.mapping.strategies import (
    DefaultTableMapping,
    UnderscoreToCamelCaseMapping,
    UnderscoreToPascalCaseMapping,
)


@pytest.fixture
def default_mapping() -> DefaultTableMapping:
    return DefaultTableMapping()


@pytest.fixture
def camel_mapping() -> UnderscoreToCamelCaseMapping:
    return UnderscoreToCamelCaseMapping()


@pytest.fixture
def pascal_mapping() -> UnderscoreToPascalCaseMapping:
    return UnderscoreToPascalCaseMapping()


@pytest.fixture
def make_cycle():
    """Helper to build a self-referencing structure.

    Usage:
        doc = make_cycle("dict")  # {"self": <doc>}
        doc = make_cycle("list")  # [<doc>]
    """

    def _make(kind: str):
        if kind == "dict":
            doc: dict = {"userId": 1}
            doc["self"] = doc
            return doc
        items: list = [1]
        items.append(items)
        return items

    return _make
