"""Contract tests for table mapping strategy protocol compliance."""

from __future__ import annotations

import pytest

from row_shape.mapping.protocol import TableMappingStrategy
from row_shape.mapping.strategies import (
    DefaultTableMapping,
    UnderscoreToCamelCaseMapping,
    UnderscoreToPascalCaseMapping,
)

STRATEGIES = [DefaultTableMapping, UnderscoreToCamelCaseMapping, UnderscoreToPascalCaseMapping]


@pytest.mark.parametrize("strategy_class", STRATEGIES)
class TestStrategyProtocol:
    def test_implements_protocol(self, strategy_class) -> None:
        assert isinstance(strategy_class(), TableMappingStrategy)

    def test_round_trip(self, strategy_class) -> None:
        strategy = strategy_class()
        row = {"video_id": 1, "meta_data": {"frame_rate": 30}, "tags": ["a", "b"]}
        assert strategy.to_storage_row(strategy.to_document(row)) == row

    def test_parameter_list_contract(self, strategy_class) -> None:
        strategy = strategy_class()
        assert strategy.to_parameter_list(None) == []
        assert strategy.to_parameter_list(5) == [5]
        assert strategy.to_parameter_list({"a": 1, "b": 2}) == [1, 2]

    def test_create_document_is_empty(self, strategy_class) -> None:
        assert strategy_class().create_document() == {}

    def test_to_document_returns_new_object(self, strategy_class) -> None:
        row = {"id": 1}
        assert strategy_class().to_document(row) is not row


class TestCustomStrategy:
    def test_duck_typed_strategy(self) -> None:
        class UpperCaseMapping:
            def property_name_to_column_name(self, name: str) -> str:
                return name.upper()

            def column_name_to_property_name(self, name: str) -> str:
                return name.lower()

            def to_storage_row(self, document):
                return document

            def to_document(self, row):
                return row

            def to_parameter_list(self, document):
                return list(document.values())

            def create_document(self):
                return {}

        assert isinstance(UpperCaseMapping(), TableMappingStrategy)
