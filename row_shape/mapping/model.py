"""Row-to-model mapper.

Converts rows with a table mapping strategy, then builds dataclasses,
Pydantic models or plain classes from the converted document.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from row_shape.core.enums import ValueKind
from row_shape.core.exceptions import ColumnMismatchError
from row_shape.core.values import classify
from row_shape.mapping.protocol import TableMappingStrategy
from row_shape.mapping.strategies import DefaultTableMapping

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _is_pydantic_model(cls: type) -> bool:
    """Check if a class is a Pydantic BaseModel."""
    return isinstance(cls, type) and issubclass(cls, BaseModel)


def _is_model_instance(obj: Any) -> bool:
    """Check if *obj* is a Pydantic model, dataclass or plain object instance.

    Mappings, sequences and scalars without an instance ``__dict__`` are not.
    """
    if isinstance(obj, type):
        return False
    if isinstance(obj, BaseModel):
        return True
    if dataclasses.is_dataclass(obj):
        return True
    return classify(obj) is ValueKind.SCALAR and hasattr(obj, "__dict__")


def _as_mapping(obj: Any) -> Mapping[str, Any]:
    """Return the fields of a model instance as a mapping."""
    if isinstance(obj, Mapping):
        return obj
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    return vars(obj)


def _rename_keys(
    source: Mapping[str, Any],
    renames: dict[str, str],
    target: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Copy *source* into *target*, renaming keys found in *renames*."""
    for key, value in source.items():
        new_key = renames.get(key, key)
        if new_key in target:
            logger.warning(
                "Key %r renames to %r which is already present; last value wins",
                key,
                new_key,
            )
        target[new_key] = value
    return target


class ModelMapper(Generic[T]):
    """Row-to-model mapper driven by a table mapping strategy.

    Detection order for the target class:
    1. Pydantic BaseModel -> model_validate(document)
    2. dataclass -> target_class(**document)
    3. Plain class -> target_class(**document)
    4. None -> the converted document itself

    Args:
        target_class: The class to construct from row data.
        strategy: Name and shape conversion. Defaults to DefaultTableMapping.
        columns: Column-name to property-name overrides, consulted before
            the strategy.
    """

    def __init__(
        self,
        target_class: type[T] | None = None,
        strategy: TableMappingStrategy | None = None,
        columns: dict[str, str] | None = None,
    ) -> None:
        self._target_class = target_class
        self._strategy: TableMappingStrategy = strategy or DefaultTableMapping()
        self._columns = dict(columns or {})
        self._properties = {prop: column for column, prop in self._columns.items()}
        self._is_pydantic = target_class is not None and _is_pydantic_model(target_class)

    @property
    def strategy(self) -> TableMappingStrategy:
        return self._strategy

    @property
    def target_class(self) -> type[T] | None:
        return self._target_class

    def get_column_name(self, property_name: str) -> str:
        """Return the column for *property_name*, honouring overrides."""
        if property_name in self._properties:
            return self._properties[property_name]
        return self._strategy.property_name_to_column_name(property_name)

    def get_property_name(self, column_name: str) -> str:
        """Return the property for *column_name*, honouring overrides."""
        if column_name in self._columns:
            return self._columns[column_name]
        return self._strategy.column_name_to_property_name(column_name)

    def to_document(self, row: Mapping[str, Any]) -> Any:
        """Convert a row into a document, applying column overrides at the top level."""
        document = self._strategy.to_document(row)
        if not self._columns:
            return document
        # The strategy already converted every key; swap in the overrides
        renames = {
            self._strategy.column_name_to_property_name(column): prop
            for column, prop in self._columns.items()
            if column in row
        }
        return _rename_keys(document, renames, self._strategy.create_document())

    def map_one(self, row: Mapping[str, Any]) -> T:
        """Map a single row to a target_class instance."""
        document = self.to_document(row)
        if self._target_class is None:
            return document  # type: ignore[no-any-return]

        if self._is_pydantic:
            try:
                return self._target_class.model_validate(document)  # type: ignore[attr-defined, no-any-return]
            except ValidationError as e:
                raise ColumnMismatchError(
                    self._target_class.__name__,
                    [str(e)],
                ) from e

        # For dataclasses and plain classes, try **kwargs construction
        try:
            return self._target_class(**document)
        except TypeError as e:
            raise ColumnMismatchError(
                self._target_class.__name__,
                [str(e)],
            ) from e

    def map_many(self, rows: list[Mapping[str, Any]]) -> list[T]:
        """Map all rows via map_one."""
        return [self.map_one(row) for row in rows]

    def to_row(self, obj: Any) -> dict[str, Any]:
        """Convert a model instance or document into a storage row."""
        fields = _as_mapping(obj)
        row = self._strategy.to_storage_row(fields)
        if not self._properties:
            return row  # type: ignore[no-any-return]
        renames = {
            self._strategy.property_name_to_column_name(prop): column
            for prop, column in self._properties.items()
            if prop in fields
        }
        return _rename_keys(row, renames, {})  # type: ignore[return-value]

    def to_parameters(self, obj: Any) -> list[Any]:
        """Flatten a model instance or document into positional bind parameters."""
        if _is_model_instance(obj):
            obj = _as_mapping(obj)
        return self._strategy.to_parameter_list(obj)
