"""A column index that keeps integer values in document-id order."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from typing import Any

from .bitmap import Bitmap
from .exceptions import InvalidArgumentException
from .index_info import FieldType, IndexInfo, IndexStat
from .indexer import Constraint, ConstraintOperator, Indexer, OperandType, resolve_field
from .null_helpers import JONOONDB_NULL_INT32, JONOONDB_NULL_INT64
from .text import split

__all__ = ["VectorIntegerIndexer"]

_VALID_TYPES = frozenset({FieldType.INT8, FieldType.INT16, FieldType.INT32, FieldType.INT64})
_INT32_RANGE = (-(2**31), 2**31 - 1)
_INT64_RANGE = (-(2**63), 2**63 - 1)


def _ceil(value: float) -> int | float:
    return math.ceil(value) if math.isfinite(value) else value


def _floor(value: float) -> int | float:
    return math.floor(value) if math.isfinite(value) else value


def _upper_bound(constraint: Constraint, or_equal: bool) -> int | float:
    """Exclusive upper bound such that ``x < bound`` matches the constraint."""
    if constraint.operand_type is OperandType.DOUBLE:
        return _ceil(float(constraint.value))
    if constraint.operand_type is OperandType.INTEGER:
        return constraint.value + 1 if or_equal else constraint.value
    # Integers order before text and blobs.
    return math.inf


def _lower_bound(constraint: Constraint, or_equal: bool) -> int | float:
    """Exclusive lower bound such that ``x > bound`` matches the constraint."""
    if constraint.operand_type is OperandType.DOUBLE:
        return _floor(float(constraint.value))
    if constraint.operand_type is OperandType.INTEGER:
        return constraint.value - 1 if or_equal else constraint.value
    return math.inf


class VectorIntegerIndexer(Indexer):
    """Stores one integer per document and answers comparisons by scanning."""

    def __init__(self, index_info: IndexInfo, field_type: FieldType) -> None:
        self._check_vector_index(index_info, field_type, self.is_valid_field_type(field_type))
        field_type = FieldType(field_type)
        self._tokens = split(index_info.column_name, ".")
        self._stat = IndexStat(index_info, field_type)
        if field_type is FieldType.INT64:
            self._min, self._max = _INT64_RANGE
            self._null = JONOONDB_NULL_INT64
        else:
            self._min, self._max = _INT32_RANGE
            self._null = JONOONDB_NULL_INT32
        self._values: list[int] = []

    @staticmethod
    def is_valid_field_type(field_type: Any) -> bool:
        return field_type in _VALID_TYPES

    @property
    def index_stat(self) -> IndexStat:
        return self._stat

    def __len__(self) -> int:
        return len(self._values)

    def insert(self, document_id: int, document: Any) -> None:
        self._check_sequence(document_id, len(self._values), type(self).__name__)
        value = resolve_field(document, self._tokens)
        if value is None:
            value = self._null
        if not isinstance(value, int):
            raise InvalidArgumentException(
                f"Field {'.'.join(self._tokens)} holds {type(value).__name__}, not an integer.",
                __file__,
                "VectorIntegerIndexer.insert",
                0,
            )
        if not self._min <= value <= self._max:
            raise InvalidArgumentException(
                f"Value {value} does not fit the field type {self._stat.field_type.name}.",
                __file__,
                "VectorIntegerIndexer.insert",
                0,
            )
        self._values.append(int(value))

    def _select(self, predicate: Callable[[int], bool]) -> Bitmap:
        return Bitmap(i for i, value in enumerate(self._values) if predicate(value))

    def filter(self, constraint: Constraint) -> Bitmap:
        op = constraint.op
        if op is ConstraintOperator.EQUAL:
            return self._equal(constraint)
        if op in (ConstraintOperator.LESS_THAN, ConstraintOperator.LESS_THAN_EQUAL):
            bound = _upper_bound(constraint, op is ConstraintOperator.LESS_THAN_EQUAL)
            return self._select(lambda x: x < bound)
        if op in (ConstraintOperator.GREATER_THAN, ConstraintOperator.GREATER_THAN_EQUAL):
            bound = _lower_bound(constraint, op is ConstraintOperator.GREATER_THAN_EQUAL)
            return self._select(lambda x: x > bound)
        raise self._unsupported_operator(op)

    def _equal(self, constraint: Constraint) -> Bitmap:
        if constraint.operand_type is OperandType.INTEGER:
            target = constraint.value
        elif constraint.operand_type is OperandType.DOUBLE:
            number = float(constraint.value)
            if not number.is_integer():
                return Bitmap()
            target = int(number)
        else:
            return Bitmap()
        return self._select(lambda x: x == target)

    def filter_range(self, lower: Constraint, upper: Constraint) -> Bitmap:
        low = _lower_bound(lower, lower.op is ConstraintOperator.GREATER_THAN_EQUAL)
        high = _upper_bound(upper, upper.op is ConstraintOperator.LESS_THAN_EQUAL)
        return self._select(lambda x: low < x < high)

    def integer_value(self, document_id: int) -> int | None:
        if 0 <= document_id < len(self._values):
            return self._values[document_id]
        return None

    def integer_values(self, document_ids: Iterable[int]) -> list[int] | None:
        ids = list(document_ids)
        if any(not 0 <= i < len(self._values) for i in ids):
            return None
        return [self._values[i] for i in ids]