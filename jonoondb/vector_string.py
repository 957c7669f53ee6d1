"""A column index that keeps string values in document-id order."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from .bitmap import Bitmap
from .exceptions import InvalidArgumentException
from .index_info import FieldType, IndexInfo, IndexStat
from .indexer import Constraint, ConstraintOperator, Indexer, OperandType, resolve_field
from .null_helpers import JONOONDB_NULL_STR, is_null
from .text import split

__all__ = ["VectorStringIndexer"]

_COMPARISONS: dict[ConstraintOperator, Callable[[str, str], bool]] = {
    ConstraintOperator.EQUAL: operator.eq,
    ConstraintOperator.LESS_THAN: operator.lt,
    ConstraintOperator.LESS_THAN_EQUAL: operator.le,
    ConstraintOperator.GREATER_THAN: operator.gt,
    ConstraintOperator.GREATER_THAN_EQUAL: operator.ge,
}
_LOWER = {
    ConstraintOperator.GREATER_THAN: operator.gt,
    ConstraintOperator.GREATER_THAN_EQUAL: operator.ge,
}
_UPPER = {
    ConstraintOperator.LESS_THAN: operator.lt,
    ConstraintOperator.LESS_THAN_EQUAL: operator.le,
}


def _operand(constraint: Constraint) -> str:
    """The operand as text; numbers are rendered the way the engine prints them."""
    if constraint.operand_type is OperandType.INTEGER:
        return str(int(constraint.value))
    if constraint.operand_type is OperandType.DOUBLE:
        return f"{float(constraint.value):.6f}"
    if isinstance(constraint.value, str):
        return constraint.value
    return ""


class VectorStringIndexer(Indexer):
    """Stores one string per document and answers comparisons by scanning.

    Documents whose field is missing hold the NULL string and never match.
    """

    def __init__(self, index_info: IndexInfo, field_type: FieldType) -> None:
        self._check_vector_index(index_info, field_type, self.is_valid_field_type(field_type))
        self._tokens = split(index_info.column_name, ".")
        self._stat = IndexStat(index_info, FieldType(field_type))
        self._values: list[str] = []

    @staticmethod
    def is_valid_field_type(field_type: Any) -> bool:
        return field_type == FieldType.STRING

    @property
    def index_stat(self) -> IndexStat:
        return self._stat

    def __len__(self) -> int:
        return len(self._values)

    def insert(self, document_id: int, document: Any) -> None:
        self._check_sequence(document_id, len(self._values), type(self).__name__)
        value = resolve_field(document, self._tokens)
        if value is None:
            value = JONOONDB_NULL_STR
        if not isinstance(value, str):
            raise InvalidArgumentException(
                f"Field {'.'.join(self._tokens)} holds {type(value).__name__}, not a string.",
                __file__,
                "VectorStringIndexer.insert",
                0,
            )
        self._values.append(value)

    def _select(self, predicate: Callable[[str], bool]) -> Bitmap:
        return Bitmap(
            i for i, value in enumerate(self._values) if predicate(value) and not is_null(value)
        )

    def filter(self, constraint: Constraint) -> Bitmap:
        compare = _COMPARISONS.get(constraint.op)
        if compare is None:
            raise self._unsupported_operator(constraint.op)
        target = _operand(constraint)
        return self._select(lambda x: compare(x, target))

    def filter_range(self, lower: Constraint, upper: Constraint) -> Bitmap:
        above = _LOWER.get(lower.op)
        below = _UPPER.get(upper.op)
        if above is None or below is None:
            return Bitmap()
        low = _operand(lower)
        high = _operand(upper)
        return self._select(lambda x: above(x, low) and below(x, high))

    def string_value(self, document_id: int) -> str | None:
        if 0 <= document_id < len(self._values):
            return self._values[document_id]
        return None