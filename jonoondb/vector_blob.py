"""A column index that keeps blob values in document-id order."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from .bitmap import Bitmap
from .exceptions import InvalidArgumentException
from .index_info import FieldType, IndexInfo, IndexStat
from .indexer import Constraint, ConstraintOperator, Indexer, OperandType, resolve_field
from .text import split

__all__ = ["VectorBlobIndexer"]

_COMPARISONS: dict[ConstraintOperator, Callable[[bytes, bytes], bool]] = {
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


def _blob_operand(constraint: Constraint) -> bytes:
    value = constraint.value
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


class VectorBlobIndexer(Indexer):
    """Stores one blob per document and answers comparisons by scanning.

    Blobs sort after every other type, so greater-than comparisons against a
    non-blob operand match every document. Empty blobs stand for NULL and
    never match a blob operand.
    """

    def __init__(self, index_info: IndexInfo, field_type: FieldType) -> None:
        self._check_vector_index(index_info, field_type, self.is_valid_field_type(field_type))
        self._tokens = split(index_info.column_name, ".")
        self._stat = IndexStat(index_info, FieldType(field_type))
        self._values: list[bytes] = []

    @staticmethod
    def is_valid_field_type(field_type: Any) -> bool:
        return field_type == FieldType.BLOB

    @property
    def index_stat(self) -> IndexStat:
        return self._stat

    def __len__(self) -> int:
        return len(self._values)

    def insert(self, document_id: int, document: Any) -> None:
        self._check_sequence(document_id, len(self._values), type(self).__name__)
        value = resolve_field(document, self._tokens)
        if value is None:
            value = b""
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise InvalidArgumentException(
                f"Field {'.'.join(self._tokens)} holds {type(value).__name__}, not a blob.",
                __file__,
                "VectorBlobIndexer.insert",
                0,
            )
        self._values.append(bytes(value))

    def _select(self, predicate: Callable[[bytes], bool]) -> Bitmap:
        return Bitmap(i for i, value in enumerate(self._values) if value and predicate(value))

    def filter(self, constraint: Constraint) -> Bitmap:
        op = constraint.op
        compare = _COMPARISONS.get(op)
        if compare is None:
            raise self._unsupported_operator(op)
        if constraint.operand_type is OperandType.BLOB:
            target = _blob_operand(constraint)
            return self._select(lambda x: compare(x, target))
        if op in _LOWER:
            return Bitmap(range(len(self._values)))
        return Bitmap()

    def filter_range(self, lower: Constraint, upper: Constraint) -> Bitmap:
        lower_is_blob = lower.operand_type is OperandType.BLOB
        upper_is_blob = upper.operand_type is OperandType.BLOB
        if lower_is_blob and upper_is_blob:
            above = _LOWER.get(lower.op)
            below = _UPPER.get(upper.op)
            if above is None or below is None:
                return Bitmap()
            low = _blob_operand(lower)
            high = _blob_operand(upper)
            return self._select(lambda x: above(x, low) and below(x, high))
        if not lower_is_blob and upper_is_blob and upper.op in _UPPER:
            return self.filter(upper)
        return Bitmap()

    def blob_value(self, document_id: int) -> bytes | None:
        if 0 <= document_id < len(self._values):
            return self._values[document_id]
        return None