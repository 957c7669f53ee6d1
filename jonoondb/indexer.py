"""Query constraints and the interface shared by all column indexers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from .bitmap import Bitmap
from .exceptions import InvalidArgumentException, JonoonDBException
from .index_info import IndexInfo, IndexStat, IndexType, field_type_name

__all__ = [
    "OperandType",
    "ConstraintOperator",
    "Constraint",
    "Indexer",
    "resolve_field",
]


class OperandType(IntEnum):
    INTEGER = 1
    DOUBLE = 2
    STRING = 3
    BLOB = 4


class ConstraintOperator(IntEnum):
    EQUAL = 1
    LESS_THAN = 2
    LESS_THAN_EQUAL = 3
    GREATER_THAN = 4
    GREATER_THAN_EQUAL = 5
    MATCH = 6


@dataclass(frozen=True)
class Constraint:
    """A comparison of a column against one operand.

    When ``operand_type`` is not given it is taken from the type of ``value``.
    """

    op: ConstraintOperator
    value: int | float | str | bytes
    operand_type: OperandType | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "op", ConstraintOperator(self.op))
        value = self.value
        if isinstance(value, (bytearray, memoryview)):
            value = bytes(value)
            object.__setattr__(self, "value", value)
        if self.operand_type is not None:
            object.__setattr__(self, "operand_type", OperandType(self.operand_type))
            return
        if isinstance(value, int):
            inferred = OperandType.INTEGER
        elif isinstance(value, float):
            inferred = OperandType.DOUBLE
        elif isinstance(value, str):
            inferred = OperandType.STRING
        elif isinstance(value, bytes):
            inferred = OperandType.BLOB
        else:
            raise InvalidArgumentException(
                f"Operand of type {type(value).__name__} is not supported.",
                __file__,
                "Constraint.__post_init__",
                0,
            )
        object.__setattr__(self, "operand_type", inferred)


def resolve_field(document: Any, tokens: Sequence[str]) -> Any:
    """Follow the field path through nested mappings.

    Returns None when any step of the path is missing.
    """
    current = document
    for token in tokens:
        if not isinstance(current, Mapping) or token not in current:
            return None
        current = current[token]
    return current


class Indexer(ABC):
    """An index over one column of the documents in a collection.

    The value getters return None when the indexer does not hold the value.
    """

    @property
    @abstractmethod
    def index_stat(self) -> IndexStat:
        """Statistics describing this index."""

    @abstractmethod
    def insert(self, document_id: int, document: Any) -> None:
        """Add the column value of a document to the index."""

    @abstractmethod
    def filter(self, constraint: Constraint) -> Bitmap:
        """Return the ids of documents that satisfy the constraint."""

    @abstractmethod
    def filter_range(self, lower: Constraint, upper: Constraint) -> Bitmap:
        """Return the ids of documents between a lower and an upper bound."""

    def integer_value(self, document_id: int) -> int | None:
        return None

    def double_value(self, document_id: int) -> float | None:
        return None

    def string_value(self, document_id: int) -> str | None:
        return None

    def blob_value(self, document_id: int) -> bytes | None:
        return None

    def integer_values(self, document_ids: Iterable[int]) -> list[int] | None:
        return None

    def double_values(self, document_ids: Iterable[int]) -> list[float] | None:
        return None

    @classmethod
    def _check_vector_index(
        cls, index_info: IndexInfo, field_type: Any, field_type_valid: bool
    ) -> None:
        name = cls.__name__
        if not index_info.name:
            message = "Argument indexInfo has empty name."
        elif not index_info.column_name:
            message = "Argument indexInfo has empty column name."
        elif index_info.type != IndexType.VECTOR:
            message = f"Argument indexInfo can only have IndexType VECTOR for {name}."
        elif not field_type_valid:
            try:
                type_name = field_type_name(field_type)
            except ValueError:
                type_name = str(field_type)
            message = f"Argument fieldType {type_name} is not valid for {name}."
        else:
            return
        raise InvalidArgumentException(message, __file__, f"{name}.__init__", 0)

    @staticmethod
    def _unsupported_operator(op: ConstraintOperator) -> JonoonDBException:
        return JonoonDBException(
            f"IndexConstraintOperator type {int(op)} is not valid.",
            __file__,
            "Indexer.filter",
            0,
        )

    @staticmethod
    def _check_sequence(document_id: int, expected: int, owner: str) -> None:
        if document_id != expected:
            raise InvalidArgumentException(
                f"Document id {document_id} is out of sequence; expected {expected}.",
                __file__,
                f"{owner}.insert",
                0,
            )