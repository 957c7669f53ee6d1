"""Index descriptions and field types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

__all__ = ["IndexType", "FieldType", "IndexInfo", "IndexStat", "field_type_name"]


class IndexType(IntEnum):
    INVERTED_COMPRESSED_BITMAP = 1
    VECTOR = 2


class FieldType(IntEnum):
    INT8 = 1
    INT16 = 2
    INT32 = 3
    INT64 = 4
    FLOAT = 5
    DOUBLE = 6
    STRING = 7
    BLOB = 8
    COMPONENT = 9


def field_type_name(field_type: FieldType) -> str:
    """Return the display name of a field type."""
    return FieldType(field_type).name


@dataclass
class IndexInfo:
    """Describes one index: its name, kind, indexed column and ordering."""

    name: str = ""
    type: IndexType = IndexType.INVERTED_COMPRESSED_BITMAP
    column_name: str = ""
    is_ascending: bool = True


@dataclass(frozen=True)
class IndexStat:
    """Statistics an indexer reports about itself."""

    index_info: IndexInfo = field(default_factory=IndexInfo)
    field_type: FieldType = FieldType.INT8