"""Sentinel values the engine uses to represent NULL."""

from __future__ import annotations

import sys

__all__ = [
    "JONOONDB_NULL_STR",
    "JONOONDB_NULL_INT32",
    "JONOONDB_NULL_INT64",
    "JONOONDB_NULL_DOUBLE",
    "is_null",
]

JONOONDB_NULL_STR = "\0\0\0\0"
JONOONDB_NULL_INT32 = -(2**31)
JONOONDB_NULL_INT64 = -(2**63)
JONOONDB_NULL_DOUBLE = sys.float_info.min


def is_null(value: str | bytes | bytearray | int | float) -> bool:
    """Tell whether a value is the NULL sentinel for its type.

    A string or byte string is NULL when it is exactly four zero characters;
    integers are NULL at the minimum of int32 or int64; floats at the
    smallest positive normal double.
    """
    if isinstance(value, str):
        return value == JONOONDB_NULL_STR
    if isinstance(value, (bytes, bytearray)):
        return bytes(value) == b"\0\0\0\0"
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value in (JONOONDB_NULL_INT32, JONOONDB_NULL_INT64)
    if isinstance(value, float):
        return value == JONOONDB_NULL_DOUBLE
    raise TypeError(f"Unsupported type for NULL check: {type(value).__name__}")