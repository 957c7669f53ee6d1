"""Base-128 variable-length integer and zig-zag encoding."""

from __future__ import annotations

import sys

__all__ = [
    "MAX_VARINT_BYTES",
    "encode_varint",
    "decode_varint",
    "zigzag_encode32",
    "zigzag_decode32",
    "zigzag_encode64",
    "zigzag_decode64",
    "on_little_endian_machine",
]

MAX_VARINT_BYTES = 10

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def encode_varint(value: int) -> bytes:
    """Encode a non-negative integer as a little-endian base-128 varint."""
    if value < 0:
        raise ValueError("Varint encoding requires a non-negative integer.")
    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def decode_varint(data: bytes | bytearray | memoryview) -> tuple[int, int]:
    """Decode a varint from the start of data.

    Returns the value and the number of bytes consumed. Raises ValueError
    if the varint is longer than MAX_VARINT_BYTES or the data ends early.
    """
    result = 0
    for count, byte in enumerate(bytes(data[:MAX_VARINT_BYTES]), start=1):
        result |= (byte & 0x7F) << (7 * (count - 1))
        if not byte & 0x80:
            return result, count
    if len(data) >= MAX_VARINT_BYTES:
        raise ValueError(f"Varint is longer than {MAX_VARINT_BYTES} bytes.")
    raise ValueError("Data ended before the varint was complete.")


def zigzag_encode32(n: int) -> int:
    """Map a signed 32-bit integer onto an unsigned one."""
    return ((n << 1) ^ (n >> 31)) & _MASK32


def zigzag_decode32(n: int) -> int:
    """Inverse of zigzag_encode32."""
    n &= _MASK32
    return (n >> 1) ^ -(n & 1)


def zigzag_encode64(n: int) -> int:
    """Map a signed 64-bit integer onto an unsigned one."""
    return ((n << 1) ^ (n >> 63)) & _MASK64


def zigzag_decode64(n: int) -> int:
    """Inverse of zigzag_encode64."""
    n &= _MASK64
    return (n >> 1) ^ -(n & 1)


def on_little_endian_machine() -> bool:
    """Tell whether the host stores integers little-endian."""
    return sys.byteorder == "little"