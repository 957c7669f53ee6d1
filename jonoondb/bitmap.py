"""Bitmaps of document ids with set algebra."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import IntEnum
from functools import reduce

from .exceptions import InvalidArgumentException

__all__ = ["BitmapType", "Bitmap"]


class BitmapType(IntEnum):
    EWAH_COMPRESSED_BITMAP = 1


class Bitmap:
    """A set of non-negative integer positions with a logical size in bits.

    The size in bits is one past the highest position ever added (or the
    larger of the operands' sizes for combined bitmaps); ``logical_not``
    flips every bit below it.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, positions: Iterable[int] = ()) -> None:
        self._bits = 0
        self._size = 0
        for position in positions:
            self.add(position)

    @classmethod
    def _from_bits(cls, bits: int, size: int) -> Bitmap:
        bitmap = cls()
        bitmap._bits = bits
        bitmap._size = size
        return bitmap

    @property
    def type(self) -> BitmapType:
        return BitmapType.EWAH_COMPRESSED_BITMAP

    @property
    def size_in_bits(self) -> int:
        return self._size

    def add(self, x: int) -> None:
        """Set the bit at position x."""
        if x < 0:
            raise InvalidArgumentException(
                f"Bitmap position {x} cannot be negative.", __file__, "Bitmap.add", 0
            )
        self._bits |= 1 << x
        self._size = max(self._size, x + 1)

    def copy(self) -> Bitmap:
        return Bitmap._from_bits(self._bits, self._size)

    def logical_and(self, other: Bitmap) -> Bitmap:
        return Bitmap._from_bits(self._bits & other._bits, max(self._size, other._size))

    def logical_or(self, other: Bitmap) -> Bitmap:
        return Bitmap._from_bits(self._bits | other._bits, max(self._size, other._size))

    def logical_xor(self, other: Bitmap) -> Bitmap:
        return Bitmap._from_bits(self._bits ^ other._bits, max(self._size, other._size))

    def logical_not(self) -> Bitmap:
        mask = (1 << self._size) - 1
        return Bitmap._from_bits(~self._bits & mask, self._size)

    def in_place_logical_not(self) -> None:
        self._bits = ~self._bits & ((1 << self._size) - 1)

    @staticmethod
    def and_all(bitmaps: Iterable[Bitmap]) -> Bitmap:
        """Intersect all bitmaps; an empty input gives an empty bitmap."""
        items = list(bitmaps)
        if not items:
            return Bitmap()
        return reduce(Bitmap.logical_and, items[1:], items[0].copy())

    @staticmethod
    def or_all(bitmaps: Iterable[Bitmap]) -> Bitmap:
        """Unite all bitmaps; an empty input gives an empty bitmap."""
        items = list(bitmaps)
        if not items:
            return Bitmap()
        return reduce(Bitmap.logical_or, items[1:], items[0].copy())

    def reset(self) -> None:
        self._bits = 0
        self._size = 0

    def is_empty(self) -> bool:
        return self._bits == 0

    def __iter__(self) -> Iterator[int]:
        bits = self._bits
        while bits:
            lowest = bits & -bits
            yield lowest.bit_length() - 1
            bits ^= lowest

    def __len__(self) -> int:
        return bin(self._bits).count("1")

    def __contains__(self, x: object) -> bool:
        return isinstance(x, int) and x >= 0 and bool(self._bits >> x & 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return self._bits == other._bits

    def __and__(self, other: Bitmap) -> Bitmap:
        return self.logical_and(other)

    def __or__(self, other: Bitmap) -> Bitmap:
        return self.logical_or(other)

    def __xor__(self, other: Bitmap) -> Bitmap:
        return self.logical_xor(other)

    def __invert__(self) -> Bitmap:
        return self.logical_not()

    def __repr__(self) -> str:
        return f"Bitmap({list(self)!r})"