"""A memory mapped file with a moving write position."""

from __future__ import annotations

import mmap
import os
from enum import IntEnum

from .exceptions import (
    ApiMisuseException,
    FileIOException,
    IndexOutOfBoundException,
    InvalidArgumentException,
)

__all__ = ["MemoryMappedFileMode", "MemoryMappedFile"]


class MemoryMappedFileMode(IntEnum):
    READ_ONLY = 1
    READ_WRITE = 2


class MemoryMappedFile:
    """Maps a whole existing file into memory.

    In read-write mode, data is appended at the current write offset, which
    starts at ``write_offset``. The ``asynchronous`` flag is kept for callers;
    flushes are always completed before ``flush`` returns.
    """

    def __init__(
        self,
        file_name: str | os.PathLike[str],
        mode: MemoryMappedFileMode,
        write_offset: int = 0,
        asynchronous: bool = False,
    ) -> None:
        if not isinstance(mode, MemoryMappedFileMode):
            raise InvalidArgumentException(
                f"Mode value {mode} is not supported for memory mapped files.",
                __file__,
                "MemoryMappedFile.__init__",
                0,
            )
        self._file_name = os.fspath(file_name)
        self._mode = mode
        self._asynchronous = asynchronous
        self._page_size = mmap.PAGESIZE
        writable = mode is MemoryMappedFileMode.READ_WRITE
        access = mmap.ACCESS_WRITE if writable else mmap.ACCESS_READ
        try:
            with open(self._file_name, "r+b" if writable else "rb") as fh:
                self._map = mmap.mmap(fh.fileno(), 0, access=access)
        except (OSError, ValueError) as exc:
            raise FileIOException(
                f"Unable to map file {self._file_name}: {exc}",
                __file__,
                "MemoryMappedFile.__init__",
                0,
            ) from exc
        self._write_offset = 0
        if writable:
            self.current_write_offset = write_offset

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def mode(self) -> MemoryMappedFileMode:
        return self._mode

    @property
    def asynchronous(self) -> bool:
        return self._asynchronous

    @property
    def size(self) -> int:
        return len(self._map)

    @property
    def current_write_offset(self) -> int:
        return self._write_offset

    @current_write_offset.setter
    def current_write_offset(self, offset: int) -> None:
        if offset < 0 or offset > len(self._map):
            raise InvalidArgumentException(
                f"Write offset {offset} is outside the mapped file of size {len(self._map)}.",
                __file__,
                "MemoryMappedFile.current_write_offset",
                0,
            )
        self._write_offset = offset

    def write(self, data: bytes | bytearray | memoryview) -> None:
        """Write data at the current write offset and advance it."""
        if self._mode is not MemoryMappedFileMode.READ_WRITE:
            raise ApiMisuseException(
                "Cannot write to a memory mapped file opened read-only.",
                __file__,
                "MemoryMappedFile.write",
                0,
            )
        end = self._write_offset + len(data)
        if end > len(self._map):
            raise IndexOutOfBoundException(
                f"Writing {len(data)} bytes at offset {self._write_offset} exceeds "
                f"the mapped size {len(self._map)}.",
                __file__,
                "MemoryMappedFile.write",
                0,
            )
        self._map[self._write_offset:end] = bytes(data)
        self._write_offset = end

    def view(self, offset: int, length: int) -> bytes:
        """Return a copy of ``length`` bytes starting at ``offset``."""
        if offset < 0 or length < 0 or offset + length > len(self._map):
            raise IndexOutOfBoundException(
                f"Range [{offset}, {offset + length}) is outside the mapped size {len(self._map)}.",
                __file__,
                "MemoryMappedFile.view",
                0,
            )
        return self._map[offset:offset + length]

    def flush(self, offset: int, num_bytes: int) -> None:
        """Flush a byte range to disk, aligning its start to a page boundary."""
        quotient, remainder = divmod(offset, self._page_size)
        aligned = quotient * self._page_size
        length = min(num_bytes + remainder, len(self._map) - aligned)
        try:
            self._map.flush(aligned, length)
        except (OSError, ValueError) as exc:
            raise FileIOException(
                "Unexpected error occured while flushing memory mapped file.",
                __file__,
                "MemoryMappedFile.flush",
                0,
            ) from exc

    def close(self) -> None:
        if not self._map.closed:
            self._map.close()

    def __enter__(self) -> MemoryMappedFile:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()