"""A bounded, thread-safe pool of reusable objects."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

from .exceptions import InvalidArgumentException, JonoonDBException

__all__ = ["ObjectPool"]

T = TypeVar("T")


class ObjectPool(Generic[T]):
    """Keeps up to ``capacity`` idle objects for reuse.

    When the pool is empty, ``take`` makes a fresh object with the allocator.
    When the pool is full, ``give_back`` hands the object to the deallocator.
    """

    def __init__(
        self,
        initial_size: int,
        capacity: int,
        allocator: Callable[[], T | None],
        deallocator: Callable[[T], None],
        reset: Callable[[T], None] | None = None,
    ) -> None:
        if capacity <= 0 or capacity < initial_size:
            raise InvalidArgumentException(
                "Argument poolCapacity cannot be 0 or less than initialPoolSize.",
                __file__,
                "ObjectPool.__init__",
                0,
            )
        if allocator is None:
            raise InvalidArgumentException(
                "Argument objectAllocatorFunc cannot be empty.",
                __file__,
                "ObjectPool.__init__",
                0,
            )
        if deallocator is None:
            raise InvalidArgumentException(
                "Argument objectDeallocatorFunc cannot be empty.",
                __file__,
                "ObjectPool.__init__",
                0,
            )
        self._capacity = capacity
        self._allocator = allocator
        self._deallocator = deallocator
        self._reset = reset
        self._lock = threading.Lock()
        self._idle: list[T] = []

        try:
            for _ in range(initial_size):
                obj = allocator()
                if obj is None:
                    raise JonoonDBException(
                        "Object allocation failed. ObjectAllocatorFunc returned nullptr.",
                        __file__,
                        "ObjectPool.__init__",
                        0,
                    )
                self._idle.append(obj)
        except BaseException:
            for obj in self._idle:
                deallocator(obj)
            self._idle.clear()
            raise

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def available(self) -> int:
        """Number of idle objects currently held by the pool."""
        with self._lock:
            return len(self._idle)

    def take(self) -> T:
        """Hand out an idle object, or allocate a new one if none is left."""
        with self._lock:
            if self._idle:
                return self._idle.pop()
        return self._allocator()

    def give_back(self, obj: T) -> None:
        """Return an object; it is reset and kept, or dropped if the pool is full."""
        with self._lock:
            if len(self._idle) < self._capacity:
                if self._reset is not None:
                    self._reset(obj)
                self._idle.append(obj)
                return
        self._deallocator(obj)

    @contextmanager
    def lease(self) -> Iterator[T]:
        """Take an object for the duration of a with-block."""
        obj = self.take()
        try:
            yield obj
        finally:
            if obj is not None:
                self.give_back(obj)

    def close(self) -> None:
        """Deallocate every idle object held by the pool."""
        with self._lock:
            idle, self._idle = self._idle, []
        for obj in idle:
            self._deallocator(obj)

    def __enter__(self) -> ObjectPool[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()