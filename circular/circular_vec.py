"""Fixed-length circular sequence with a wrapping read cursor."""

from __future__ import annotations

import operator
from collections.abc import Iterable
from typing import Generic, TypeVar, overload

from circular.errors import EmptySourceError, IndexOutOfRangeError
from circular.logging import get_circular_logger

_LOG = get_circular_logger("vec")

T = TypeVar("T")


class Slot(Generic[T]):
    """Write handle for one stored element, returned by ``CircularVec.next_mut``.

    The slot addresses an absolute position, not the cursor. Use it before the
    next call into the owning container; it keeps pointing at the same index.
    """

    __slots__ = ("_items", "_index")

    def __init__(self, items: list[T], index: int) -> None:
        self._items = items
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    @property
    def value(self) -> T:
        return self._items[self._index]

    @value.setter
    def value(self, new_value: T) -> None:
        self._items[self._index] = new_value

    def __repr__(self) -> str:
        return f"Slot(index={self._index}, value={self.value!r})"


class CircularVec(Generic[T]):
    """Fixed-length sequence whose read cursor wraps to the start after the end.

    Items are supplied once at construction and the length never changes.
    ``next`` never runs dry, so the container is intentionally not iterable.
    """

    __slots__ = ("_items", "_cursor")

    # Iterating would never terminate; also blocks the __getitem__ fallback.
    __iter__ = None

    def __init__(self, items: Iterable[T]) -> None:
        self._items: list[T] = list(items)
        if not self._items:
            raise EmptySourceError("CircularVec requires at least one item")
        self._cursor = 0
        _LOG.debug("circular_vec.created", extra={"length": len(self._items)})

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> CircularVec[T]:
        return cls(items)

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._items)

    def next(self) -> T:
        """Return the item under the cursor, then advance the cursor."""
        return self._items[self._advance()]

    def next_mut(self) -> Slot[T]:
        """Like ``next`` but return a ``Slot`` for replacing the item in place."""
        return Slot(self._items, self._advance())

    def skip(self, n: int) -> None:
        """Advance the cursor ``n`` positions without reading."""
        steps = operator.index(n)
        if steps < 0:
            raise ValueError(f"skip count must be >= 0, got {steps}")
        self._cursor = (self._cursor + steps) % len(self._items)

    @overload
    def __getitem__(self, key: int) -> T: ...

    @overload
    def __getitem__(self, key: slice) -> tuple[T, ...]: ...

    def __getitem__(self, key: int | slice) -> T | tuple[T, ...]:
        """Read by absolute position; the cursor is neither used nor moved."""
        length = len(self._items)
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise ValueError("CircularVec ranges must be contiguous (step 1)")
            start = 0 if key.start is None else operator.index(key.start)
            stop = length if key.stop is None else operator.index(key.stop)
            if not 0 <= start <= length:
                raise IndexOutOfRangeError(start, length)
            if not start <= stop <= length:
                raise IndexOutOfRangeError(stop, length)
            return tuple(self._items[start:stop])
        index = operator.index(key)
        if not 0 <= index < length:
            raise IndexOutOfRangeError(index, length)
        return self._items[index]

    def __repr__(self) -> str:
        return f"CircularVec(len={len(self._items)}, cursor={self._cursor})"

    def _advance(self) -> int:
        current = self._cursor
        self._cursor = (current + 1) % len(self._items)
        return current
