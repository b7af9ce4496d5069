"""A growable array of values with explicit capacity management."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Vector:
    """Dynamic array whose capacity grows by a multiplicative coefficient.

    Indexing wraps around: an index is taken modulo the current size.
    """

    def __init__(self, values: Iterable[Any] | None = None, coef: float = 2.0) -> None:
        self._items: list[Any] = [] if values is None else list(values)
        self._capacity = len(self._items)
        self._coef = float(coef)

    def _grow(self, needed: int) -> None:
        """Raise the capacity until it holds at least ``needed`` elements."""
        if needed <= self._capacity:
            return
        capacity = self._capacity or int(self._coef)
        while capacity < needed:
            grown = int(capacity * self._coef)
            capacity = grown if grown > capacity else capacity + 1
        self._capacity = capacity

    def push_back(self, value: Any) -> None:
        """Append a value at the end."""
        self.insert(value, len(self._items))

    def push_front(self, value: Any) -> None:
        """Insert a value at the beginning."""
        self.insert(value, 0)

    def insert(self, value: Any, pos: int) -> None:
        """Insert a single value before position ``pos``."""
        if pos > len(self._items):
            raise ValueError("Cannot insert value: position must be lesser than size.")
        if pos < 0:
            raise ValueError("Cannot insert value: position cannot be negative.")
        self._grow(len(self._items) + 1)
        self._items.insert(pos, value)

    def insert_values(self, values: Iterable[Any], pos: int) -> None:
        """Insert a non-empty sequence of values before position ``pos``."""
        if values is None:
            raise ValueError("Cannot insert values: pointer must not be null.")
        items = list(values)
        if not items:
            raise ValueError(
                "Cannot insert values: length of array must be greater than 0."
            )
        if pos > len(self._items):
            raise ValueError("Cannot insert values: position must be lesser than size.")
        if pos < 0:
            raise ValueError("Cannot insert values: position cannot be negative.")
        self._grow(len(self._items) + len(items))
        self._items[pos:pos] = items

    def pop_back(self) -> None:
        """Remove the last value; does nothing when empty."""
        if self._items:
            self.erase(len(self._items) - 1)

    def pop_front(self) -> None:
        """Remove the first value; does nothing when empty."""
        self.erase(0)

    def erase(self, pos: int, count: int = 1) -> None:
        """Remove up to ``count`` values starting at ``pos``.

        Out-of-range or negative arguments are ignored.
        """
        if pos < 0 or count < 0 or pos >= len(self._items):
            return
        del self._items[pos:pos + count]

    def clear(self) -> None:
        """Remove every value, keeping the capacity."""
        self.erase(0, len(self._items))

    def erase_between(self, begin_pos: int, end_pos: int) -> None:
        """Remove the values in ``[begin_pos, end_pos)``."""
        if begin_pos < 0 or begin_pos >= end_pos:
            raise ValueError("Cannot erase elements: positions incorrect.")
        self.erase(begin_pos, end_pos - begin_pos)

    def __len__(self) -> int:
        return len(self._items)

    def capacity(self) -> int:
        """Number of elements the vector can hold before growing."""
        return self._capacity

    def load_factor(self) -> float:
        """The growth coefficient."""
        return self._coef

    def _wrap(self, idx: int) -> int:
        if not self._items:
            raise IndexError("Cannot get element: size of vector is 0.")
        return idx % len(self._items)

    def __getitem__(self, idx: int) -> Any:
        return self._items[self._wrap(idx)]

    def __setitem__(self, idx: int, value: Any) -> None:
        self._items[self._wrap(idx)] = value

    def find(self, value: Any) -> int:
        """Index of the first occurrence of ``value``, or -1."""
        for index, item in enumerate(self._items):
            if item == value:
                return index
        return -1

    def reserve(self, capacity: int) -> None:
        """Raise the capacity to ``capacity`` if it is larger."""
        if capacity > self._capacity:
            self._capacity = capacity

    def shrink_to_fit(self) -> None:
        """Lower the capacity to the current size."""
        if len(self._items) < self._capacity:
            self._capacity = len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def copy(self) -> Vector:
        """A copy whose capacity equals its size."""
        return Vector(self._items, self._coef)