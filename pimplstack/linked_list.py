"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node | None = None


class LinkedList:
    """Singly linked list. Indexing wraps around modulo the size."""

    def __init__(self, values: Iterable[Any] | None = None) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        if values is not None:
            for value in values:
                self.push_back(value)

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def push_back(self, value: Any) -> None:
        """Append a value at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def push_front(self, value: Any) -> None:
        """Insert a value at the beginning."""
        node = _Node(value)
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def insert(self, value: Any, pos: int) -> None:
        """Insert a single value before position ``pos``."""
        if pos > self._size:
            raise ValueError("Cannot insert value: position must be lesser than size.")
        if pos < 0:
            raise ValueError("Cannot insert value: position cannot be negative.")
        if pos == 0:
            self.push_front(value)
        elif pos == self._size:
            self.push_back(value)
        else:
            prev = self._node_at(pos - 1)
            node = _Node(value)
            node.next = prev.next
            prev.next = node
            self._size += 1

    def insert_values(self, values: Iterable[Any], pos: int) -> None:
        """Insert values before position ``pos``.

        Another LinkedList may be empty; any other sequence must not be.
        """
        if isinstance(values, LinkedList):
            if pos > self._size:
                raise ValueError("Cannot insert List: position must be lesser than size.")
            if pos < 0:
                raise ValueError("Cannot insert List: position cannot be negative.")
            items = list(values)
        else:
            if values is None:
                raise ValueError("Cannot insert values: pointer must not be null.")
            items = list(values)
            if not items:
                raise ValueError(
                    "Cannot insert values: length of array must be greater than 0."
                )
            if pos > self._size:
                raise ValueError(
                    "Cannot insert values: position must be lesser than size."
                )
            if pos < 0:
                raise ValueError("Cannot insert values: position cannot be negative.")
        for offset, value in enumerate(items):
            self.insert(value, pos + offset)

    def pop_back(self) -> None:
        """Remove the last value; does nothing when empty."""
        if self._size == 0:
            return
        if self._size == 1:
            self._head = self._tail = None
            self._size = 0
            return
        prev = self._node_at(self._size - 2)
        prev.next = None
        self._tail = prev
        self._size -= 1

    def pop_front(self) -> None:
        """Remove the first value; does nothing when empty."""
        if self._head is None:
            return
        self._head = self._head.next
        if self._head is None:
            self._tail = None
        self._size -= 1

    def erase(self, pos: int, count: int = 1) -> None:
        """Remove up to ``count`` values starting at ``pos``.

        Out-of-range or negative arguments are ignored.
        """
        if pos < 0 or count < 0 or pos >= self._size:
            return
        if pos == 0:
            for _ in range(min(count, self._size)):
                self.pop_front()
            return
        prev = self._node_at(pos - 1)
        removed = min(count, self._size - pos)
        node = prev.next
        for _ in range(removed):
            node = node.next
        prev.next = node
        if node is None:
            self._tail = prev
        self._size -= removed

    def clear(self) -> None:
        """Remove every value."""
        self._head = self._tail = None
        self._size = 0

    def erase_between(self, begin_pos: int, end_pos: int) -> None:
        """Remove the values in ``[begin_pos, end_pos)``."""
        if begin_pos < 0 or begin_pos >= end_pos:
            raise ValueError("Cannot erase elements: positions incorrect.")
        self.erase(begin_pos, end_pos - begin_pos)

    def __len__(self) -> int:
        return self._size

    def _wrapped_node(self, idx: int) -> _Node:
        if self._size == 0:
            raise IndexError("Cannot get element: size of List is 0.")
        return self._node_at(idx % self._size)

    def __getitem__(self, idx: int) -> Any:
        return self._wrapped_node(idx).value

    def __setitem__(self, idx: int, value: Any) -> None:
        self._wrapped_node(idx).value = value

    def find(self, value: Any) -> int:
        """Index of the first occurrence of ``value``, or -1."""
        for index, item in enumerate(self):
            if item == value:
                return index
        return -1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def copy(self) -> LinkedList:
        """An independent copy of the list."""
        return LinkedList(self)