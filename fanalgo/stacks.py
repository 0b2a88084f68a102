"""LIFO stacks: a resizing-array stack and a linked stack of strings."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, Optional, Protocol, TypeVar

T = TypeVar("T")


class Stack(Protocol[T]):
    """The operations every stack in this module offers."""

    def is_empty(self) -> bool: ...

    def push(self, value: T) -> None: ...

    def pop(self) -> T: ...


class ArrayStack(Generic[T]):
    """A stack backed by an array that doubles when full and halves at a quarter."""

    def __init__(self) -> None:
        self._items: list[Optional[T]] = [None]
        self._n = 0

    def is_empty(self) -> bool:
        """Return True when the stack holds no items."""
        return self._n == 0

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        if self._n == len(self._items):
            self._resize(len(self._items) * 2)
        self._items[self._n] = value
        self._n += 1

    def pop(self) -> T:
        """Remove and return the item on top of the stack."""
        if self._n == 0:
            raise IndexError("stack is empty")
        self._n -= 1
        value = self._items[self._n]
        self._items[self._n] = None
        if self._n > 0 and self._n <= len(self._items) // 4:
            self._resize(len(self._items) // 2)
        return value  # type: ignore[return-value]

    def __len__(self) -> int:
        return self._n

    def _resize(self, capacity: int) -> None:
        live = self._items[:self._n]
        self._items = live + [None] * (capacity - len(live))


@dataclass
class _Node:
    value: str
    next: Optional[_Node] = None


class LinkedStackOfStrings:
    """A stack of strings kept in a singly linked list."""

    def __init__(self) -> None:
        self._first: Optional[_Node] = None

    def is_empty(self) -> bool:
        """Return True when the stack holds no items."""
        return self._first is None

    def push(self, value: str) -> None:
        """Put ``value`` on top of the stack."""
        self._first = _Node(value, self._first)

    def pop(self) -> str:
        """Remove and return the item on top of the stack."""
        if self._first is None:
            raise IndexError("stack is empty")
        first = self._first
        self._first = first.next
        return first.value

    def __iter__(self) -> Iterator[str]:
        """Yield the items from the top of the stack down."""
        node = self._first
        while node is not None:
            yield node.value
            node = node.next