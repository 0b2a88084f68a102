"""FIFO queues: a list-backed queue, resizing-array queues and a linked queue."""

from collections import deque
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ArrayQueueOfStrings:
    """A queue of strings kept in a growable sequence."""

    def __init__(self):
        self._items = deque()

    def is_empty(self):
        return not self._items

    def enqueue(self, value):
        self._items.append(value)

    def dequeue(self):
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.popleft()

    def __len__(self):
        return len(self._items)


class ArrayQueue(Generic[T]):
    """A queue on an array that doubles when full and halves at a quarter full."""

    def __init__(self):
        self._items = [None]
        self._head = self._tail = 0

    def is_empty(self):
        return self._head == self._tail

    def enqueue(self, value):
        if self._tail == len(self._items):
            self._resize(len(self._items) * 2)
        self._items[self._tail] = value
        self._tail += 1

    def dequeue(self):
        if self.is_empty():
            raise IndexError("dequeue called on empty queue")
        value = self._items[self._head]
        self._items[self._head] = None
        self._head += 1
        if not self.is_empty() and len(self) <= len(self._items) // 4:
            self._resize(len(self._items) // 2)
        return value

    def __len__(self):
        return self._tail - self._head

    def _resize(self, capacity):
        live = self._items[self._head:self._tail]
        self._items = live + [None] * (capacity - len(live))
        self._head, self._tail = 0, len(live)


class ArrayQueueOfStringsV2(ArrayQueue[str]):
    """A resizing-array queue of strings."""

    def is_empty(self):
        return super().is_empty()

    def enqueue(self, value):
        super().enqueue(value)

    def dequeue(self):
        return super().dequeue()

    def __len__(self):
        return super().__len__()


@dataclass
class _Node:
    value: str
    next: Optional["_Node"] = None


class LinkedQueueOfStrings:
    """A queue of strings kept in a singly linked list."""

    def __init__(self):
        self._first = self._last = None

    def is_empty(self):
        return self._first is None

    def enqueue(self, value):
        node = _Node(value)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node

    def dequeue(self):
        if self._first is None:
            raise IndexError("queue is empty")
        first = self._first
        self._first = first.next
        if self._first is None:
            self._last = None
        return first.value

    def __iter__(self):
        node = self._first
        while node is not None:
            yield node.value
            node = node.next