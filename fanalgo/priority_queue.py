"""A fixed-capacity binary-heap minimum priority queue and a sample record type."""

import datetime as dt
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Transaction:
    """A named, dated amount; transactions are ordered by amount alone."""

    name: str
    date: dt.date
    amount: float

    def __lt__(self, other):
        return self.amount < other.amount

    def __gt__(self, other):
        return self.amount > other.amount

    def compare_to(self, other):
        """Return -1, 0 or 1 as this amount is below, equal to or above ``other``'s."""
        return (self.amount > other.amount) - (self.amount < other.amount)


class MinPQ(Generic[T]):
    """A minimum priority queue over a one-based binary heap of fixed capacity."""

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        self._items = [None] * (capacity + 1)
        self._n = 0

    def insert(self, item):
        """Add ``item``; raises IndexError when the queue is full."""
        if self._n == len(self._items) - 1:
            raise IndexError("priority queue is full")
        self._n += 1
        self._items[self._n] = item
        self._swim(self._n)

    def delete(self):
        """Remove and return the smallest item; raises IndexError when empty."""
        if self._n == 0:
            raise IndexError("priority queue is empty")
        items, n = self._items, self._n
        smallest = items[1]
        items[1], items[n] = items[n], None
        self._n -= 1
        self._sink(1)
        return smallest

    def is_empty(self):
        return self._n == 0

    def __len__(self):
        return self._n

    def __iter__(self):
        """Yield the items in heap order, the smallest first."""
        yield from self._items[1:self._n + 1]

    def _swim(self, k):
        items = self._items
        while k > 1 and items[k // 2] > items[k]:
            items[k // 2], items[k] = items[k], items[k // 2]
            k //= 2

    def _sink(self, k):
        items, n = self._items, self._n
        while 2 * k <= n:
            child = 2 * k
            if child < n and items[child + 1] < items[child]:
                child += 1
            if not items[k] > items[child]:
                break
            items[k], items[child] = items[child], items[k]
            k = child