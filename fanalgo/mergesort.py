"""Top-down and bottom-up merge sort."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

from fanalgo.elementary import insertion_sort_range

_CUTOFF = 4


def merge_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with a stable top-down merge sort."""
    aux: list[Any] = [None] * len(items)
    _sort(items, aux, 0, len(items) - 1)


def bottom_up_merge_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with a stable bottom-up merge sort."""
    n = len(items)
    aux: list[Any] = [None] * n
    size = 1
    while size < n:
        for lo in range(0, n - size, 2 * size):
            hi = min(lo + 2 * size - 1, n - 1)
            _merge(items, aux, lo, lo + size - 1, hi)
        size *= 2


def _sort(items: MutableSequence[Any], aux: list[Any], lo: int, hi: int) -> None:
    if lo + _CUTOFF - 1 >= hi:
        insertion_sort_range(items, lo, hi)
        return
    mid = (lo + hi) // 2
    _sort(items, aux, lo, mid)
    _sort(items, aux, mid + 1, hi)
    if not items[mid + 1] < items[mid]:
        return
    _merge(items, aux, lo, mid, hi)


def _merge(items: MutableSequence[Any], aux: list[Any], lo: int, mid: int, hi: int) -> None:
    aux[lo:hi + 1] = items[lo:hi + 1]
    i, j = lo, mid + 1
    for k in range(lo, hi + 1):
        if i > mid:
            items[k] = aux[j]
            j += 1
        elif j > hi:
            items[k] = aux[i]
            i += 1
        elif aux[j] < aux[i]:
            items[k] = aux[j]
            j += 1
        else:
            items[k] = aux[i]
            i += 1