"""Elementary in-place sorts and a uniform shuffle.

Every sort works on a mutable sequence whose items support ``<``.
"""

from __future__ import annotations

import random
from collections.abc import MutableSequence
from typing import Any

SHELL_GAPS = (7, 3, 1)


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by insertion."""
    insertion_sort_range(items, 0, len(items) - 1)


def insertion_sort_range(items: MutableSequence[Any], lo: int, hi: int) -> None:
    """Sort ``items[lo:hi + 1]`` in place by insertion; ``hi`` is inclusive."""
    if lo > hi:
        return
    if lo < 0 or hi >= len(items):
        raise IndexError(f"range [{lo}, {hi}] outside sequence of length {len(items)}")
    for i in range(lo + 1, hi + 1):
        j = i
        while j > lo and items[j] < items[j - 1]:
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by repeatedly selecting the minimum."""
    n = len(items)
    for i in range(n):
        smallest = i
        for j in range(i + 1, n):
            if items[j] < items[smallest]:
                smallest = j
        items[i], items[smallest] = items[smallest], items[i]


def shell_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with h-sorting passes over ``SHELL_GAPS``."""
    n = len(items)
    for h in SHELL_GAPS:
        for i in range(h, n):
            j = i
            while j >= h and items[j] < items[j - h]:
                items[j], items[j - h] = items[j - h], items[j]
                j -= h


def shuffle(items: MutableSequence[Any]) -> None:
    """Rearrange ``items`` in place into a uniformly random permutation."""
    for i in range(len(items)):
        r = random.randrange(i + 1)
        items[i], items[r] = items[r], items[i]