"""Randomised quicksort, three-way quicksort and quickselect."""

from fanalgo.elementary import insertion_sort_range, shuffle

_CUTOFF = 4


def quick_sort(items):
    """Sort ``items`` in place with a shuffled quicksort."""
    shuffle(items)
    _sort(items, 0, len(items) - 1)


def quick_sort_three_way(items):
    """Sort ``items`` in place with three-way partitioning."""
    shuffle(items)
    _sort_three_way(items, 0, len(items) - 1)


def select(items, k):
    """Return the item of rank ``k`` (0-based); ``items`` is rearranged."""
    if not 0 <= k < len(items):
        raise IndexError(f"rank {k} outside sequence of length {len(items)}")
    shuffle(items)
    lo, hi = 0, len(items) - 1
    while hi > lo:
        p = _partition(items, lo, hi)
        if p < k:
            lo = p + 1
        elif p > k:
            hi = p - 1
        else:
            break
    return items[k]


def _sort(items, lo, hi):
    if lo + _CUTOFF - 1 >= hi:
        insertion_sort_range(items, lo, hi)
        return
    p = _partition(items, lo, hi)
    _sort(items, lo, p - 1)
    _sort(items, p + 1, hi)


def _sort_three_way(items, lo, hi):
    if lo >= hi:
        return
    lt, gt, i = lo, hi, lo
    pivot = items[lo]
    while i <= gt:
        if items[i] < pivot:
            items[i], items[lt] = items[lt], items[i]
            i += 1
            lt += 1
        elif pivot < items[i]:
            items[i], items[gt] = items[gt], items[i]
            gt -= 1
        else:
            i += 1
    _sort_three_way(items, lo, lt - 1)
    _sort_three_way(items, gt + 1, hi)


def _partition(items, lo, hi):
    pivot = items[lo]
    i, j = lo, hi + 1
    while True:
        i += 1
        while i != hi and items[i] < pivot:
            i += 1
        j -= 1
        while j != lo and pivot < items[j]:
            j -= 1
        if i >= j:
            break
        items[i], items[j] = items[j], items[i]
    items[lo], items[j] = items[j], items[lo]
    return j