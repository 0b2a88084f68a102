"""Heap sort over a one-based heap."""


def heap_sort(items):
    """Sort ``items[1:]`` in place; ``items[0]`` is a placeholder left untouched."""
    n = len(items) - 1
    for k in range(n // 2, 0, -1):
        _sink(items, k, n)
    while n > 1:
        items[1], items[n] = items[n], items[1]
        n -= 1
        _sink(items, 1, n)


def _sink(items, k, n):
    while k < n:
        j = 2 * k
        if j < n and items[j] < items[j + 1]:
            j += 1
        if j > n or not items[k] < items[j]:
            break
        items[j], items[k] = items[k], items[j]
        k = j