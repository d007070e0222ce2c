"""In-place quick sort."""

from __future__ import annotations


def quick_sort(values: list[int]) -> list[int]:
    """Sort values in place in ascending order and return the same list."""
    _sort(values, 0, len(values))
    return values


def _sort(a: list[int], lo: int, hi: int) -> None:
    size = hi - lo
    if size <= 1:
        return
    if size == 2:
        if a[lo] > a[lo + 1]:
            a[lo], a[lo + 1] = a[lo + 1], a[lo]
        return

    pivot_index = lo
    pivot = a[lo]
    for index in range(lo + 1, hi):
        if a[index] < pivot:
            a[index], a[pivot_index] = a[pivot_index], a[index]
            # Keep the pivot directly after the smaller elements.
            if pivot_index + 1 != index:
                a[pivot_index + 1], a[index] = a[index], a[pivot_index + 1]
                pivot_index += 1
            else:
                pivot_index = index

    _sort(a, lo, pivot_index)
    if pivot_index + 1 < hi:
        _sort(a, pivot_index + 1, hi)