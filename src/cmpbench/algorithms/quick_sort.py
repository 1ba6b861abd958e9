"""
Quicksort with a median-of-three pivot and a Hoare-style partition,
finishing small partitions with insertion sort.

The comparator is moved into the sort once. The smaller side of each
partition recurses with a copy; the larger side is handled by the loop with
the instance already owned, which bounds the stack depth to O(log n).
"""

from __future__ import annotations

from typing import List

from cmpbench.algorithms.insertion_sort import sort_range as _insertion_sort_range
from cmpbench.compare import CountingComparator

__all__ = ["sort"]

_INSERTION_CUTOFF = 16


def sort(collection: List[int], compare: CountingComparator) -> None:
    _quick_sort(collection, 0, len(collection), compare.take())


def _quick_sort(a: List[int], lo: int, hi: int, compare: CountingComparator) -> None:
    while hi - lo > _INSERTION_CUTOFF:
        p = _partition(a, lo, hi, compare)
        if p - lo < hi - p - 1:
            _quick_sort(a, lo, p, compare.clone())
            lo = p + 1
        else:
            _quick_sort(a, p + 1, hi, compare.clone())
            hi = p
    _insertion_sort_range(a, lo, hi, compare)


def _partition(a: List[int], lo: int, hi: int, compare: CountingComparator) -> int:
    """Partition a[lo:hi] around a median-of-three pivot; return its final index."""
    mid = (lo + hi) // 2
    last = hi - 1

    # Order a[lo] <= a[mid] <= a[last], then park the median at lo
    if compare(a[mid], a[lo]):
        a[mid], a[lo] = a[lo], a[mid]
    if compare(a[last], a[lo]):
        a[last], a[lo] = a[lo], a[last]
    if compare(a[last], a[mid]):
        a[last], a[mid] = a[mid], a[last]
    a[lo], a[mid] = a[mid], a[lo]

    pivot = a[lo]
    i, j = lo + 1, last
    while True:
        while i <= j and compare(a[i], pivot):
            i += 1
        while i <= j and compare(pivot, a[j]):
            j -= 1
        if i >= j:
            break
        a[i], a[j] = a[j], a[i]
        i += 1
        j -= 1

    a[lo], a[j] = a[j], a[lo]
    return j
