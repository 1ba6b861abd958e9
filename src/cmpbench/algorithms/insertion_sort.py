"""
Straight insertion sort.

Uses the comparator it receives directly; it never copies or moves it.
`sort_range` is shared with sorters that finish small partitions this way.
"""

from __future__ import annotations

from typing import List

from cmpbench.compare import CountingComparator

__all__ = ["sort", "sort_range"]


def sort(collection: List[int], compare: CountingComparator) -> None:
    sort_range(collection, 0, len(collection), compare)


def sort_range(a: List[int], lo: int, hi: int, compare: CountingComparator) -> None:
    """Insertion-sort the half-open slice a[lo:hi] in place."""
    for i in range(lo + 1, hi):
        value = a[i]
        j = i - 1
        while j >= lo and compare(value, a[j]):
            a[j + 1] = a[j]
            j -= 1
        a[j + 1] = value
