"""
Top-down merge sort with a single auxiliary buffer.

Each recursive call receives its own copy of the comparator, the way a
by-value parameter would; merging uses the caller's instance.
"""

from __future__ import annotations

from typing import List

from cmpbench.compare import CountingComparator

__all__ = ["sort"]


def sort(collection: List[int], compare: CountingComparator) -> None:
    if len(collection) < 2:
        return
    buffer = list(collection)
    _sort_range(collection, buffer, 0, len(collection), compare)


def _sort_range(a: List[int], buf: List[int], lo: int, hi: int, compare: CountingComparator) -> None:
    if hi - lo < 2:
        return
    mid = (lo + hi) // 2
    _sort_range(a, buf, lo, mid, compare.clone())
    _sort_range(a, buf, mid, hi, compare.clone())
    _merge(a, buf, lo, mid, hi, compare)


def _merge(a: List[int], buf: List[int], lo: int, mid: int, hi: int, compare: CountingComparator) -> None:
    buf[lo:hi] = a[lo:hi]
    i, j = lo, mid
    for k in range(lo, hi):
        if i >= mid:
            a[k] = buf[j]
            j += 1
        elif j >= hi:
            a[k] = buf[i]
            i += 1
        elif compare(buf[j], buf[i]):
            # Right element strictly smaller; ties take from the left (stable)
            a[k] = buf[j]
            j += 1
        else:
            a[k] = buf[i]
            i += 1
