"""
Heap sort over a binary max-heap.

The heap owns its comparator: it is moved into the heap once at construction
and every sift uses that owned instance.
"""

from __future__ import annotations

from typing import List

from cmpbench.compare import CountingComparator

__all__ = ["sort"]


class _MaxHeap:
    __slots__ = ("_data", "_compare")

    def __init__(self, data: List[int], compare: CountingComparator) -> None:
        self._data = data
        self._compare = compare.take()

    def heapify(self) -> None:
        n = len(self._data)
        for start in range(n // 2 - 1, -1, -1):
            self._sift_down(start, n)

    def drain(self) -> None:
        """Repeatedly move the max to the end of the shrinking heap."""
        data = self._data
        for end in range(len(data) - 1, 0, -1):
            data[0], data[end] = data[end], data[0]
            self._sift_down(0, end)

    def _sift_down(self, root: int, end: int) -> None:
        data = self._data
        compare = self._compare
        while True:
            child = 2 * root + 1
            if child >= end:
                return
            if child + 1 < end and compare(data[child], data[child + 1]):
                child += 1
            if not compare(data[root], data[child]):
                return
            data[root], data[child] = data[child], data[root]
            root = child


def sort(collection: List[int], compare: CountingComparator) -> None:
    heap = _MaxHeap(collection, compare)
    heap.heapify()
    heap.drain()
