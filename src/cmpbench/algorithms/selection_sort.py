"""Selection sort: one minimum search per position, comparator used in place."""

from __future__ import annotations

from typing import List

from cmpbench.compare import CountingComparator

__all__ = ["sort"]


def sort(collection: List[int], compare: CountingComparator) -> None:
    n = len(collection)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            if compare(collection[j], collection[smallest]):
                smallest = j
        if smallest != i:
            collection[i], collection[smallest] = collection[smallest], collection[i]
