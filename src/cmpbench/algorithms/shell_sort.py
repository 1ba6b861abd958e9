"""
Shell sort with Ciura's gap sequence (extended by x2.25 for large inputs).

Each gapped insertion pass works on its own copy of the comparator.
"""

from __future__ import annotations

from typing import List

from cmpbench.compare import CountingComparator

__all__ = ["sort"]

_CIURA_GAPS = (1, 4, 10, 23, 57, 132, 301, 701, 1750)


def sort(collection: List[int], compare: CountingComparator) -> None:
    for gap in reversed(_gaps(len(collection))):
        _gapped_insertion(collection, gap, compare.clone())


def _gaps(n: int) -> List[int]:
    gaps = [g for g in _CIURA_GAPS if g < n]
    if gaps and gaps[-1] == _CIURA_GAPS[-1]:
        nxt = int(gaps[-1] * 2.25)
        while nxt < n:
            gaps.append(nxt)
            nxt = int(nxt * 2.25)
    return gaps


def _gapped_insertion(a: List[int], gap: int, compare: CountingComparator) -> None:
    for i in range(gap, len(a)):
        value = a[i]
        j = i
        while j >= gap and compare(value, a[j - gap]):
            a[j] = a[j - gap]
            j -= gap
        a[j] = value
