"""
Reference sorter: Python's built-in `list.sort` (Timsort).

`list.sort` only ever asks `<`, so each element is wrapped in a key whose
`__lt__` defers to the comparator. The comparator is moved into the key
factory once and shared by every key.
"""

from __future__ import annotations

from typing import Any, List

from cmpbench.compare import CountingComparator

__all__ = ["sort"]


class _Key:
    __slots__ = ("value", "compare")

    def __init__(self, value: Any, compare: CountingComparator) -> None:
        self.value = value
        self.compare = compare

    def __lt__(self, other: "_Key") -> bool:
        return self.compare(self.value, other.value)


def sort(collection: List[int], compare: CountingComparator) -> None:
    owned = compare.take()
    collection.sort(key=lambda v: _Key(v, owned))
