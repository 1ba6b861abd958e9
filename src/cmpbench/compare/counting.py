"""
Counting comparator: an ordering predicate that records how it is copied and moved.

Python has no implicit copy/move construction, so both are explicit methods:

- `clone()`  -> copy: new instance, `copies += 1`, source stays usable.
- `take()`   -> move: new instance, `moves += 1`, source becomes *consumed*.

Every instance derived from the same original shares one `CounterPair`.
A consumed instance must never be used again: invoking it, cloning it or
moving from it raises `UsageViolation`. Instances are also frozen after
construction; sorters are expected to build comparators, never rebind them.

Public API (stable):
    CounterPair
    CountingComparator(counters, relation=operator.lt)
    UsageViolation

Example
-------
    counters = CounterPair()
    compare = CountingComparator(counters)
    other = compare.clone()      # counters.copies == 1
    owned = other.take()         # counters.moves == 1, `other` is consumed
    owned(1, 2)                  # True
    other(1, 2)                  # raises UsageViolation
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

__all__ = ["CounterPair", "CountingComparator", "UsageViolation"]


class UsageViolation(RuntimeError):
    """A comparator was used against its contract (read after move, reassignment)."""


@dataclass
class CounterPair:
    """Copy/move counters shared by a comparator and everything derived from it."""

    copies: int = 0
    moves: int = 0
    comparisons: int = 0
    # Contract violations raised, whether or not the caller caught them
    violations: int = 0

    @property
    def total(self) -> int:
        return self.copies + self.moves


class CountingComparator:
    """
    Strict weak ordering wrapper counting copies and moves of itself.

    Parameters
    ----------
    counters : CounterPair
        Shared counters. Construction never modifies them.
    relation : callable, optional
        Two-argument ordering relation, `operator.lt` by default.
    """

    __slots__ = ("_counters", "_relation", "_consumed")

    def __init__(
        self,
        counters: CounterPair,
        relation: Callable[[Any, Any], Any] = operator.lt,
    ) -> None:
        if _is_bound(self):
            self._counters.violations += 1
            raise UsageViolation("comparators cannot be reassigned after construction")
        object.__setattr__(self, "_counters", counters)
        object.__setattr__(self, "_relation", relation)
        object.__setattr__(self, "_consumed", False)

    # ------------------------- state ------------------------- #

    @property
    def counters(self) -> CounterPair:
        return self._counters

    @property
    def consumed(self) -> bool:
        """True once the value has been moved out of this instance."""
        return self._consumed

    # ------------------------- copy / move ------------------------- #

    def clone(self) -> "CountingComparator":
        """Copy: return a new instance on the same counters and count one copy."""
        self._check_alive("copy from")
        self._counters.copies += 1
        return type(self)(self._counters, self._relation)

    def take(self) -> "CountingComparator":
        """Move: return a new instance, count one move and consume this one."""
        self._check_alive("move from")
        object.__setattr__(self, "_consumed", True)
        self._counters.moves += 1
        return type(self)(self._counters, self._relation)

    def __copy__(self) -> "CountingComparator":
        return self.clone()

    def __deepcopy__(self, memo: Optional[Dict[int, Any]]) -> "CountingComparator":
        # Counters are shared by reference, never duplicated.
        return self.clone()

    # ------------------------- ordering ------------------------- #

    def __call__(self, lhs: Any, rhs: Any) -> bool:
        self._check_alive("read from")
        self._counters.comparisons += 1
        return bool(self._relation(lhs, rhs))

    # ------------------------- rebinding is not allowed ------------------------- #

    def __setattr__(self, name: str, value: Any) -> None:
        self._counters.violations += 1
        raise UsageViolation(f"comparators cannot be reassigned (attempted to set {name!r})")

    def __delattr__(self, name: str) -> None:
        self._counters.violations += 1
        raise UsageViolation(f"comparators cannot be reassigned (attempted to delete {name!r})")

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else "alive"
        return f"{type(self).__name__}({state}, copies={self._counters.copies}, moves={self._counters.moves})"

    # ------------------------- helpers ------------------------- #

    def _check_alive(self, action: str) -> None:
        if self._consumed:
            self._counters.violations += 1
            raise UsageViolation(f"illegal {action} a moved-from comparator")


def _is_bound(obj: CountingComparator) -> bool:
    try:
        object.__getattribute__(obj, "_counters")
    except AttributeError:
        return False
    return True
