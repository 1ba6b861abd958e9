"""
Counting harness for sorting algorithms.

We measure exactly one call to an algorithm's `sort(collection, compare)` per
sample. Each sample gets a fresh shuffled dataset, fresh zeroed counters and a
fresh comparator, so no state leaks from one run into the next.

Public API (stable):
    BenchmarkResult
    NondeterministicCounts
    count_sort_call(...) -> BenchmarkResult

The sorter receives `compare.clone()`: the comparator is handed over by
value, and that hand-over is counted as one copy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from cmpbench.compare import CounterPair, CountingComparator, UsageViolation
from cmpbench.datasets import make_dataset, make_rng

__all__ = ["BenchmarkResult", "NondeterministicCounts", "count_sort_call"]

logger = logging.getLogger(__name__)


class NondeterministicCounts(RuntimeError):
    """Repeated runs of one algorithm on the same input disagreed."""


@dataclass(frozen=True)
class BenchmarkResult:
    name: str
    copies: int
    moves: int
    comparisons: int = 0

    @property
    def total(self) -> int:
        return self.copies + self.moves

    def to_record(self) -> Dict[str, Any]:
        return {
            "algo": self.name,
            "copies": self.copies,
            "moves": self.moves,
            "total": self.total,
            "comparisons": self.comparisons,
        }


def count_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., None],
    size: int,
    seed: int,
    engine: str = "mt19937",
    repeats: int = 1,
) -> BenchmarkResult:
    """
    Count comparator copies and moves made by `algo_fn` on the shuffled dataset.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for logs/records).
    algo_fn : Callable[..., None]
        Callable implementing sort(collection: list[int], compare) in place.
    size : int
        Dataset length.
    seed : int
        Shuffle seed; identical for every algorithm.
    engine : str
        Generator engine name, see `cmpbench.datasets.make_rng`.
    repeats : int
        Number of independent runs; all of them must produce the same counts.

    Returns
    -------
    BenchmarkResult

    Raises
    ------
    UsageViolation
        The sorter used a moved-from comparator. Never swallowed.
    NondeterministicCounts
        Two repeats produced different counts.
    """
    if repeats < 1:
        raise ValueError("repeats must be >= 1")

    samples: List[BenchmarkResult] = []
    for r in range(repeats):
        collection = make_dataset(size, make_rng(seed, engine))
        counters = CounterPair()
        compare = CountingComparator(counters)

        try:
            algo_fn(collection, compare.clone())
        except UsageViolation:
            logger.error("%s: comparator contract violated at repeat %d", algo_name, r)
            raise

        if counters.violations:
            logger.error("%s: sorter swallowed %d comparator violation(s) at repeat %d", algo_name, counters.violations, r)
            raise UsageViolation(
                f"{algo_name}: {counters.violations} comparator contract violation(s) caught inside the sorter"
            )

        samples.append(
            BenchmarkResult(
                name=algo_name,
                copies=counters.copies,
                moves=counters.moves,
                comparisons=counters.comparisons,
            )
        )

    first = samples[0]
    for r, other in enumerate(samples[1:], start=1):
        if other != first:
            raise NondeterministicCounts(
                f"{algo_name}: repeat {r} counted {other.copies} copies/{other.moves} moves, "
                f"repeat 0 counted {first.copies}/{first.moves}"
            )
    return first
