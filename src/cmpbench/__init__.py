"""
cmpbench: count how often sorting algorithms copy and move their comparator.

Re-exports the pieces most callers need:
    from cmpbench import CounterPair, CountingComparator, UsageViolation, run_benchmark
"""

from .compare import CounterPair, CountingComparator, UsageViolation
from .bench import BenchConfig, BenchmarkResult, run_benchmark

__all__ = [
    "CounterPair",
    "CountingComparator",
    "UsageViolation",
    "BenchConfig",
    "BenchmarkResult",
    "run_benchmark",
]
