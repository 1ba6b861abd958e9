"""
Comparator package public API.

Re-export the counting comparator so callers can write:
    from cmpbench.compare import CounterPair, CountingComparator, UsageViolation
"""

from .counting import CounterPair, CountingComparator, UsageViolation

__all__ = ["CounterPair", "CountingComparator", "UsageViolation"]
