"""
Sorting algorithms package public API.

Each submodule defines `sort(collection, compare)`. The registry re-exports:
    from cmpbench.algorithms import ALGORITHM_NAMES, AlgorithmEntry, default_registry, resolve_algorithms
"""

from .registry import ALGORITHM_NAMES, AlgorithmEntry, default_registry, resolve_algorithms

__all__ = ["ALGORITHM_NAMES", "AlgorithmEntry", "default_registry", "resolve_algorithms"]
