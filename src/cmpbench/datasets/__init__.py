"""
Datasets package public API.

Re-export the dataset generator so callers can write:
    from cmpbench.datasets import make_dataset, make_rng, shuffled_dataset
"""

from .generators import (
    DEFAULT_SEED,
    DEFAULT_SIZE,
    SUPPORTED_ENGINES,
    make_dataset,
    make_rng,
    shuffled_dataset,
)

__all__ = [
    "DEFAULT_SEED",
    "DEFAULT_SIZE",
    "SUPPORTED_ENGINES",
    "make_dataset",
    "make_rng",
    "shuffled_dataset",
]
