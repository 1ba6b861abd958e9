"""
Dataset generator for comparator-counting benchmarks.

Every algorithm sorts the same input: the integers [0, 1, ..., n-1] shuffled
once by a generator seeded with a fixed constant. Counts are only comparable
across algorithms because the initial permutation is identical.

Public API (stable):
    make_rng(seed: int, engine: str = "mt19937") -> numpy.random.Generator
    make_dataset(n: int, rng: numpy.random.Generator) -> list[int]
    shuffled_dataset(n: int, seed: int, engine: str = "mt19937") -> list[int]

Conventions:
- "mt19937" is the Mersenne Twister engine; "pcg64" is NumPy's default engine.
- Build a fresh generator per run; never share one across algorithms.
- Returns a Python `list[int]` (sorters stay NumPy-agnostic).
"""

from __future__ import annotations

from typing import Any, List

import numpy as np

DEFAULT_SEED: int = 1477332479
DEFAULT_SIZE: int = 1000

SUPPORTED_ENGINES = {
    "mt19937",
    "pcg64",
}
__all__ = [
    "DEFAULT_SEED",
    "DEFAULT_SIZE",
    "SUPPORTED_ENGINES",
    "make_rng",
    "make_dataset",
    "shuffled_dataset",
]


def make_rng(seed: int, engine: str = "mt19937") -> np.random.Generator:
    """
    Build a freshly seeded generator.

    Raises
    ------
    ValueError
        If the seed is not a nonnegative integer or the engine is unsupported.
    """
    if not _is_int_like(seed) or int(seed) < 0:
        raise ValueError(f"seed must be a nonnegative integer; got {seed!r}")
    if engine not in SUPPORTED_ENGINES:
        raise ValueError(
            f"Unsupported rng engine: {engine!r}. Supported: {sorted(SUPPORTED_ENGINES)}"
        )

    if engine == "mt19937":
        return np.random.Generator(np.random.MT19937(int(seed)))
    return np.random.Generator(np.random.PCG64(int(seed)))


def make_dataset(n: int, rng: np.random.Generator) -> List[int]:
    """
    Return [0..n-1] shuffled in place once with `rng`.

    Parameters
    ----------
    n : int
        Number of elements. Must be >= 0.
    rng : numpy.random.Generator
        Generator owned by the caller (seeded upstream).

    Returns
    -------
    list[int]
        A permutation of range(n).
    """
    _validate_n(n)
    if n == 0:
        return []
    arr = np.arange(n, dtype=np.int64)
    rng.shuffle(arr)
    return arr.tolist()


def shuffled_dataset(n: int, seed: int, engine: str = "mt19937") -> List[int]:
    """Shortcut for `make_dataset(n, make_rng(seed, engine))`."""
    return make_dataset(n, make_rng(seed, engine))


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _is_int_like(x: Any) -> bool:
    # Accept Python ints and NumPy integer types
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
