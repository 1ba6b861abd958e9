"""
Benchmark configuration.

Every key has a default, so running with no config file executes all
registered algorithms on the standard dataset. A YAML file may override any
subset of keys:

    experiment_name: count_compare_copies
    seed: 1477332479
    size: 1000
    engine: mt19937          # or pcg64
    repeats: 1               # >1 re-runs each algorithm and checks determinism
    algorithms:              # default: every registered algorithm
      - insertion_sort
      - {name: my_sort, target: "my_package.sorting:my_sort"}
    output_dir: null         # write a run directory when set
    progress: false
    summary: false
    log_level: WARNING
"""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from cmpbench.algorithms import ALGORITHM_NAMES
from cmpbench.datasets import DEFAULT_SEED, DEFAULT_SIZE, SUPPORTED_ENGINES

__all__ = ["BenchConfig", "config_from_dict", "load_config"]


@dataclass(frozen=True)
class BenchConfig:
    experiment_name: str = "count_compare_copies"
    seed: int = DEFAULT_SEED
    size: int = DEFAULT_SIZE
    engine: str = "mt19937"
    repeats: int = 1
    algorithms: Tuple[Union[str, Dict[str, Any]], ...] = ALGORITHM_NAMES
    output_dir: Optional[Path] = None
    progress: bool = False
    summary: bool = False
    log_level: str = "WARNING"

    def to_dict(self) -> Dict[str, Any]:
        out = dataclasses.asdict(self)
        out["algorithms"] = list(self.algorithms)
        out["output_dir"] = str(self.output_dir) if self.output_dir is not None else None
        return out


def load_config(path: Optional[Path] = None) -> BenchConfig:
    """Load a YAML config file, or return the defaults when `path` is None."""
    if path is None:
        return BenchConfig()
    with Path(path).open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raw = {}
    return config_from_dict(raw)


def config_from_dict(raw: Dict[str, Any]) -> BenchConfig:
    """
    Validate a raw mapping and merge it over the defaults.

    Raises
    ------
    ValueError
        Unknown keys or values of the wrong type/range.
    """
    if not isinstance(raw, dict):
        raise ValueError("config must be a mapping")

    known = {f.name for f in dataclasses.fields(BenchConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")

    values: Dict[str, Any] = {}

    if "experiment_name" in raw:
        values["experiment_name"] = str(raw["experiment_name"])

    for key in ("seed", "size"):
        if key in raw:
            v = raw[key]
            if not isinstance(v, int) or isinstance(v, bool) or v < 0:
                raise ValueError(f"Config '{key}' must be a nonnegative integer; got {v!r}")
            values[key] = v

    if "engine" in raw:
        if not isinstance(raw["engine"], str) or raw["engine"] not in SUPPORTED_ENGINES:
            raise ValueError(
                f"Config 'engine' must be one of {sorted(SUPPORTED_ENGINES)}; got {raw['engine']!r}"
            )
        values["engine"] = raw["engine"]

    if "repeats" in raw:
        v = raw["repeats"]
        if not isinstance(v, int) or isinstance(v, bool) or v < 1:
            raise ValueError(f"Config 'repeats' must be an integer >= 1; got {v!r}")
        values["repeats"] = v

    if "algorithms" in raw:
        algos = raw["algorithms"]
        if not isinstance(algos, list) or not algos:
            raise ValueError("Config 'algorithms' must be a non-empty list")
        values["algorithms"] = tuple(algos)

    if raw.get("output_dir") is not None:
        if not isinstance(raw["output_dir"], (str, os.PathLike)):
            raise ValueError(f"Config 'output_dir' must be a path; got {raw['output_dir']!r}")
        values["output_dir"] = Path(raw["output_dir"])

    for key in ("progress", "summary"):
        if key in raw:
            if not isinstance(raw[key], bool):
                raise ValueError(f"Config '{key}' must be a boolean; got {raw[key]!r}")
            values[key] = raw[key]

    if "log_level" in raw:
        level = str(raw["log_level"]).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Config 'log_level' is not a logging level: {raw['log_level']!r}")
        values["log_level"] = level

    return BenchConfig(**values)
