"""
Benchmark runner: counts comparator copies/moves for every registered sorter.

Usage (from repo root):
    python -m cmpbench                     # defaults: all algorithms, n=1000
    python -m cmpbench my_config.yaml      # optional YAML overrides

stdout gets exactly one line per algorithm, in registry order:
    insertion_sort:          1          copies,	0          moves,	1         total

Optional outputs in a new run directory (only when `output_dir` is set):
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.csv             # one row per algorithm

Design notes:
- Every algorithm sorts an identical permutation: the dataset is rebuilt from
  the same seed for each run, never shared.
- A comparator contract violation aborts the whole benchmark; counts from a
  sorter that read a moved-from value are meaningless.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import logging
import os
import platform
import subprocess
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, TextIO

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from tqdm import tqdm

from cmpbench.algorithms import AlgorithmEntry, resolve_algorithms
from cmpbench.bench.config import BenchConfig, load_config
from cmpbench.bench.measure import BenchmarkResult, count_sort_call
from cmpbench.bench.report import format_report_line, print_rich_summary, results_frame
from cmpbench.log import configure_logging

__all__ = ["run_benchmark", "main"]

logger = logging.getLogger(__name__)
_console = Console(stderr=True)


# ------------------------- helpers: run directory ------------------------- #

def _run_stamp() -> str:
    return f"{_dt.datetime.now():%Y%m%d_%H%M%S}"


def _new_run_dir(output_dir: Path, experiment_name: str) -> Path:
    """Create `<output_dir>/<stamp>_<name>`, suffixing `_1`, `_2`, ... on collisions."""
    output_dir.mkdir(parents=True, exist_ok=True)
    stem = f"{_run_stamp()}_{experiment_name}"
    candidate, suffix = output_dir / stem, 0
    while True:
        try:
            candidate.mkdir()
            return candidate
        except FileExistsError:
            suffix += 1
            candidate = output_dir / f"{stem}_{suffix}"


def _short_commit() -> Optional[str]:
    try:
        raw = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return None
    return raw.decode("utf-8").strip() or None


def _machine_info() -> Dict[str, Any]:
    return {
        "cpu": platform.processor() or platform.machine(),
        "cores_logical": psutil.cpu_count(logical=True),
        "cores_physical": psutil.cpu_count(logical=False),
        "ram_gb": round(psutil.virtual_memory().total / 2**30, 2),
        "platform": platform.platform(),
    }


def _run_meta(cfg: BenchConfig) -> Dict[str, Any]:
    return {
        "versions": {
            "python": platform.python_version(),
            "numpy": np.__version__,
            "pandas": pd.__version__,
            "psutil": psutil.__version__,
        },
        "git_commit": _short_commit(),
        "machine": _machine_info(),
        "dataset": {"size": cfg.size, "seed": cfg.seed, "engine": cfg.engine},
        "written_at": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
    }


def _write_outputs(output_dir: Path, cfg: BenchConfig, results: List[BenchmarkResult]) -> Path:
    run_dir = _new_run_dir(output_dir, cfg.experiment_name)

    (run_dir / "config_resolved.yaml").write_text(
        yaml.safe_dump(cfg.to_dict(), sort_keys=False), encoding="utf-8"
    )
    (run_dir / "meta.json").write_text(json.dumps(_run_meta(cfg), indent=2), encoding="utf-8")
    results_frame(results).to_csv(run_dir / "results.csv", index=False)

    logger.info("Wrote run directory %s", run_dir)
    return run_dir


# ------------------------- core runner ------------------------- #

def run_benchmark(cfg: BenchConfig, stream: Optional[TextIO] = None) -> List[BenchmarkResult]:
    """
    Run every configured algorithm once (or `cfg.repeats` times) and report.

    Report lines go to `stream` (stdout by default) as each algorithm finishes.
    A `UsageViolation` propagates immediately; algorithms after the failing
    one are not run.
    """
    out = stream if stream is not None else sys.stdout
    algos: List[AlgorithmEntry] = resolve_algorithms(cfg.algorithms)

    logger.info(
        "Counting %d algorithms on n=%d (seed=%d, engine=%s)",
        len(algos), cfg.size, cfg.seed, cfg.engine,
    )

    results: List[BenchmarkResult] = []
    for entry in tqdm(algos, desc="Algorithms", unit="algo", disable=not cfg.progress, file=sys.stderr):
        res = count_sort_call(
            algo_name=entry.name,
            algo_fn=entry.sorter,
            size=cfg.size,
            seed=cfg.seed,
            engine=cfg.engine,
            repeats=cfg.repeats,
        )
        logger.debug("%s: %s", entry.name, res)
        print(format_report_line(res), file=out)
        results.append(res)

    if cfg.summary:
        print_rich_summary(results_frame(results), _console)

    if cfg.output_dir is not None:
        _write_outputs(cfg.output_dir, cfg, results)

    return results


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Count comparator copies and moves made by sorting algorithms.")
    p.add_argument("config", type=str, nargs="?", default=None, help="Optional path to a YAML config")
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    config_path: Optional[Path] = None
    if args.config is not None:
        config_path = Path(args.config).resolve()
        if not config_path.exists():
            raise SystemExit(f"Config file not found: {config_path}")

    cfg = load_config(config_path)
    configure_logging(cfg.log_level)
    try:
        run_benchmark(cfg)
    except Exception as e:
        # Print a friendly message, then let the traceback end the process non-zero
        _console.print(f"[bold red]Benchmark failed:[/bold red] {e!r}")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
