"""
Tests for the benchmark driver: measurement, reporting, configuration, runner.

What we check:
- Determinism: repeated runs give identical (copies, moves)
- Count consistency: total == copies + moves, all counts >= 0
- The by-value hand-over counts as one copy
- Boundary sizes 0 and 1 need no comparisons
- Contract violations propagate and stop the benchmark
- Report line layout and run-directory outputs
"""

from __future__ import annotations

import itertools
import json
from pathlib import Path
from typing import List

import pandas as pd
import pytest
import yaml

from cmpbench.algorithms import ALGORITHM_NAMES, AlgorithmEntry, resolve_algorithms
from cmpbench.bench import (
    BenchConfig,
    BenchmarkResult,
    NondeterministicCounts,
    config_from_dict,
    count_sort_call,
    format_report_line,
    load_config,
    results_frame,
    run_benchmark,
)
from cmpbench.bench import runner as runner_mod
from cmpbench.compare import UsageViolation
from cmpbench.datasets import DEFAULT_SEED

SEED = 1477332479


# ------------------------- misbehaving sorters ------------------------- #

def _reads_after_move(collection: List[int], compare) -> None:
    owned = compare.take()
    owned(collection[0], collection[1])
    compare(collection[0], collection[1])


def _moves_twice(collection: List[int], compare) -> None:
    compare.take()
    compare.take()


def _hides_violation(collection: List[int], compare) -> None:
    owned = compare.take()
    try:
        compare(collection[0], collection[1])
    except UsageViolation:
        pass
    owned(collection[0], collection[1])


# ------------------------- measure ------------------------- #

def test_default_seed_is_the_fixed_constant() -> None:
    assert DEFAULT_SEED == SEED
    assert BenchConfig().seed == SEED
    assert BenchConfig().size == 1000


@pytest.mark.parametrize("entry", resolve_algorithms(ALGORITHM_NAMES), ids=lambda e: e.name)
def test_determinism_and_count_consistency(entry: AlgorithmEntry) -> None:
    first = count_sort_call(algo_name=entry.name, algo_fn=entry.sorter, size=1000, seed=SEED)
    second = count_sort_call(algo_name=entry.name, algo_fn=entry.sorter, size=1000, seed=SEED)
    assert (first.copies, first.moves) == (second.copies, second.moves)
    assert first.copies >= 0 and first.moves >= 0
    assert first.total == first.copies + first.moves
    # The sorter always receives a copy of the driver's comparator
    assert first.copies >= 1


def test_insertion_sort_end_to_end_is_stable() -> None:
    insertion = resolve_algorithms(["insertion_sort"])[0]
    results = [
        count_sort_call(algo_name="insertion_sort", algo_fn=insertion.sorter, size=1000, seed=SEED, repeats=3)
        for _ in range(2)
    ]
    assert results[0] == results[1]
    assert (results[0].copies, results[0].moves) == (1, 0)
    assert results[0].comparisons > 0


@pytest.mark.parametrize("entry", resolve_algorithms(ALGORITHM_NAMES), ids=lambda e: e.name)
@pytest.mark.parametrize("n", [0, 1])
def test_boundary_sizes_need_no_comparisons(entry: AlgorithmEntry, n: int) -> None:
    res = count_sort_call(algo_name=entry.name, algo_fn=entry.sorter, size=n, seed=SEED)
    assert res.comparisons == 0
    assert res.total <= 2


@pytest.mark.parametrize("bad_sorter", [_reads_after_move, _moves_twice, _hides_violation])
def test_usage_violation_propagates(bad_sorter) -> None:
    with pytest.raises(UsageViolation):
        count_sort_call(algo_name="bad", algo_fn=bad_sorter, size=10, seed=SEED)


def test_nondeterministic_sorter_is_detected() -> None:
    calls = itertools.count()

    def flaky(collection: List[int], compare) -> None:
        for _ in range(next(calls)):
            compare.clone()

    with pytest.raises(NondeterministicCounts):
        count_sort_call(algo_name="flaky", algo_fn=flaky, size=10, seed=SEED, repeats=2)


def test_repeats_must_be_positive() -> None:
    with pytest.raises(ValueError):
        count_sort_call(algo_name="x", algo_fn=lambda a, c: None, size=10, seed=SEED, repeats=0)


# ------------------------- report ------------------------- #

def test_report_line_layout() -> None:
    line = format_report_line(BenchmarkResult(name="insertion_sort", copies=1, moves=0))
    expected = (
        "insertion_sort:".ljust(25)
        + "1".ljust(10) + " copies,\t"
        + "0".ljust(10) + " moves,\t"
        + "1".ljust(10) + "total"
    )
    assert line == expected


def test_results_frame_columns() -> None:
    frame = results_frame([BenchmarkResult("a", 2, 3, 7), BenchmarkResult("b", 0, 1)])
    assert list(frame.columns) == ["algo", "copies", "moves", "total", "comparisons"]
    assert frame["total"].tolist() == [5, 1]
    assert results_frame([]).empty


# ------------------------- config ------------------------- #

def test_config_defaults_cover_every_algorithm() -> None:
    cfg = load_config(None)
    assert list(cfg.algorithms) == list(ALGORITHM_NAMES)
    assert cfg.output_dir is None
    assert cfg.repeats == 1


@pytest.mark.parametrize(
    "raw",
    [
        {"sead": 1},
        {"size": -1},
        {"seed": "abc"},
        {"repeats": 0},
        {"engine": "xorshift"},
        {"engine": ["mt19937"]},
        {"output_dir": 5},
        {"output_dir": ["a"]},
        {"algorithms": []},
        {"progress": "yes"},
        {"log_level": "LOUD"},
    ],
)
def test_config_rejects_bad_values(raw) -> None:
    with pytest.raises(ValueError):
        config_from_dict(raw)


def test_load_config_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yaml"
    path.write_text(
        yaml.safe_dump({"size": 50, "engine": "pcg64", "algorithms": ["heap_sort"], "log_level": "info"}),
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.size == 50
    assert cfg.engine == "pcg64"
    assert cfg.algorithms == ("heap_sort",)
    assert cfg.log_level == "INFO"
    assert cfg.seed == SEED


def test_empty_yaml_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == BenchConfig()


# ------------------------- registry ------------------------- #

def test_resolve_target_entry() -> None:
    (entry,) = resolve_algorithms([{"name": "custom", "target": "cmpbench.algorithms.heap_sort:sort"}])
    assert entry.name == "custom"
    assert callable(entry.sorter)


def test_resolve_rejects_duplicates() -> None:
    with pytest.raises(ValueError):
        resolve_algorithms(["heap_sort", "heap_sort"])


def test_resolve_rejects_unknown_module() -> None:
    with pytest.raises(ImportError):
        resolve_algorithms(["no_such_sort"])


@pytest.mark.parametrize(
    "entry, exc",
    [
        ({"name": "x", "target": "cmpbench.algorithms.heap_sort"}, ValueError),
        ({"name": "x", "target": "cmpbench.algorithms.heap_sort:nope"}, AttributeError),
        ({"target": "cmpbench.algorithms.heap_sort:sort"}, ValueError),
        (42, ValueError),
    ],
)
def test_resolve_rejects_bad_entries(entry, exc) -> None:
    with pytest.raises(exc):
        resolve_algorithms([entry])


# ------------------------- runner ------------------------- #

def test_run_benchmark_prints_one_line_per_algorithm(capsys: pytest.CaptureFixture) -> None:
    cfg = BenchConfig(size=100, summary=True)
    results = run_benchmark(cfg)
    lines = capsys.readouterr().out.splitlines()
    assert [r.name for r in results] == list(ALGORITHM_NAMES)
    assert lines == [format_report_line(r) for r in results]


def test_violation_stops_the_benchmark(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    good = resolve_algorithms(["insertion_sort"])[0]
    entries = [good, AlgorithmEntry("bad", _reads_after_move), good]
    monkeypatch.setattr(runner_mod, "resolve_algorithms", lambda _: entries)

    with pytest.raises(UsageViolation):
        run_benchmark(BenchConfig(size=20))
    assert len(capsys.readouterr().out.splitlines()) == 1


def test_run_directory_outputs(tmp_path: Path) -> None:
    cfg = BenchConfig(size=20, algorithms=("insertion_sort", "merge_sort"), output_dir=tmp_path)
    results = run_benchmark(cfg)

    (run_dir,) = list(tmp_path.iterdir())
    frame = pd.read_csv(run_dir / "results.csv")
    assert frame["algo"].tolist() == ["insertion_sort", "merge_sort"]
    assert frame["total"].tolist() == [r.total for r in results]

    meta = json.loads((run_dir / "meta.json").read_text(encoding="utf-8"))
    assert "numpy" in meta["versions"] and "machine" in meta
    assert meta["dataset"] == {"size": 20, "seed": SEED, "engine": "mt19937"}

    resolved = yaml.safe_load((run_dir / "config_resolved.yaml").read_text(encoding="utf-8"))
    assert resolved["size"] == 20
    assert resolved["output_dir"] == str(tmp_path)


def test_runs_in_the_same_second_get_distinct_directories(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(runner_mod, "_run_stamp", lambda: "20260102_030405")
    cfg = BenchConfig(size=10, algorithms=("insertion_sort",), output_dir=tmp_path)
    run_benchmark(cfg)
    run_benchmark(cfg)
    run_benchmark(cfg)

    names = sorted(p.name for p in tmp_path.iterdir())
    stem = "20260102_030405_count_compare_copies"
    assert names == [stem, f"{stem}_1", f"{stem}_2"]


def test_main_with_config_file(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    path = tmp_path / "cfg.yaml"
    path.write_text(yaml.safe_dump({"size": 30, "algorithms": ["heap_sort", "shell_sort"]}), encoding="utf-8")

    assert runner_mod.main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("heap_sort:")
    assert lines[1].startswith("shell_sort:")


def test_main_missing_config_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        runner_mod.main([str(tmp_path / "missing.yaml")])
