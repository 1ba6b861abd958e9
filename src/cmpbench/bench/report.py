"""
Report rendering for benchmark results.

- `format_report_line` renders the fixed-width stdout line for one algorithm.
- `results_frame` aggregates results into a pandas DataFrame (one row each).
- `print_rich_summary` prints a rich table sorted by total, to stderr.
"""

from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd
from rich.console import Console
from rich.table import Table

from cmpbench.bench.measure import BenchmarkResult

__all__ = ["NAME_WIDTH", "COUNT_WIDTH", "RESULT_COLUMNS", "format_report_line", "results_frame", "print_rich_summary"]

NAME_WIDTH = 25
COUNT_WIDTH = 10
RESULT_COLUMNS = ["algo", "copies", "moves", "total", "comparisons"]


def format_report_line(result: BenchmarkResult) -> str:
    """`<name>:` in a 25-column field, then copies, moves and total left-aligned in 10 columns each."""
    label = f"{result.name}:"
    return (
        f"{label:<{NAME_WIDTH}}"
        f"{result.copies:<{COUNT_WIDTH}} copies,\t"
        f"{result.moves:<{COUNT_WIDTH}} moves,\t"
        f"{result.total:<{COUNT_WIDTH}}total"
    )


def results_frame(results: Iterable[BenchmarkResult]) -> pd.DataFrame:
    rows = [r.to_record() for r in results]
    if not rows:
        return pd.DataFrame(columns=RESULT_COLUMNS)
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def print_rich_summary(frame: pd.DataFrame, console: Optional[Console] = None) -> None:
    console = console or Console(stderr=True)
    table = Table(title="Comparator copies/moves (sorted by total)")
    table.add_column("Algorithm", style="bold")
    for col in ("copies", "moves", "total", "comparisons"):
        table.add_column(col, justify="right")

    if frame.empty:
        table.add_row("(no results)", "—", "—", "—", "—")
    else:
        ordered = frame.sort_values(["total", "algo"], ignore_index=True)
        for row in ordered.itertuples(index=False):
            table.add_row(str(row.algo), str(row.copies), str(row.moves), str(row.total), str(row.comparisons))

    console.print()
    console.print(table)
    console.print()
