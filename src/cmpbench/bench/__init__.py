"""
Benchmark driver public API.

Re-exports:
    - Measurement: BenchmarkResult, NondeterministicCounts, count_sort_call
    - Configuration: BenchConfig, load_config, config_from_dict
    - Reporting: format_report_line, results_frame
    - Driver: run_benchmark
"""

from .config import BenchConfig, config_from_dict, load_config
from .measure import BenchmarkResult, NondeterministicCounts, count_sort_call
from .report import format_report_line, results_frame
from .runner import run_benchmark

__all__ = [
    "BenchmarkResult",
    "NondeterministicCounts",
    "count_sort_call",
    "BenchConfig",
    "config_from_dict",
    "load_config",
    "format_report_line",
    "results_frame",
    "run_benchmark",
]
