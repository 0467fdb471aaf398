"""
primebench: CPU benchmark, генерация больших нечётных чисел и
вероятностная проверка простоты (Solovay–Strassen).

Single- и multi-core прогоны используют одинаковую нагрузку, поэтому их
throughput напрямую сравним.
"""

from primebench.bench.config import BenchmarkConfig, ExecutorKind
from primebench.bench.harness import (
    BenchmarkExecutionError,
    run_benchmark,
    run_benchmark_report,
)
from primebench.core.domain.benchmark import BenchmarkReport, ExecutionMode

__all__ = [
    "BenchmarkConfig",
    "BenchmarkExecutionError",
    "BenchmarkReport",
    "ExecutionMode",
    "ExecutorKind",
    "run_benchmark",
    "run_benchmark_report",
]
