"""Bench: harness прогона trials и его конфигурация."""

from .config import (
    KEY_SIZE_BITS,
    PRIMALITY_ITERATIONS,
    TRIES_PER_CORE_BASE,
    BenchmarkConfig,
    ExecutorKind,
)
from .harness import (
    BenchmarkExecutionError,
    TrialBatch,
    detect_core_count,
    partition_trials,
    run_benchmark,
    run_benchmark_report,
    run_trial_batch,
)

__all__ = [
    "KEY_SIZE_BITS",
    "PRIMALITY_ITERATIONS",
    "TRIES_PER_CORE_BASE",
    "BenchmarkConfig",
    "ExecutorKind",
    "BenchmarkExecutionError",
    "TrialBatch",
    "detect_core_count",
    "partition_trials",
    "run_benchmark",
    "run_benchmark_report",
    "run_trial_batch",
]
