"""
Domain models and value objects.

Contains the benchmark report model and the execution mode enum.
"""

from primebench.core.domain.benchmark import BenchmarkReport, ExecutionMode

__all__ = [
    "BenchmarkReport",
    "ExecutionMode",
]
