"""
Contract Validation Module

Модуль для валидации JSON контракта отчёта primebench.
"""

from .validators import (
    REPORT_SCHEMA_PATH,
    load_report_schema,
    validate_benchmark_report,
)

__all__ = [
    "REPORT_SCHEMA_PATH",
    "load_report_schema",
    "validate_benchmark_report",
]
