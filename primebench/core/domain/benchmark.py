"""
BenchmarkReport: итог одного прогона benchmark

Immutable Pydantic модель, создаваемая harness после завершения всех trials.
Полная совместимость с JSON Schema (schema/benchmark_report.json).
"""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class ExecutionMode(str, Enum):
    """Режим исполнения trials"""

    SINGLE = "single"
    MULTI = "multi"


# =============================================================================
# REPORT MODEL
# =============================================================================


class BenchmarkReport(BaseModel):
    """
    Итог прогона benchmark.

    Immutable модель (frozen=True). Содержит:
    - Параметры нагрузки (bits, iterations, total_tries)
    - Параметры исполнения (mode, core_count, worker_count, batch_count)
    - Результаты (probable_primes, elapsed_seconds, throughput)
    """

    schema_version: str = Field("1", pattern="^1$", description="Версия схемы отчёта")

    # Параметры нагрузки
    mode: ExecutionMode = Field(..., description="Режим исполнения (single/multi)")
    bits: int = Field(..., ge=2, description="Битовая длина кандидатов")
    iterations: int = Field(..., ge=0, description="Итераций Solovay–Strassen на кандидата")
    tries_per_core: int = Field(
        ..., ge=0, description="floor(base * scale); при override ceil(total / core_count)"
    )
    total_tries: int = Field(..., ge=0, description="Всего trials в прогоне")

    # Параметры исполнения
    core_count: int = Field(..., ge=1, description="Число логических ядер")
    worker_count: int = Field(..., ge=1, description="Число параллельных workers")
    batch_count: int = Field(..., ge=0, description="Число batches с trials")

    # Результаты
    probable_primes: int = Field(..., ge=0, description="Кандидатов, прошедших тест")
    elapsed_seconds: float = Field(..., ge=0, description="Wall-clock время прогона")
    throughput: float = Field(..., ge=0, description="trials/s (0 при пустом прогоне)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_prime_count(self) -> "BenchmarkReport":
        """Проверка, что найдено не больше простых, чем было trials"""
        if self.probable_primes > self.total_tries:
            raise ValueError(
                f"probable_primes {self.probable_primes} must be <= total_tries {self.total_tries}"
            )
        return self

    def format_summary(self) -> str:
        """Человекочитаемая сводка (две строки)."""
        return (
            f"Found {self.probable_primes} {self.bits} bit prime numbers in "
            f"{self.total_tries} attempts and {self.elapsed_seconds:.4f}s\n"
            f"Score: {self.throughput:.2f} tries/s"
        )

    def to_contract_dict(self) -> Dict[str, Any]:
        """Сериализация для валидации по benchmark_report.json."""
        return self.model_dump(mode="json")
