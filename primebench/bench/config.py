"""Конфигурация benchmark harness.

Параметры нагрузки по умолчанию:
- 2048-битные кандидаты
- 128 итераций Solovay–Strassen
- 1024 trials на ядро при scale = 1.0
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional

from primebench.core.math.numerical_safeguards import (
    validate_non_negative_int,
    validate_positive_int,
)
from primebench.core.math.random_odd import MIN_CANDIDATE_BITS
from primebench.primality.solovay_strassen import WitnessRange


# =============================================================================
# CONSTANTS
# =============================================================================

# Битовая длина кандидатов
KEY_SIZE_BITS: Final[int] = 2048

# Итераций Solovay–Strassen на кандидата
PRIMALITY_ITERATIONS: Final[int] = 128

# trials на ядро при scale = 1.0
TRIES_PER_CORE_BASE: Final[int] = 1024

# Сдвиг seed для batch: seed ^ (batch_index << SEED_BATCH_SHIFT)
SEED_BATCH_SHIFT: Final[int] = 13


# =============================================================================
# ENUMS
# =============================================================================


class ExecutorKind(str, Enum):
    """Тип пула для MULTI режима.

    PROCESS даёт реальный параллелизм для int-арифметики под GIL.
    THREAD допускает не-picklable oracle (используется в тестах).
    """

    THREAD = "thread"
    PROCESS = "process"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class BenchmarkConfig:
    """Конфигурация прогона benchmark."""

    bits: int = KEY_SIZE_BITS
    iterations: int = PRIMALITY_ITERATIONS
    tries_per_core_base: int = TRIES_PER_CORE_BASE

    # None → os.cpu_count()
    core_count: Optional[int] = None

    # Фиксированное число trials вместо tries_per_core * core_count
    total_tries_override: Optional[int] = None

    executor_kind: ExecutorKind = ExecutorKind.PROCESS
    witness_range: WitnessRange = WitnessRange.LOW_WORD

    # None → каждый batch получает random.Random() с seed из os.urandom
    seed: Optional[int] = None

    def __post_init__(self):
        if self.bits < MIN_CANDIDATE_BITS:
            raise ValueError(f"bits must be >= {MIN_CANDIDATE_BITS}, got {self.bits}")
        validate_non_negative_int(self.iterations, "iterations")
        validate_non_negative_int(self.tries_per_core_base, "tries_per_core_base")
        if self.core_count is not None:
            validate_positive_int(self.core_count, "core_count")
        if self.total_tries_override is not None:
            validate_non_negative_int(self.total_tries_override, "total_tries_override")
        if not isinstance(self.executor_kind, ExecutorKind):
            raise ValueError(f"executor_kind must be ExecutorKind, got {self.executor_kind!r}")
        if not isinstance(self.witness_range, WitnessRange):
            raise ValueError(f"witness_range must be WitnessRange, got {self.witness_range!r}")

    def batch_seed(self, batch_index: int) -> Optional[int]:
        """Seed для batch или None для OS-энтропии."""
        if self.seed is None:
            return None
        return self.seed ^ (batch_index << SEED_BATCH_SHIFT)
