"""Solovay–Strassen: вероятностный тест простоты.

Для каждого из k свидетелей a проверяется критерий Эйлера:
    a^((n-1)/2) ≡ (a/n) (mod n)
Составное n проходит одну итерацию с вероятностью не более 1/2, поэтому
ошибка после k независимых итераций ограничена 2^-k.

Диапазон свидетелей:
- LOW_WORD: a ∈ [2, m), где m это младшее 64-битное слово n. Сужает выбор
  свидетелей до машинного слова; это режим замеров по умолчанию, т.к.
  смена диапазона меняет профиль нагрузки.
- FULL: a ∈ [2, n-1], классический вариант алгоритма.
Если младшее слово <= 2, диапазон [2, m) пуст и используется FULL.

Тест не кэширует результаты: каждый вызов берёт новые свидетели.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional

from primebench.core.math.jacobi import jacobi_symbol
from primebench.core.math.modexp import mod_exp


# =============================================================================
# CONSTANTS
# =============================================================================

# Маска младшего 64-битного слова
LOW_WORD_MASK: Final[int] = (1 << 64) - 1

# Минимальный свидетель
MIN_WITNESS: Final[int] = 2


# =============================================================================
# ENUMS
# =============================================================================


class WitnessRange(str, Enum):
    """Способ выбора верхней границы свидетелей."""

    LOW_WORD = "low_word"
    FULL = "full"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class PrimalityVerdict:
    """Результат теста Solovay–Strassen для одного кандидата."""

    probably_prime: bool
    reject_reason: str

    # Диагностика
    iterations_run: int
    witness: Optional[int]  # свидетель, опровергнувший простоту

    details: str


def witness_bound(n: int, witness_range: WitnessRange = WitnessRange.LOW_WORD) -> int:
    """Исключительная верхняя граница свидетелей для нечётного n > 3."""
    if witness_range == WitnessRange.LOW_WORD:
        low_word = n & LOW_WORD_MASK
        if low_word > MIN_WITNESS:
            return low_word
    return n


def evaluate_solovay_strassen(
    n: int,
    iterations: int,
    rng: Optional[random.Random] = None,
    witness_range: WitnessRange = WitnessRange.LOW_WORD,
) -> PrimalityVerdict:
    """Полная оценка кандидата с диагностикой.

    Порядок проверок:
    1. n == 2 или n == 3 → probably prime
    2. n < 2 → не простое
    3. n чётное → составное
    4. k итераций: Jacobi == 0 → составное; иначе сравнение
       a^((n-1)/2) mod n с ожидаемым вычетом (n-1 для -1, 1 для +1)

    Args:
        n: Кандидат
        iterations: Количество итераций k (>= 0)
        rng: Источник случайности; если None, создаётся новый random.Random()
        witness_range: Способ выбора границы свидетелей

    Returns:
        PrimalityVerdict

    Raises:
        ValueError: Если iterations < 0
    """
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")

    if n == 2 or n == 3:
        return PrimalityVerdict(
            probably_prime=True,
            reject_reason="",
            iterations_run=0,
            witness=None,
            details=f"{n} is a small prime",
        )

    if n < 2:
        return PrimalityVerdict(
            probably_prime=False,
            reject_reason="below_two",
            iterations_run=0,
            witness=None,
            details=f"{n} < 2",
        )

    if n % 2 == 0:
        return PrimalityVerdict(
            probably_prime=False,
            reject_reason="even",
            iterations_run=0,
            witness=None,
            details=f"{n} is even",
        )

    if rng is None:
        rng = random.Random()

    bound = witness_bound(n, witness_range)
    # n нечётное, поэтому n - 1 чётное и сдвиг = деление на 2
    half_exponent = (n - 1) >> 1
    n_minus_one = n - 1

    for i in range(iterations):
        a = rng.randrange(MIN_WITNESS, bound)
        x = jacobi_symbol(a, n)

        if x == 0:
            return PrimalityVerdict(
                probably_prime=False,
                reject_reason="jacobi_zero",
                iterations_run=i + 1,
                witness=a,
                details=f"gcd({a}, n) > 1",
            )

        expected = n_minus_one if x == -1 else 1
        actual = mod_exp(a, half_exponent, n)

        if actual != expected:
            return PrimalityVerdict(
                probably_prime=False,
                reject_reason="euler_mismatch",
                iterations_run=i + 1,
                witness=a,
                details=f"Euler criterion failed for witness {a} (jacobi={x})",
            )

    return PrimalityVerdict(
        probably_prime=True,
        reject_reason="",
        iterations_run=iterations,
        witness=None,
        details=f"PASS: {iterations} iterations, witness_range={witness_range.value}",
    )


def solovay_strassen(
    n: int,
    iterations: int,
    rng: Optional[random.Random] = None,
    witness_range: WitnessRange = WitnessRange.LOW_WORD,
) -> bool:
    """True если n является probable prime после `iterations` итераций."""
    return evaluate_solovay_strassen(n, iterations, rng, witness_range).probably_prime
