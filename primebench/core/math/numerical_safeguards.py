"""
Numerical Safeguards: Safe Math Primitives для замеров benchmark

Модуль обеспечивает численную устойчивость расчётов, в которых участвуют
float-величины замеров (elapsed time, throughput, scale factor):
- Безопасное деление с защитой от деления на ноль
- NaN/Inf санитизация входов и результатов
- Валидация параметров (положительность, неотрицательность)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не происходит (возвращается fallback)
2. NaN/Inf никогда не пропагируют (заменяются на fallback)
3. Большие int (счётчики trials) приводятся к float только здесь
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Минимальное различимое время замера (секунды)
# perf_counter на всех поддерживаемых платформах точнее 1 нс
EPS_ELAPSED_SEC: Final[float] = 1e-9

# Epsilon для общих вычислений
EPS_CALC: Final[float] = 1e-12


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли значение валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite, False если NaN или Inf
    """
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    Args:
        value: Исходное значение
        fallback: Значение для замены NaN/Inf (default: 0.0)

    Returns:
        value если валидное, иначе fallback

    Examples:
        >>> sanitize_float(2.5)
        2.5
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_divide(
    numerator: float,
    denominator: float,
    eps: float = EPS_CALC,
    fallback: float = 0.0,
) -> float:
    """
    Безопасное деление с защитой от деления на ноль и NaN/Inf.

    Используется для throughput = total_tries / elapsed: пустой прогон
    (0 trials) или нулевое время дают fallback, а не ZeroDivisionError.

    ВАЖНО: если abs(denominator) < eps, возвращается fallback. Знаменатели
    в этом модуле всегда неотрицательные (время, количество), поэтому
    знаковая защита не нужна.

    Args:
        numerator: Числитель (int допустим, приводится к float)
        denominator: Знаменатель
        eps: Минимальный абсолютный порог для знаменателя
        fallback: Значение при делении на ноль (default: 0.0)

    Returns:
        Результат деления или fallback

    Examples:
        >>> safe_divide(10, 2.0)
        5.0
        >>> safe_divide(10, 0.0)
        0.0
        >>> safe_divide(0, 0.0)
        0.0
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    num_clean = sanitize_float(float(numerator), fallback=0.0)
    denom_clean = sanitize_float(float(denominator), fallback=0.0)

    if abs(denom_clean) < eps:
        return fallback

    try:
        result = num_clean / denom_clean
    except (ZeroDivisionError, OverflowError):
        return fallback

    return sanitize_float(result, fallback=fallback)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_positive_int(value: int, name: str) -> None:
    """
    Валидация, что целое значение строго положительное.

    Raises:
        ValueError: Если value не int или value <= 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация, что целое значение неотрицательное.

    Raises:
        ValueError: Если value не int или value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def floor_non_negative(value: float) -> int:
    """
    floor(value), ограниченный снизу нулём.

    NaN и ±Inf трактуются как 0: scale factor, который не даёт конечного
    числа trials, означает пустой прогон.

    Examples:
        >>> floor_non_negative(1024 * 2.5)
        2560
        >>> floor_non_negative(-3.0)
        0
        >>> floor_non_negative(float('nan'))
        0
    """
    clean = sanitize_float(value, fallback=0.0)
    if clean <= 0:
        return 0
    return math.floor(clean)
