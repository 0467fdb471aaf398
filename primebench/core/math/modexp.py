"""
Modular Exponentiation: binary (square-and-multiply)

Вычисляет base^exponent mod modulus за O(log exponent) умножений.

ИНВАРИАНТЫ:
1. Все промежуточные произведения являются точными int, редукция после умножения
2. Результат всегда в [0, modulus), включая modulus == 1
"""


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """
    base^exponent mod modulus через двоичное возведение в степень.

    База редуцируется по модулю один раз до цикла. Аккумулятор стартует с
    1 % modulus, поэтому для modulus == 1 результат 0.

    Args:
        base: Основание (любой int, отрицательный редуцируется в [0, modulus))
        exponent: Показатель (>= 0)
        modulus: Модуль (>= 1)

    Returns:
        base^exponent mod modulus

    Raises:
        ValueError: Если exponent < 0 или modulus < 1

    Examples:
        >>> mod_exp(4, 13, 497)
        445
        >>> mod_exp(7, 0, 13)
        1
        >>> mod_exp(7, 5, 1)
        0
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    if modulus < 1:
        raise ValueError(f"modulus must be positive, got {modulus}")

    result = 1 % modulus
    base %= modulus

    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1

    return result
