"""
Jacobi Symbol: итеративный алгоритм через квадратичный закон взаимности

(a/n) для нечётного положительного n. Значение 0 означает gcd(a, n) > 1 и
для теста простоты является окончательным свидетельством составности n.
"""

from typing import Final

# n mod 8, при которых (2/n) = -1
_TWO_IS_NON_RESIDUE: Final[frozenset[int]] = frozenset({3, 5})


def jacobi_symbol(a: int, n: int) -> int:
    """
    Символ Якоби (a/n).

    Алгоритм:
    1. s = +1, a = a mod n
    2. Пока a != 0:
       - вынести все множители 2 из a; каждый множитель меняет знак s,
         если n mod 8 ∈ {3, 5}
       - swap(a, n); сменить знак s, если a ≡ n ≡ 3 (mod 4)
       - a = a mod n
    3. Результат s если n == 1, иначе 0

    Args:
        a: Числитель (любой int; редуцируется по модулю n)
        n: Знаменатель, нечётный и положительный

    Returns:
        -1, 0 или 1

    Raises:
        ValueError: Если n чётный или n <= 0

    Examples:
        >>> jacobi_symbol(1001, 9907)
        -1
        >>> jacobi_symbol(19, 45)
        1
        >>> jacobi_symbol(6, 9)
        0
    """
    if n <= 0 or n % 2 == 0:
        raise ValueError(f"n must be odd positive, got {n}")

    a %= n
    s = 1

    while a != 0:
        # младший установленный бит = степень двойки в a
        v2 = (a & -a).bit_length() - 1
        if v2:
            a >>= v2
            if v2 & 1 and n % 8 in _TWO_IS_NON_RESIDUE:
                s = -s

        a, n = n, a
        if a % 4 == 3 and n % 4 == 3:
            s = -s
        a %= n

    return s if n == 1 else 0
