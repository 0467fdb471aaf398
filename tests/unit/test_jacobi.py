"""
Тесты для Jacobi Symbol

Проверяемые инварианты:
1. jacobi(a, n) ∈ {-1, 1} при gcd(a, n) == 1, иначе 0
2. Мультипликативность по a: (ab/n) = (a/n)(b/n)
3. Совпадение с произведением символов Лежандра по разложению n
4. Чётный или неположительный n → ValueError
"""

import math

import pytest

from primebench.core.math.jacobi import jacobi_symbol


def _factorize(n: int) -> list[int]:
    """Простые множители n (с повторениями), trial division."""
    factors = []
    d = 3
    while d * d <= n:
        while n % d == 0:
            factors.append(d)
            n //= d
        d += 2
    if n > 1:
        factors.append(n)
    return factors


def _legendre(a: int, p: int) -> int:
    """Символ Лежандра через критерий Эйлера."""
    a %= p
    if a == 0:
        return 0
    return 1 if pow(a, (p - 1) // 2, p) == 1 else -1


def _jacobi_reference(a: int, n: int) -> int:
    result = 1
    for p in _factorize(n):
        result *= _legendre(a, p)
    return result


ODD_MODULI = list(range(1, 200, 2))


class TestJacobiKnownValues:
    """Известные значения."""

    def test_textbook_values(self):
        assert jacobi_symbol(1001, 9907) == -1
        assert jacobi_symbol(19, 45) == 1
        assert jacobi_symbol(8, 21) == -1
        assert jacobi_symbol(5, 21) == 1

    def test_shared_factor_is_zero(self):
        assert jacobi_symbol(6, 9) == 0
        assert jacobi_symbol(3, 561) == 0
        assert jacobi_symbol(0, 7) == 0

    def test_modulus_one(self):
        """(a/1) = 1 для любого a."""
        assert jacobi_symbol(0, 1) == 1
        assert jacobi_symbol(12345, 1) == 1

    def test_one_and_minus_one(self):
        assert jacobi_symbol(1, 97) == 1
        # (-1/p) = 1 ⇔ p ≡ 1 (mod 4)
        assert jacobi_symbol(-1, 13) == 1
        assert jacobi_symbol(-1, 11) == -1

    def test_numerator_larger_than_modulus(self):
        assert jacobi_symbol(1001 + 9907 * 5, 9907) == jacobi_symbol(1001, 9907)


class TestJacobiProperties:
    """Свойства на полном переборе малых значений."""

    def test_matches_reference(self):
        for n in ODD_MODULI:
            for a in range(0, 2 * n + 3):
                assert jacobi_symbol(a, n) == _jacobi_reference(a, n), (a, n)

    def test_coprime_gives_unit(self):
        for n in ODD_MODULI[1:]:
            for a in range(1, n):
                value = jacobi_symbol(a, n)
                if math.gcd(a, n) == 1:
                    assert value in (-1, 1)
                else:
                    assert value == 0

    def test_multiplicativity(self):
        for n in range(3, 120, 2):
            for a in range(0, 40):
                for b in range(0, 40):
                    assert jacobi_symbol(a * b, n) == jacobi_symbol(a, n) * jacobi_symbol(b, n)

    def test_large_prime_matches_euler_criterion(self):
        p = 2**127 - 1
        for a in (2, 3, 5, 7, 2**64 + 13, p - 2):
            expected = 1 if pow(a, (p - 1) // 2, p) == 1 else -1
            assert jacobi_symbol(a, p) == expected


class TestJacobiPreconditions:
    """Precondition violations."""

    def test_even_modulus_rejected(self):
        with pytest.raises(ValueError, match="n must be odd positive"):
            jacobi_symbol(3, 10)

    def test_non_positive_modulus_rejected(self):
        with pytest.raises(ValueError, match="n must be odd positive"):
            jacobi_symbol(3, 0)
        with pytest.raises(ValueError, match="n must be odd positive"):
            jacobi_symbol(3, -7)
