"""
Тесты для Modular Exponentiation

Проверяемые инварианты:
1. Совпадение со встроенным pow(base, exp, mod)
2. mod_exp(b, 0, m) == 1 для m > 1
3. Результат всегда в [0, m)
4. Precondition violations → ValueError
"""

import random

import pytest

from primebench.core.math.modexp import mod_exp


class TestModExpKnownValues:
    """Известные значения."""

    def test_textbook_example(self):
        assert mod_exp(4, 13, 497) == 445

    def test_small_values(self):
        assert mod_exp(2, 10, 1000) == 24
        assert mod_exp(3, 4, 5) == 1
        assert mod_exp(10, 1, 7) == 3

    def test_fermat_little_theorem(self):
        """a^(p-1) ≡ 1 (mod p) для простого p."""
        p = 2**127 - 1
        for a in (2, 3, 12345, p - 1):
            assert mod_exp(a, p - 1, p) == 1

    def test_zero_base(self):
        assert mod_exp(0, 5, 7) == 0
        assert mod_exp(0, 0, 7) == 1


class TestModExpProperties:
    """Свойства на случайных входах."""

    @pytest.fixture
    def rng(self):
        return random.Random(20240601)

    def test_matches_builtin_pow(self, rng):
        for _ in range(200):
            base = rng.randrange(0, 2**256)
            exponent = rng.randrange(0, 2**128)
            modulus = rng.randrange(2, 2**256)
            assert mod_exp(base, exponent, modulus) == pow(base, exponent, modulus)

    def test_zero_exponent_is_one(self, rng):
        for _ in range(50):
            base = rng.randrange(0, 2**64)
            modulus = rng.randrange(2, 2**64)
            assert mod_exp(base, 0, modulus) == 1

    def test_result_in_range(self, rng):
        for _ in range(200):
            modulus = rng.randrange(1, 10**6)
            result = mod_exp(rng.randrange(0, 10**9), rng.randrange(0, 10**4), modulus)
            assert 0 <= result < modulus

    def test_large_2048_bit_modulus(self, rng):
        modulus = rng.getrandbits(2048) | (1 << 2047) | 1
        base = rng.getrandbits(2048)
        exponent = (modulus - 1) >> 1
        assert mod_exp(base, exponent, modulus) == pow(base, exponent, modulus)


class TestModExpEdgeCases:
    """Граничные случаи и preconditions."""

    def test_modulus_one(self):
        """Всё сравнимо с 0 по модулю 1, включая b^0."""
        assert mod_exp(7, 5, 1) == 0
        assert mod_exp(7, 0, 1) == 0

    def test_negative_base_reduced(self):
        assert mod_exp(-2, 3, 7) == pow(-2, 3, 7)
        assert mod_exp(-1, 2, 5) == 1

    def test_negative_exponent_rejected(self):
        with pytest.raises(ValueError, match="exponent must be non-negative"):
            mod_exp(2, -1, 7)

    def test_non_positive_modulus_rejected(self):
        with pytest.raises(ValueError, match="modulus must be positive"):
            mod_exp(2, 3, 0)
        with pytest.raises(ValueError, match="modulus must be positive"):
            mod_exp(2, 3, -5)
