"""
Random odd integers заданной битовой длины.

Значение равномерно выбирается из [2^(bits-1), 2^bits), затем чётное
значение увеличивается на 1. Это смещает распределение (нечётные соседи
чётных выборок встречаются чаще), что допустимо для benchmark.

Выход за 2^bits невозможен: максимальная чётная выборка 2^bits - 2.
"""

import random
from typing import Final, Optional

# Минимальная длина, при которой диапазон [2^(bits-1), 2^bits) содержит
# больше одного значения
MIN_CANDIDATE_BITS: Final[int] = 2


def generate_odd_random_number(bits: int, rng: Optional[random.Random] = None) -> int:
    """
    Случайное нечётное число из [2^(bits-1), 2^bits).

    Args:
        bits: Битовая длина (>= 2)
        rng: Источник случайности; если None, создаётся новый
            random.Random() с seed из os.urandom

    Returns:
        Нечётный int со старшим битом bits-1

    Raises:
        ValueError: Если bits < 2
    """
    if bits < MIN_CANDIDATE_BITS:
        raise ValueError(f"bits must be >= {MIN_CANDIDATE_BITS}, got {bits}")

    if rng is None:
        rng = random.Random()

    num = rng.randrange(1 << (bits - 1), 1 << bits)
    if num % 2 == 0:
        num += 1
    return num
