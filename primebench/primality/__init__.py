"""Primality: вероятностные тесты простоты.

- Solovay–Strassen (критерий Эйлера + символ Якоби)
"""

from .solovay_strassen import (
    LOW_WORD_MASK,
    MIN_WITNESS,
    PrimalityVerdict,
    WitnessRange,
    evaluate_solovay_strassen,
    solovay_strassen,
    witness_bound,
)

__all__ = [
    "LOW_WORD_MASK",
    "MIN_WITNESS",
    "PrimalityVerdict",
    "WitnessRange",
    "evaluate_solovay_strassen",
    "solovay_strassen",
    "witness_bound",
]
