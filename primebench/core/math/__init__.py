"""
Core math modules для primebench

Арифметика больших чисел и численные примитивы замеров.
"""

# Numerical Safeguards
from primebench.core.math.numerical_safeguards import (
    EPS_CALC,
    EPS_ELAPSED_SEC,
    floor_non_negative,
    is_valid_float,
    safe_divide,
    sanitize_float,
    validate_non_negative_int,
    validate_positive_int,
)

# Number theory
from primebench.core.math.jacobi import jacobi_symbol
from primebench.core.math.modexp import mod_exp
from primebench.core.math.random_odd import (
    MIN_CANDIDATE_BITS,
    generate_odd_random_number,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_CALC",
    "EPS_ELAPSED_SEC",
    # Numerical Safeguards: Functions
    "floor_non_negative",
    "is_valid_float",
    "safe_divide",
    "sanitize_float",
    "validate_non_negative_int",
    "validate_positive_int",
    # Number theory: Constants
    "MIN_CANDIDATE_BITS",
    # Number theory: Functions
    "generate_odd_random_number",
    "jacobi_symbol",
    "mod_exp",
]
