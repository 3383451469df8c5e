"""
Core math modules для complexible

Численные примитивы с IEEE-754 семантикой, округление и нормализация углов.
"""

from src.complexible.math.numerical_safeguards import (
    # Constants
    PI,
    TAU,
    # IEEE-754 arithmetic
    ieee_cos,
    ieee_divide,
    ieee_log,
    ieee_log10,
    ieee_log_base,
    ieee_pow,
    ieee_sin,
    # Validation
    is_valid_float,
    # Rounding
    round_to_places,
    # Angles
    wrap_radians,
)

__all__ = [
    # Constants
    "PI",
    "TAU",
    # IEEE-754 arithmetic
    "ieee_cos",
    "ieee_divide",
    "ieee_log",
    "ieee_log10",
    "ieee_log_base",
    "ieee_pow",
    "ieee_sin",
    # Validation
    "is_valid_float",
    # Rounding
    "round_to_places",
    # Angles
    "wrap_radians",
]
