"""
Core math modules

Численные примитивы форматирования: валидация, точное деление,
округление half-up, приближение цепными дробями.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Constants
    DECIMAL_PRECISION,
    EPS_FRACTION,
    # Validation
    is_valid_float,
    validate_finite,
    validate_int,
    validate_non_negative_int,
    validate_positive,
    # Exact arithmetic
    exact_ratio,
    format_rounded,
    round_half_up,
    strip_trailing_zeros,
)

# Continued Fraction
from src.core.math.continued_fraction import approximate_fraction

__all__ = [
    # Numerical Safeguards: Constants
    "DECIMAL_PRECISION",
    "EPS_FRACTION",
    # Numerical Safeguards: Validation
    "is_valid_float",
    "validate_finite",
    "validate_int",
    "validate_non_negative_int",
    "validate_positive",
    # Numerical Safeguards: Exact arithmetic
    "exact_ratio",
    "format_rounded",
    "round_half_up",
    "strip_trailing_zeros",
    # Continued Fraction
    "approximate_fraction",
]
