"""
Core math modules для bignum

Schoolbook примитивы над десятичными цифрами (little-endian).
"""

from bignum.core.math.digit_arithmetic import (
    # Constants
    DIGIT_BASE,
    ZERO_DIGITS,
    # Normalization
    is_zero_digits,
    strip_leading_zeros,
    validate_digits,
    # Comparison
    compare_abs_digits,
    # Arithmetic
    add_digits,
    multiply_digits,
    subtract_abs_digits,
    # Conversion
    digits_to_int,
    digits_to_str,
    int_to_digits,
)

__all__ = [
    # Constants
    "DIGIT_BASE",
    "ZERO_DIGITS",
    # Normalization
    "is_zero_digits",
    "strip_leading_zeros",
    "validate_digits",
    # Comparison
    "compare_abs_digits",
    # Arithmetic
    "add_digits",
    "multiply_digits",
    "subtract_abs_digits",
    # Conversion
    "digits_to_int",
    "digits_to_str",
    "int_to_digits",
]
