"""
Core math modules для polyrecon

Точная рациональная арифметика, декодирование оснований и интерполяция
Лагранжа без единой операции с плавающей точкой.
"""

# Rational
from polyrecon.core.math.rational import (
    DivisionByZero,
    InvalidRational,
    Rational,
    RationalLike,
    gcd,
)

# Base decoding
from polyrecon.core.math.base_decoding import (
    DIGIT_ALPHABET,
    MAX_BASE,
    MIN_BASE,
    InvalidDigit,
    decode_in_base,
    digit_value,
)

# Polynomial algebra
from polyrecon.core.math.polynomial import (
    Polynomial,
    poly_add,
    poly_evaluate,
    poly_format,
    poly_from_ints,
    poly_mul,
    poly_scale,
)

# Lagrange interpolation
from polyrecon.core.math.lagrange import (
    DuplicateAbscissa,
    InsufficientPoints,
    basis_denominator,
    basis_numerator,
    ensure_distinct_abscissas,
    interpolate,
)

__all__ = [
    # Rational — Exceptions
    "DivisionByZero",
    "InvalidRational",
    # Rational — Types
    "Rational",
    "RationalLike",
    # Rational — Functions
    "gcd",
    # Base decoding — Constants
    "DIGIT_ALPHABET",
    "MAX_BASE",
    "MIN_BASE",
    # Base decoding — Exceptions
    "InvalidDigit",
    # Base decoding — Functions
    "decode_in_base",
    "digit_value",
    # Polynomial — Types
    "Polynomial",
    # Polynomial — Functions
    "poly_add",
    "poly_evaluate",
    "poly_format",
    "poly_from_ints",
    "poly_mul",
    "poly_scale",
    # Lagrange — Exceptions
    "DuplicateAbscissa",
    "InsufficientPoints",
    # Lagrange — Functions
    "basis_denominator",
    "basis_numerator",
    "ensure_distinct_abscissas",
    "interpolate",
]
