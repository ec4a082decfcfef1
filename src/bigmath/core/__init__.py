"""
bigmath core
============

Leaf-level primitives shared by every layer: constants, the error taxonomy,
the digit-string normalizer, the rounding engine, and the signed, bitwise and
base-conversion algorithms over canonical (sign, digits) pairs.

Nothing here picks a calculator: every algorithm takes one as its first
argument. `bigmath.integer.BigInteger` wires them to the registry default.
"""

# NOTE:
#   Canonical pair = (sign, digits) with sign in {-1, 0, 1} and digits a decimal
#   magnitude without leading zeros. Zero is (0, "0"). Calculators only ever see
#   the digits half of a pair.

# Tunables
from .constants import (
    MAX_POWER,
    MAX_EXPONENT,
    NATIVE_INT_BITS,
    NATIVE_INT_MIN,
    NATIVE_INT_MAX,
    BLOCK_DIGITS,
    MUL_BLOCK_DIGITS,
    STR_CHUNK_DIGITS,
    LIMB_BITS,
    LIMB_BASE,
    LIMB_MASK,
    DICTIONARY,
    MIN_BASE,
    MAX_BASE,
)

# Errors
from .exc import (
    MathError,
    NumberFormatError,
    RoundingNecessaryError,
    DivisionByZeroError,
    NegativeNumberError,
    IntegerOverflowError,
    InvalidArgumentError,
    NoInverseError,
)

# Normalizer
from .normalize import (
    Canonical,
    ZERO_PAIR,
    canonical,
    strip_digits,
    int_to_digits,
    digits_to_int,
    normalize_int,
    normalize_float,
    normalize_decimal,
)

# Rounding
from .rounding import RoundingMode, round_quotient

# Algorithm modules (imported as namespaces: signed.add, bitwise.and_, radix.parse)
from . import signed, bitwise, radix

__all__ = [
    # constants
    "MAX_POWER",
    "MAX_EXPONENT",
    "NATIVE_INT_BITS",
    "NATIVE_INT_MIN",
    "NATIVE_INT_MAX",
    "BLOCK_DIGITS",
    "MUL_BLOCK_DIGITS",
    "STR_CHUNK_DIGITS",
    "LIMB_BITS",
    "LIMB_BASE",
    "LIMB_MASK",
    "DICTIONARY",
    "MIN_BASE",
    "MAX_BASE",
    # errors
    "MathError",
    "NumberFormatError",
    "RoundingNecessaryError",
    "DivisionByZeroError",
    "NegativeNumberError",
    "IntegerOverflowError",
    "InvalidArgumentError",
    "NoInverseError",
    # normalizer
    "Canonical",
    "ZERO_PAIR",
    "canonical",
    "strip_digits",
    "int_to_digits",
    "digits_to_int",
    "normalize_int",
    "normalize_float",
    "normalize_decimal",
    # rounding
    "RoundingMode",
    "round_quotient",
    # algorithms
    "signed",
    "bitwise",
    "radix",
]
