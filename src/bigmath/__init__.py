"""
bigmath
=======

Arbitrary-precision signed integers with pluggable calculator backends,
ten rounding modes for division, two's-complement bitwise operations and
base conversion (2..36 and arbitrary alphabets).
"""

from .integer import BigInteger, BigIntegerConvertible, ZERO, ONE, TEN
from .core.rounding import RoundingMode
from .core.exc import (
    MathError,
    NumberFormatError,
    RoundingNecessaryError,
    DivisionByZeroError,
    NegativeNumberError,
    IntegerOverflowError,
    InvalidArgumentError,
    NoInverseError,
)
from .calculator import (
    Calculator,
    DigitStringCalculator,
    NativeCalculator,
    CalculatorRegistry,
)

__version__ = "0.1.0"

__all__ = [
    "BigInteger",
    "BigIntegerConvertible",
    "ZERO",
    "ONE",
    "TEN",
    "RoundingMode",
    # errors
    "MathError",
    "NumberFormatError",
    "RoundingNecessaryError",
    "DivisionByZeroError",
    "NegativeNumberError",
    "IntegerOverflowError",
    "InvalidArgumentError",
    "NoInverseError",
    # backends
    "Calculator",
    "DigitStringCalculator",
    "NativeCalculator",
    "CalculatorRegistry",
]
