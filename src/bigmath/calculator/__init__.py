"""
Calculator backends
===================

Interchangeable implementations of the unsigned magnitude primitives:

- DigitStringCalculator: portable, digit strings processed in native-sized blocks.
- NativeCalculator: Python's built-in int.
- GmpCalculator: gmpy2 (optional; import `bigmath.calculator.gmp` directly).

CalculatorRegistry picks the default once; callers may always pass their own.
"""

from .base import Calculator
from .digits import DigitStringCalculator
from .native import NativeCalculator
from .registry import CalculatorRegistry, detect, gmp_available, resolve

__all__ = [
    "Calculator",
    "DigitStringCalculator",
    "NativeCalculator",
    "CalculatorRegistry",
    "detect",
    "gmp_available",
    "resolve",
]
