"""
Calculator backed by Python's built-in arbitrary-size int.

Digit strings are bridged through normalize.digits_to_int / int_to_digits so
magnitudes beyond the interpreter's int/str conversion limit still work.
"""

from __future__ import annotations

import math
from typing import Tuple

from ..core.normalize import digits_to_int, int_to_digits
from .base import Calculator


class NativeCalculator(Calculator):
    """Portable default: every primitive is a single built-in int operation."""

    name = "native"

    def add(self, a: str, b: str) -> str:
        return int_to_digits(digits_to_int(a) + digits_to_int(b))

    def sub(self, a: str, b: str) -> str:
        self._check_sub(a, b)
        return int_to_digits(digits_to_int(a) - digits_to_int(b))

    def mul(self, a: str, b: str) -> str:
        return int_to_digits(digits_to_int(a) * digits_to_int(b))

    def div_qr(self, a: str, b: str) -> Tuple[str, str]:
        self._check_divisor(b)
        q, r = divmod(digits_to_int(a), digits_to_int(b))
        return int_to_digits(q), int_to_digits(r)

    def pow(self, a: str, e: int) -> str:
        self._check_exponent(e)
        return int_to_digits(digits_to_int(a) ** e)

    def gcd(self, a: str, b: str) -> str:
        return int_to_digits(math.gcd(digits_to_int(a), digits_to_int(b)))

    def sqrt(self, n: str) -> str:
        return int_to_digits(math.isqrt(digits_to_int(n)))


__all__ = [
    "NativeCalculator",
]
