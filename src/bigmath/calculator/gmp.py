"""
Calculator backed by GMP through gmpy2.

Only importable when gmpy2 is installed (extra: `bigmath[gmp]`); the registry
probes for it before importing this module.
"""

from __future__ import annotations

from typing import Tuple

import gmpy2

from .base import Calculator


def _mpz(digits: str) -> "gmpy2.mpz":
    return gmpy2.mpz(digits, 10)


def _digits(value: "gmpy2.mpz") -> str:
    return value.digits(10)


class GmpCalculator(Calculator):
    """Accelerated backend; results are identical to the portable calculators."""

    name = "gmp"

    def add(self, a: str, b: str) -> str:
        return _digits(_mpz(a) + _mpz(b))

    def sub(self, a: str, b: str) -> str:
        self._check_sub(a, b)
        return _digits(_mpz(a) - _mpz(b))

    def mul(self, a: str, b: str) -> str:
        return _digits(_mpz(a) * _mpz(b))

    def div_qr(self, a: str, b: str) -> Tuple[str, str]:
        self._check_divisor(b)
        q, r = gmpy2.t_divmod(_mpz(a), _mpz(b))
        return _digits(q), _digits(r)

    def pow(self, a: str, e: int) -> str:
        self._check_exponent(e)
        return _digits(_mpz(a) ** e)

    def gcd(self, a: str, b: str) -> str:
        return _digits(gmpy2.gcd(_mpz(a), _mpz(b)))

    def sqrt(self, n: str) -> str:
        return _digits(gmpy2.isqrt(_mpz(n)))


__all__ = [
    "GmpCalculator",
]
