"""
Calculator backend interface.

A Calculator performs unsigned arithmetic on magnitudes given as canonical
decimal digit strings: non-empty, ASCII digits only, no leading zero unless
the magnitude is exactly "0". Every method returns strings in the same form.

Signs never reach a Calculator; the signed layer strips them first and
re-applies them to the results. Implementations are stateless and must be
fully substitutable: the same inputs give the same outputs on every backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple

from ..core.exc import DivisionByZeroError, InvalidArgumentError


class Calculator(ABC):
    """Unsigned magnitude primitives over canonical digit strings."""

    #: Short backend name used in reprs and test ids.
    name: str = "abstract"

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    # ------------- comparison -------------

    def cmp(self, a: str, b: str) -> int:
        """Compare two magnitudes: -1, 0 or 1.

        Canonical magnitudes have no leading zeros, so the longer string is
        the larger value and equal lengths compare lexicographically.
        """
        if len(a) != len(b):
            return 1 if len(a) > len(b) else -1
        if a == b:
            return 0
        return 1 if a > b else -1

    # ------------- primitives -------------

    @abstractmethod
    def add(self, a: str, b: str) -> str:
        """Return a + b."""

    @abstractmethod
    def sub(self, a: str, b: str) -> str:
        """Return a - b. The caller guarantees a >= b."""

    @abstractmethod
    def mul(self, a: str, b: str) -> str:
        """Return a * b."""

    @abstractmethod
    def div_qr(self, a: str, b: str) -> Tuple[str, str]:
        """Return (q, r) with a == b*q + r and 0 <= r < b. b must not be "0"."""

    @abstractmethod
    def pow(self, a: str, e: int) -> str:
        """Return a ** e for a native exponent e >= 0 (0 ** 0 == 1)."""

    @abstractmethod
    def sqrt(self, n: str) -> str:
        """Return floor(sqrt(n))."""

    # ------------- derived -------------

    def div_q(self, a: str, b: str) -> str:
        return self.div_qr(a, b)[0]

    def div_r(self, a: str, b: str) -> str:
        return self.div_qr(a, b)[1]

    def gcd(self, a: str, b: str) -> str:
        """Euclid on magnitudes; gcd(x, "0") == x and gcd("0", "0") == "0"."""
        while b != "0":
            a, b = b, self.div_r(a, b)
        return a

    # ------------- guards shared by implementations -------------

    def _check_divisor(self, b: str) -> None:
        if b == "0":
            raise DivisionByZeroError.division_by_zero()

    def _check_sub(self, a: str, b: str) -> None:
        if self.cmp(a, b) < 0:
            raise InvalidArgumentError("magnitude subtraction underflow: minuend < subtrahend")

    def _check_exponent(self, e: int) -> None:
        if e < 0:
            raise InvalidArgumentError(f"negative exponent not allowed: e={e}")


__all__ = [
    "Calculator",
]
