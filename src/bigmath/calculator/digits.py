"""
Portable calculator working directly on decimal digit strings.

Magnitudes are cut into blocks small enough for native machine arithmetic
(BLOCK_DIGITS digits for add/sub, MUL_BLOCK_DIGITS for multiplication so a
block product plus carries still fits). Results are reassembled as strings.

Alignment notes:
- add/sub: blockwise carry/borrow, least significant block first.
- mul: schoolbook over blocks with a carry per row; operand lengths may differ.
- div: digit-by-digit long division against the divisor's 1..9 multiples.
- sqrt: Newton iteration from a 9...9 guess of half the digit count, stopping
  once the iterate stops decreasing. No floating point is ever involved.
"""

from __future__ import annotations

import math
from typing import List, Tuple

from ..core.constants import BLOCK_DIGITS, MUL_BLOCK_DIGITS
from ..core.exc import InvalidArgumentError
from ..core.normalize import strip_digits
from .base import Calculator

# Debug printing control
DEBUG_DIGITS = False

def _dbg(msg: str) -> None:
    if DEBUG_DIGITS:
        print(msg)


# ----------------------------
# Block helpers
# ----------------------------

def _to_blocks(digits: str, size: int) -> List[int]:
    """Split digits into little-endian integer blocks of `size` decimal digits."""
    blocks = []
    i = len(digits)
    while i > 0:
        start = max(0, i - size)
        blocks.append(int(digits[start:i]))
        i = start
    return blocks


def _from_blocks(blocks: List[int], size: int) -> str:
    """Inverse of _to_blocks; inner blocks are zero-padded, leading zeros stripped."""
    top = len(blocks) - 1
    while top > 0 and blocks[top] == 0:
        top -= 1
    parts = [str(blocks[top])]
    for k in range(top - 1, -1, -1):
        parts.append(str(blocks[k]).rjust(size, "0"))
    return "".join(parts)


class DigitStringCalculator(Calculator):
    """Calculator implementation using only digit strings and small native ints."""

    name = "digits"

    def __init__(self, max_digits: int = BLOCK_DIGITS, mul_digits: int = MUL_BLOCK_DIGITS) -> None:
        if max_digits < 1 or mul_digits < 1:
            raise InvalidArgumentError(f"Block sizes must be at least 1, got max_digits={max_digits}, mul_digits={mul_digits}.")
        self.max_digits = max_digits
        self.mul_digits = mul_digits

    # ------------- add / sub -------------

    def add(self, a: str, b: str) -> str:
        if a == "0":
            return b
        if b == "0":
            return a
        if len(a) <= self.max_digits and len(b) <= self.max_digits:
            return str(int(a) + int(b))

        size = self.max_digits
        base = 10 ** size
        x = _to_blocks(a, size)
        y = _to_blocks(b, size)
        if len(x) < len(y):
            x, y = y, x

        result = []
        carry = 0
        for k, xk in enumerate(x):
            total = xk + (y[k] if k < len(y) else 0) + carry
            carry, block = divmod(total, base)
            result.append(block)
        if carry:
            result.append(carry)
        return _from_blocks(result, size)

    def sub(self, a: str, b: str) -> str:
        if b == "0":
            return a
        self._check_sub(a, b)
        if a == b:
            return "0"
        if len(a) <= self.max_digits:
            return str(int(a) - int(b))

        size = self.max_digits
        base = 10 ** size
        x = _to_blocks(a, size)
        y = _to_blocks(b, size)

        result = []
        borrow = 0
        for k, xk in enumerate(x):
            diff = xk - (y[k] if k < len(y) else 0) - borrow
            if diff < 0:
                diff += base
                borrow = 1
            else:
                borrow = 0
            result.append(diff)
        # a >= b, so nothing is left to borrow once the top block is done.
        assert borrow == 0
        return _from_blocks(result, size)

    # ------------- mul -------------

    def mul(self, a: str, b: str) -> str:
        if a == "0" or b == "0":
            return "0"
        if a == "1":
            return b
        if b == "1":
            return a
        if len(a) + len(b) <= self.max_digits:
            return str(int(a) * int(b))

        size = self.mul_digits
        base = 10 ** size
        x = _to_blocks(a, size)
        y = _to_blocks(b, size)

        result = [0] * (len(x) + len(y))
        for i, xi in enumerate(x):
            if xi == 0:
                continue
            carry = 0
            for j, yj in enumerate(y):
                carry, result[i + j] = divmod(result[i + j] + xi * yj + carry, base)
            k = i + len(y)
            while carry:
                carry, result[k] = divmod(result[k] + carry, base)
                k += 1
        return _from_blocks(result, size)

    # ------------- div -------------

    def div_qr(self, a: str, b: str) -> Tuple[str, str]:
        self._check_divisor(b)
        if a == "0":
            return "0", "0"
        if b == "1":
            return a, "0"
        if a == b:
            return "1", "0"
        if self.cmp(a, b) < 0:
            return "0", a
        if len(a) <= self.max_digits:
            q, r = divmod(int(a), int(b))
            return str(q), str(r)

        # multiples[k] == b * k for k in 0..9
        multiples = ["0", b]
        for _ in range(8):
            multiples.append(self.add(multiples[-1], b))

        _dbg(f"div_qr: long division len(a)={len(a)}, len(b)={len(b)}")

        quotient = []
        rem = "0"
        for d in a:
            rem = d if rem == "0" else rem + d
            q = 0
            if self.cmp(rem, b) >= 0:
                for k in range(9, 0, -1):
                    if self.cmp(multiples[k], rem) <= 0:
                        q = k
                        break
                rem = self.sub(rem, multiples[q])
            quotient.append(str(q))

        return strip_digits("".join(quotient)), rem

    # ------------- pow / sqrt -------------

    def pow(self, a: str, e: int) -> str:
        self._check_exponent(e)
        result = "1"
        square = a
        while e > 0:
            if e & 1:
                result = self.mul(result, square)
            e >>= 1
            if e:
                square = self.mul(square, square)
        return result

    def sqrt(self, n: str) -> str:
        if len(n) <= self.max_digits:
            return str(math.isqrt(int(n)))

        # initial approximation
        x = "9" * max(len(n) // 2, 1)
        decreased = False
        steps = 0

        while True:
            nx = self.div_q(self.add(x, self.div_q(n, x)), "2")
            steps += 1
            if nx == x or (decreased and self.cmp(nx, x) > 0):
                break
            decreased = self.cmp(nx, x) < 0
            x = nx

        _dbg(f"sqrt: converged after {steps} Newton steps (len(n)={len(n)})")
        return x


__all__ = [
    "DigitStringCalculator",
]
