"""
Signed arithmetic over canonical (sign, digits) pairs.

The calculator only ever sees magnitudes. This layer owns the sign tables:
- add/sub: same signs add magnitudes; mixed signs subtract the smaller
  magnitude from the larger and keep the larger operand's sign.
- mul/div: result is negative iff the operand signs differ.
- remainder takes the dividend's sign (truncating division), so that
  q * b + r == a and |r| < |b|.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple, Union

from .constants import MAX_POWER
from .exc import (
    DivisionByZeroError,
    InvalidArgumentError,
    NegativeNumberError,
    NoInverseError,
)
from .normalize import ZERO_PAIR, Canonical
from .rounding import RoundingMode, round_quotient

if TYPE_CHECKING:
    from ..calculator.base import Calculator

ONE_PAIR: Canonical = (1, "1")


def make(sign: int, digits: str) -> Canonical:
    """Attach a sign to a magnitude; a zero magnitude always gives the zero pair."""
    if digits == "0":
        return ZERO_PAIR
    return (-1 if sign < 0 else 1), digits


# ----------------------------
# Sign-only operations
# ----------------------------

def negate(x: Canonical) -> Canonical:
    return -x[0], x[1]


def absolute(x: Canonical) -> Canonical:
    return (1 if x[0] else 0), x[1]


def compare(calc: "Calculator", x: Canonical, y: Canonical) -> int:
    """Total order: sign first, then magnitude (length, then digits)."""
    if x[0] != y[0]:
        return 1 if x[0] > y[0] else -1
    if x[0] == 0:
        return 0
    c = calc.cmp(x[1], y[1])
    return c if x[0] > 0 else -c


# ----------------------------
# Ring operations
# ----------------------------

def add(calc: "Calculator", x: Canonical, y: Canonical) -> Canonical:
    sx, dx = x
    sy, dy = y
    if sy == 0:
        return x
    if sx == 0:
        return y
    if sx == sy:
        return sx, calc.add(dx, dy)
    c = calc.cmp(dx, dy)
    if c == 0:
        return ZERO_PAIR
    if c > 0:
        return sx, calc.sub(dx, dy)
    return sy, calc.sub(dy, dx)


def subtract(calc: "Calculator", x: Canonical, y: Canonical) -> Canonical:
    return add(calc, x, negate(y))


def multiply(calc: "Calculator", x: Canonical, y: Canonical) -> Canonical:
    if x[0] == 0 or y[0] == 0:
        return ZERO_PAIR
    return make(x[0] * y[0], calc.mul(x[1], y[1]))


def power(calc: "Calculator", x: Canonical, exponent: int) -> Canonical:
    """x ** exponent for 0 <= exponent <= MAX_POWER; x ** 0 == 1 for every x."""
    if isinstance(exponent, bool) or not isinstance(exponent, int):
        raise InvalidArgumentError(f"The exponent must be an int, got {type(exponent).__name__}.")
    if exponent < 0 or exponent > MAX_POWER:
        raise InvalidArgumentError(f"The exponent {exponent} is not in the range 0 to {MAX_POWER}.")
    if exponent == 0:
        return ONE_PAIR
    if exponent == 1 or x[0] == 0:
        return x
    sign = -1 if (x[0] < 0 and exponent % 2 == 1) else 1
    return make(sign, calc.pow(x[1], exponent))


# ----------------------------
# Division family
# ----------------------------

def _check_divisor(y: Canonical) -> None:
    if y[0] == 0:
        raise DivisionByZeroError.division_by_zero()


def quotient_and_remainder(calc: "Calculator", x: Canonical, y: Canonical) -> Tuple[Canonical, Canonical]:
    """Truncating division: quotient toward zero, remainder with the dividend's sign."""
    _check_divisor(y)
    if x[0] == 0:
        return ZERO_PAIR, ZERO_PAIR
    q, r = calc.div_qr(x[1], y[1])
    return make(x[0] * y[0], q), make(x[0], r)


def quotient(calc: "Calculator", x: Canonical, y: Canonical) -> Canonical:
    return quotient_and_remainder(calc, x, y)[0]


def remainder(calc: "Calculator", x: Canonical, y: Canonical) -> Canonical:
    return quotient_and_remainder(calc, x, y)[1]


def divide(
    calc: "Calculator",
    x: Canonical,
    y: Canonical,
    mode: Union[RoundingMode, int, str] = RoundingMode.UNNECESSARY,
) -> Canonical:
    """Quotient rounded according to `mode` (UNNECESSARY requires an exact division)."""
    mode = RoundingMode.coerce(mode)
    _check_divisor(y)
    if x[0] == 0:
        return ZERO_PAIR
    if y == ONE_PAIR:
        return x
    q, r = calc.div_qr(x[1], y[1])
    positive = x[0] == y[0]
    return make(x[0] * y[0], round_quotient(calc, q, r, y[1], positive, mode))


def _check_modulus(m: Canonical) -> None:
    if m[0] == 0:
        raise DivisionByZeroError.modulus_must_not_be_zero()
    if m[0] < 0:
        raise NegativeNumberError("The modulus must not be negative.")


def mod(calc: "Calculator", x: Canonical, m: Canonical) -> Canonical:
    """Modulo in [0, m) for a positive modulus m."""
    _check_modulus(m)
    if x[0] == 0:
        return ZERO_PAIR
    r = calc.div_r(x[1], m[1])
    if x[0] < 0 and r != "0":
        r = calc.sub(m[1], r)
    return make(1, r)


def mod_inverse(calc: "Calculator", x: Canonical, m: Canonical) -> Canonical:
    """y in [0, m) with x * y == 1 (mod m), by the extended Euclidean algorithm."""
    _check_modulus(m)
    if m == ONE_PAIR:
        return ZERO_PAIR

    old_r, r = mod(calc, x, m), m
    old_s, s = ONE_PAIR, ZERO_PAIR
    while r[0] != 0:
        q, rem = quotient_and_remainder(calc, old_r, r)
        old_r, r = r, rem
        old_s, s = s, subtract(calc, old_s, multiply(calc, q, s))

    if old_r != ONE_PAIR:
        raise NoInverseError.no_modular_inverse()
    return mod(calc, old_s, m)


def mod_pow(calc: "Calculator", x: Canonical, exponent: Canonical, m: Canonical) -> Canonical:
    """x ** exponent mod m by square-and-multiply; the exponent may be arbitrarily large."""
    if exponent[0] < 0:
        raise NegativeNumberError("The exponent must not be negative.")
    _check_modulus(m)

    result = mod(calc, ONE_PAIR, m)
    base = mod(calc, x, m)
    e = exponent[1]
    while e != "0":
        e, bit = calc.div_qr(e, "2")
        if bit == "1":
            result = mod(calc, multiply(calc, result, base), m)
        if e != "0":
            base = mod(calc, multiply(calc, base, base), m)
    return result


# ----------------------------
# Number theory
# ----------------------------

def gcd(calc: "Calculator", x: Canonical, y: Canonical) -> Canonical:
    """Non-negative GCD; signs and argument order are irrelevant, gcd(0, 0) == 0."""
    return make(1, calc.gcd(x[1], y[1]))


def sqrt(calc: "Calculator", x: Canonical) -> Canonical:
    """Floor square root of a non-negative value."""
    if x[0] < 0:
        raise NegativeNumberError("Cannot calculate the square root of a negative number.")
    return make(1, calc.sqrt(x[1]))


__all__ = [
    "ONE_PAIR",
    "make",
    "negate",
    "absolute",
    "compare",
    "add",
    "subtract",
    "multiply",
    "power",
    "quotient_and_remainder",
    "quotient",
    "remainder",
    "divide",
    "mod",
    "mod_inverse",
    "mod_pow",
    "gcd",
    "sqrt",
]
