"""
BigInteger: immutable arbitrary-precision signed integer.

- Canonical form: (sign, digits) with sign in {-1, 0, 1} and decimal digits
  without leading zeros; zero is exactly (0, "0").
- Every operation returns a new value; nothing mutates.
- Unsigned work goes through a Calculator. Each method takes an optional
  `calculator=` keyword; without it the registry default is used.
- Division is truncating (quotient toward zero, remainder with the dividend's
  sign). `//` and `%` are not provided; use quotient()/remainder()/mod().

Examples:
    >>> a = BigInteger.of("123456789012345678901234567890")
    >>> str(a * 3)
    '370370367037037036703703703670'
    >>> str(BigInteger.of(7).divided_by(2, RoundingMode.HALF_EVEN))
    '4'
    >>> str(BigInteger.of(-3) >> 1)
    '-2'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .calculator import Calculator, resolve
from .core import bitwise, radix, signed
from .core.constants import NATIVE_INT_MAX, NATIVE_INT_MIN
from .core.exc import IntegerOverflowError, InvalidArgumentError
from .core.normalize import (
    Canonical,
    digits_to_int,
    normalize_decimal,
    normalize_float,
    normalize_int,
)
from .core.rounding import RoundingMode

# Anything BigInteger.of() accepts.
BigIntegerConvertible = Union["BigInteger", int, float, str]
RoundingModeLike = Union[RoundingMode, int, str]

_NATIVE_MAX_DIGITS = len(str(NATIVE_INT_MAX))


def _is_canonical(sign: int, digits: str) -> bool:
    if not isinstance(digits, str) or not digits:
        return False
    if not (digits.isascii() and digits.isdigit()):
        return False
    if sign == 0:
        return digits == "0"
    if sign not in (-1, 1):
        return False
    return digits[0] != "0"


@dataclass(frozen=True, repr=False)
class BigInteger:
    """Arbitrary-precision signed integer in canonical sign/digits form."""
    sign: int
    digits: str

    def __post_init__(self):
        if isinstance(self.sign, bool) or not isinstance(self.sign, int) or not _is_canonical(self.sign, self.digits):
            raise InvalidArgumentError(
                f"Not a canonical integer: sign={self.sign!r}, digits={self.digits!r}"
            )

    # ------------- constructors -------------

    @classmethod
    def _of_pair(cls, pair: Canonical) -> "BigInteger":
        sign, digits = pair
        if sign == 0:
            return ZERO
        if sign > 0 and digits == "1":
            return ONE
        return cls(sign, digits)

    @classmethod
    def of(cls, value: BigIntegerConvertible) -> "BigInteger":
        """Convert a BigInteger, int, integral float or decimal string.

        Strings may carry a fraction and an exponent as long as the value is an
        exact integer: "1.20e1" is 12, "1.5" raises RoundingNecessaryError.
        """
        if isinstance(value, BigInteger):
            return value
        if isinstance(value, bool):
            raise InvalidArgumentError("Cannot convert a bool to BigInteger.")
        if isinstance(value, int):
            return cls._of_pair(normalize_int(value))
        if isinstance(value, float):
            return cls._of_pair(normalize_float(value))
        if isinstance(value, str):
            return cls._of_pair(normalize_decimal(value))
        raise InvalidArgumentError(f"Cannot convert a value of type {type(value).__name__} to BigInteger.")

    @classmethod
    def parse(cls, text: str, base: int = 10, *, calculator: Optional[Calculator] = None) -> "BigInteger":
        """Parse signed text in base 2..36 (letters are case-insensitive)."""
        if not isinstance(text, str):
            raise InvalidArgumentError(f"Expected str, got {type(text).__name__}.")
        return cls._of_pair(radix.parse(resolve(calculator), text, base))

    @classmethod
    def from_arbitrary_base(
        cls, text: str, alphabet: str, *, calculator: Optional[Calculator] = None
    ) -> "BigInteger":
        """Decode unsigned text over a caller-supplied alphabet (case sensitive)."""
        return cls._of_pair(radix.from_arbitrary_base(resolve(calculator), text, alphabet))

    @classmethod
    def from_bytes(
        cls, data: bytes, signed: bool = True, *, calculator: Optional[Calculator] = None
    ) -> "BigInteger":
        """Decode a big-endian byte string (two's complement when signed)."""
        return cls._of_pair(bitwise.from_bytes(resolve(calculator), data, signed))

    @classmethod
    def from_json(cls, text: str) -> "BigInteger":
        """Inverse of to_json(); the string is validated like any other input."""
        if not isinstance(text, str):
            raise InvalidArgumentError(f"Expected str, got {type(text).__name__}.")
        return cls.of(text)

    @staticmethod
    def zero() -> "BigInteger":
        return ZERO

    @staticmethod
    def one() -> "BigInteger":
        return ONE

    @staticmethod
    def ten() -> "BigInteger":
        return TEN

    # ------------- aggregates -------------

    @classmethod
    def min(cls, *values: BigIntegerConvertible, calculator: Optional[Calculator] = None) -> "BigInteger":
        """Smallest of the given values; at least one is required."""
        if not values:
            raise InvalidArgumentError("min() requires at least one value.")
        calc = resolve(calculator)
        best = cls.of(values[0])
        for v in values[1:]:
            other = cls.of(v)
            if signed.compare(calc, other._pair, best._pair) < 0:
                best = other
        return best

    @classmethod
    def max(cls, *values: BigIntegerConvertible, calculator: Optional[Calculator] = None) -> "BigInteger":
        """Largest of the given values; at least one is required."""
        if not values:
            raise InvalidArgumentError("max() requires at least one value.")
        calc = resolve(calculator)
        best = cls.of(values[0])
        for v in values[1:]:
            other = cls.of(v)
            if signed.compare(calc, other._pair, best._pair) > 0:
                best = other
        return best

    @classmethod
    def sum(cls, *values: BigIntegerConvertible, calculator: Optional[Calculator] = None) -> "BigInteger":
        """Sum of the given values; at least one is required."""
        if not values:
            raise InvalidArgumentError("sum() requires at least one value.")
        calc = resolve(calculator)
        total = cls.of(values[0])._pair
        for v in values[1:]:
            total = signed.add(calc, total, cls.of(v)._pair)
        return cls._of_pair(total)

    # ------------- internals -------------

    @property
    def _pair(self) -> Canonical:
        return self.sign, self.digits

    # ------------- arithmetic -------------

    def plus(self, that: BigIntegerConvertible, *, calculator: Optional[Calculator] = None) -> "BigInteger":
        return self._of_pair(signed.add(resolve(calculator), self._pair, BigInteger.of(that)._pair))

    def minus(self, that: BigIntegerConvertible, *, calculator: Optional[Calculator] = None) -> "BigInteger":
        return self._of_pair(signed.subtract(resolve(calculator), self._pair, BigInteger.of(that)._pair))

    def multiplied_by(self, that: BigIntegerConvertible, *, calculator: Optional[Calculator] = None) -> "BigInteger":
        return self._of_pair(signed.multiply(resolve(calculator), self._pair, BigInteger.of(that)._pair))

    def divided_by(
        self,
        that: BigIntegerConvertible,
        rounding_mode: RoundingModeLike = RoundingMode.UNNECESSARY,
        *,
        calculator: Optional[Calculator] = None,
    ) -> "BigInteger":
        """Quotient rounded with `rounding_mode`.

        The default UNNECESSARY asserts the division is exact and raises
        RoundingNecessaryError otherwise.
        """
        pair = signed.divide(resolve(calculator), self._pair, BigInteger.of(that)._pair, rounding_mode)
        return self._of_pair(pair)

    def quotient(self, that: BigIntegerConvertible, *, calculator: Optional[Calculator] = None) -> "BigInteger":
        """Truncating quotient (toward zero)."""
        return self._of_pair(signed.quotient(resolve(calculator), self._pair, BigInteger.of(that)._pair))

    def remainder(self, that: BigIntegerConvertible, *, calculator: Optional[Calculator] = None) -> "BigInteger":
        """Truncating remainder; takes the sign of this number."""
        return self._of_pair(signed.remainder(resolve(calculator), self._pair, BigInteger.of(that)._pair))

    def quotient_and_remainder(
        self, that: BigIntegerConvertible, *, calculator: Optional[Calculator] = None
    ) -> Tuple["BigInteger", "BigInteger"]:
        q, r = signed.quotient_and_remainder(resolve(calculator), self._pair, BigInteger.of(that)._pair)
        return self._of_pair(q), self._of_pair(r)

    def mod(self, m: BigIntegerConvertible, *, calculator: Optional[Calculator] = None) -> "BigInteger":
        """Modulo in [0, m); m must be positive."""
        return self._of_pair(signed.mod(resolve(calculator), self._pair, BigInteger.of(m)._pair))

    def mod_inverse(self, m: BigIntegerConvertible, *, calculator: Optional[Calculator] = None) -> "BigInteger":
        return self._of_pair(signed.mod_inverse(resolve(calculator), self._pair, BigInteger.of(m)._pair))

    def mod_pow(
        self,
        exponent: BigIntegerConvertible,
        m: BigIntegerConvertible,
        *,
        calculator: Optional[Calculator] = None,
    ) -> "BigInteger":
        """this ** exponent mod m; the exponent is not capped."""
        pair = signed.mod_pow(
            resolve(calculator), self._pair, BigInteger.of(exponent)._pair, BigInteger.of(m)._pair
        )
        return self._of_pair(pair)

    def power(self, exponent: int, *, calculator: Optional[Calculator] = None) -> "BigInteger":
        return self._of_pair(signed.power(resolve(calculator), self._pair, exponent))

    def gcd(self, that: BigIntegerConvertible, *, calculator: Optional[Calculator] = None) -> "BigInteger":
        return self._of_pair(signed.gcd(resolve(calculator), self._pair, BigInteger.of(that)._pair))

    def sqrt(self, *, calculator: Optional[Calculator] = None) -> "BigInteger":
        """Floor square root."""
        return self._of_pair(signed.sqrt(resolve(calculator), self._pair))

    def negated(self) -> "BigInteger":
        return self._of_pair(signed.negate(self._pair))

    def abs(self) -> "BigInteger":
        return self if self.sign >= 0 else self._of_pair(signed.absolute(self._pair))

    # ------------- comparison -------------

    def compare_to(self, that: BigIntegerConvertible, *, calculator: Optional[Calculator] = None) -> int:
        """-1, 0 or 1."""
        return signed.compare(resolve(calculator), self._pair, BigInteger.of(that)._pair)

    def is_equal_to(self, that: BigIntegerConvertible) -> bool:
        return self.compare_to(that) == 0

    def is_less_than(self, that: BigIntegerConvertible) -> bool:
        return self.compare_to(that) < 0

    def is_less_than_or_equal_to(self, that: BigIntegerConvertible) -> bool:
        return self.compare_to(that) <= 0

    def is_greater_than(self, that: BigIntegerConvertible) -> bool:
        return self.compare_to(that) > 0

    def is_greater_than_or_equal_to(self, that: BigIntegerConvertible) -> bool:
        return self.compare_to(that) >= 0

    # ------------- predicates -------------

    def get_sign(self) -> int:
        return self.sign

    def is_zero(self) -> bool:
        return self.sign == 0

    def is_negative(self) -> bool:
        return self.sign < 0

    def is_negative_or_zero(self) -> bool:
        return self.sign <= 0

    def is_positive(self) -> bool:
        return self.sign > 0

    def is_positive_or_zero(self) -> bool:
        return self.sign >= 0

    def is_even(self) -> bool:
        return int(self.digits[-1]) % 2 == 0

    def is_odd(self) -> bool:
        return not self.is_even()

    # ------------- bitwise -------------

    def and_(self, that: BigIntegerConvertible, *, calculator: Optional[Calculator] = None) -> "BigInteger":
        return self._of_pair(bitwise.and_(resolve(calculator), self._pair, BigInteger.of(that)._pair))

    def or_(self, that: BigIntegerConvertible, *, calculator: Optional[Calculator] = None) -> "BigInteger":
        return self._of_pair(bitwise.or_(resolve(calculator), self._pair, BigInteger.of(that)._pair))

    def xor(self, that: BigIntegerConvertible, *, calculator: Optional[Calculator] = None) -> "BigInteger":
        return self._of_pair(bitwise.xor(resolve(calculator), self._pair, BigInteger.of(that)._pair))

    def not_(self, *, calculator: Optional[Calculator] = None) -> "BigInteger":
        return self._of_pair(bitwise.not_(resolve(calculator), self._pair))

    def shifted_left(self, distance: int, *, calculator: Optional[Calculator] = None) -> "BigInteger":
        return self._of_pair(bitwise.shift_left(resolve(calculator), self._pair, distance))

    def shifted_right(self, distance: int, *, calculator: Optional[Calculator] = None) -> "BigInteger":
        """Arithmetic shift: floor(this / 2**distance)."""
        return self._of_pair(bitwise.shift_right(resolve(calculator), self._pair, distance))

    def bit_length(self, *, calculator: Optional[Calculator] = None) -> int:
        return bitwise.bit_length(resolve(calculator), self._pair)

    def lowest_set_bit(self, *, calculator: Optional[Calculator] = None) -> int:
        return bitwise.lowest_set_bit(resolve(calculator), self._pair)

    def test_bit(self, n: int, *, calculator: Optional[Calculator] = None) -> bool:
        return bitwise.test_bit(resolve(calculator), self._pair, n)

    # ------------- conversions -------------

    def to_int(self) -> int:
        """Native int within the signed 64-bit range, else IntegerOverflowError."""
        if len(self.digits) <= _NATIVE_MAX_DIGITS:
            value = int(self.digits) * self.sign
            if NATIVE_INT_MIN <= value <= NATIVE_INT_MAX:
                return value
        raise IntegerOverflowError.to_int_overflow(self.to_string(), NATIVE_INT_MIN, NATIVE_INT_MAX)

    def to_float(self) -> float:
        """Nearest float; values past the float range give a signed infinity."""
        return float(self.to_string())

    def to_string(self) -> str:
        return "-" + self.digits if self.sign < 0 else self.digits

    def to_base(self, base: int, *, calculator: Optional[Calculator] = None) -> str:
        return radix.to_base(resolve(calculator), self._pair, base)

    def to_arbitrary_base(self, alphabet: str, *, calculator: Optional[Calculator] = None) -> str:
        return radix.to_arbitrary_base(resolve(calculator), self._pair, alphabet)

    def to_bytes(self, signed: bool = True, *, calculator: Optional[Calculator] = None) -> bytes:
        return bitwise.to_bytes(resolve(calculator), self._pair, signed)

    def to_json(self) -> str:
        return self.to_string()

    # ------------- Python protocol -------------

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string()}')"

    def __hash__(self) -> int:
        return hash((self.sign, self.digits))

    def __bool__(self) -> bool:
        return self.sign != 0

    def __int__(self) -> int:
        return self.sign * digits_to_int(self.digits)

    def __float__(self) -> float:
        return self.to_float()

    def __reduce__(self):
        return (BigInteger.of, (self.to_string(),))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.sign == other.sign and self.digits == other.digits

    def __lt__(self, other: "BigInteger") -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: "BigInteger") -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: "BigInteger") -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: "BigInteger") -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __neg__(self) -> "BigInteger":
        return self.negated()

    def __pos__(self) -> "BigInteger":
        return self

    def __abs__(self) -> "BigInteger":
        return self.abs()

    def __invert__(self) -> "BigInteger":
        return self.not_()

    # Binary operators accept BigInteger and int operands only.

    def __add__(self, other: Union["BigInteger", int]) -> "BigInteger":
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other: int) -> "BigInteger":
        if not isinstance(other, int):
            return NotImplemented
        return BigInteger.of(other).plus(self)

    def __sub__(self, other: Union["BigInteger", int]) -> "BigInteger":
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.minus(other)

    def __rsub__(self, other: int) -> "BigInteger":
        if not isinstance(other, int):
            return NotImplemented
        return BigInteger.of(other).minus(self)

    def __mul__(self, other: Union["BigInteger", int]) -> "BigInteger":
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.multiplied_by(other)

    def __rmul__(self, other: int) -> "BigInteger":
        if not isinstance(other, int):
            return NotImplemented
        return BigInteger.of(other).multiplied_by(self)

    def __pow__(self, exponent: int) -> "BigInteger":
        if not isinstance(exponent, int):
            return NotImplemented
        return self.power(exponent)

    def __and__(self, other: Union["BigInteger", int]) -> "BigInteger":
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.and_(other)

    def __rand__(self, other: int) -> "BigInteger":
        if not isinstance(other, int):
            return NotImplemented
        return BigInteger.of(other).and_(self)

    def __or__(self, other: Union["BigInteger", int]) -> "BigInteger":
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.or_(other)

    def __ror__(self, other: int) -> "BigInteger":
        if not isinstance(other, int):
            return NotImplemented
        return BigInteger.of(other).or_(self)

    def __xor__(self, other: Union["BigInteger", int]) -> "BigInteger":
        if not isinstance(other, (BigInteger, int)):
            return NotImplemented
        return self.xor(other)

    def __rxor__(self, other: int) -> "BigInteger":
        if not isinstance(other, int):
            return NotImplemented
        return BigInteger.of(other).xor(self)

    def __lshift__(self, distance: int) -> "BigInteger":
        if not isinstance(distance, int):
            return NotImplemented
        return self.shifted_left(distance)

    def __rshift__(self, distance: int) -> "BigInteger":
        if not isinstance(distance, int):
            return NotImplemented
        return self.shifted_right(distance)


ZERO = BigInteger(0, "0")
ONE = BigInteger(1, "1")
TEN = BigInteger(1, "10")


__all__ = [
    "BigInteger",
    "BigIntegerConvertible",
    "ZERO",
    "ONE",
    "TEN",
]
