"""
Digit-string normalizer: native input -> canonical (sign, digits) pairs.

- Canonical pair: sign in {-1, 0, 1}, digits without leading zeros; zero is (0, "0").
- Decimal text may carry a fraction and an exponent, but only exact integers pass:
  a nonzero discarded fraction raises RoundingNecessaryError, never truncates.
- Floats pass only when integral; the conversion is exact (as_integer_ratio).
- int <-> digit-string bridges split large values so the interpreter's
  int/str conversion limit never applies.
"""

from __future__ import annotations

import math
import re
from typing import Tuple

from .constants import MAX_EXPONENT, STR_CHUNK_DIGITS
from .exc import NumberFormatError, RoundingNecessaryError

# (sign, digits)
Canonical = Tuple[int, str]

ZERO_PAIR: Canonical = (0, "0")

_DECIMAL_RE = re.compile(
    r"(?P<sign>[-+])?(?P<integral>[0-9]+)(?:\.(?P<fraction>[0-9]+))?(?:[eE](?P<exponent>[-+]?[0-9]+))?"
)

# Values up to this many bits always print in fewer than STR_CHUNK_DIGITS digits.
_CHUNK_BITS = STR_CHUNK_DIGITS * 3


# ----------------------------
# Canonical helpers
# ----------------------------

def strip_digits(digits: str) -> str:
    """Remove leading zeros; an all-zero string becomes "0"."""
    stripped = digits.lstrip("0")
    return stripped if stripped else "0"


def canonical(negative: bool, digits: str) -> Canonical:
    """Build a canonical pair from a sign flag and an unsigned digit string."""
    digits = strip_digits(digits)
    if digits == "0":
        return ZERO_PAIR
    return (-1 if negative else 1), digits


def split_sign(text: str) -> Tuple[bool, str]:
    """Split an optional leading +/- from text. Raises on empty input or a bare sign."""
    if text == "":
        raise NumberFormatError("The number cannot be empty.")
    negative = text[0] == "-"
    body = text[1:] if text[0] in "+-" else text
    if body == "":
        raise NumberFormatError.invalid_format(text)
    return negative, body


# ----------------------------
# int <-> digits bridges
# ----------------------------

def int_to_digits(n: int) -> str:
    """Decimal digits of a non-negative int, for any size."""
    if n < 0:
        raise ValueError("int_to_digits expects a non-negative int")
    if n.bit_length() <= _CHUNK_BITS:
        return str(n)
    half = (n.bit_length() * 3 // 10) // 2
    hi, lo = divmod(n, 10 ** half)
    return int_to_digits(hi) + int_to_digits(lo).rjust(half, "0")


def digits_to_int(digits: str) -> int:
    """Inverse of int_to_digits for an unsigned digit string of any length."""
    if len(digits) <= STR_CHUNK_DIGITS:
        return int(digits)
    mid = len(digits) // 2
    low_len = len(digits) - mid
    return digits_to_int(digits[:mid]) * 10 ** low_len + digits_to_int(digits[mid:])


# ----------------------------
# Normalizers
# ----------------------------

def _parse_exponent(text: str, raw: str) -> int:
    digits = raw.lstrip("+-").lstrip("0")
    # Compare lengths first so absurd exponents never reach int().
    if len(digits) > len(str(MAX_EXPONENT)) or int(digits or "0") > MAX_EXPONENT:
        raise NumberFormatError(f"The exponent of \"{text}\" exceeds {MAX_EXPONENT} in magnitude.")
    return int(raw)


def normalize_int(value: int) -> Canonical:
    """Canonical pair of a native int (bool is rejected by callers, not here)."""
    if value == 0:
        return ZERO_PAIR
    return (-1 if value < 0 else 1), int_to_digits(abs(value))


def normalize_float(value: float) -> Canonical:
    """Canonical pair of an integral float; fractional floats need rounding."""
    if math.isnan(value) or math.isinf(value):
        raise NumberFormatError.invalid_format(repr(value))
    if not value.is_integer():
        raise RoundingNecessaryError.not_an_integer(repr(value))
    numerator, _ = value.as_integer_ratio()
    return normalize_int(numerator)


def normalize_decimal(text: str) -> Canonical:
    """Parse signed decimal text (optional fraction/exponent) that denotes an exact integer.

    Examples:
        "007"     -> (1, "7")
        "-0"      -> (0, "0")
        "1.20e1"  -> (1, "12")
        "1e-1"    -> RoundingNecessaryError
        " 1"      -> NumberFormatError
    """
    match = _DECIMAL_RE.fullmatch(text)
    if match is None:
        raise NumberFormatError.invalid_format(text)

    negative = match.group("sign") == "-"
    integral = match.group("integral")
    fraction = match.group("fraction") or ""
    exponent = _parse_exponent(text, match.group("exponent") or "0")

    combined = integral + fraction
    if combined.strip("0") == "":
        return ZERO_PAIR

    # Number of combined digits that sit to the right of the decimal point.
    scale = len(fraction) - exponent

    if scale <= 0:
        return canonical(negative, combined + "0" * (-scale))

    if scale >= len(combined):
        # Every digit is fractional and at least one is nonzero.
        raise RoundingNecessaryError.not_an_integer(text)

    discarded = combined[-scale:]
    if discarded.strip("0") != "":
        raise RoundingNecessaryError.not_an_integer(text)

    return canonical(negative, combined[:-scale])


__all__ = [
    "Canonical",
    "ZERO_PAIR",
    "strip_digits",
    "canonical",
    "split_sign",
    "int_to_digits",
    "digits_to_int",
    "normalize_int",
    "normalize_float",
    "normalize_decimal",
]
