"""
Base converter: text in bases 2..36 and in caller-supplied alphabets.

Standard bases use the case-insensitive dictionary 0-9a-z; output is always
lowercase. Arbitrary alphabets are case sensitive, unsigned, and map symbol
index -> digit value (alphabet[0] is zero).

Digits are consumed and produced in chunks that fit in a native int, so the
calculator is called once per chunk rather than once per character.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List

from .constants import BLOCK_DIGITS, DICTIONARY, MAX_BASE, MIN_BASE
from .exc import InvalidArgumentError, NegativeNumberError, NumberFormatError
from .normalize import ZERO_PAIR, Canonical, canonical, split_sign, strip_digits

if TYPE_CHECKING:
    from ..calculator.base import Calculator

# Debug printing control
DEBUG_RADIX = False

def _dbg(msg: str) -> None:
    if DEBUG_RADIX:
        print(msg)


def _check_base(base: int) -> None:
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidArgumentError(f"The base must be an int, got {type(base).__name__}.")
    if base < MIN_BASE or base > MAX_BASE:
        raise InvalidArgumentError(f"Base {base} is not in range {MIN_BASE} to {MAX_BASE}.")


def _chunk_size(base: int) -> int:
    """Largest k with base**k below 10**BLOCK_DIGITS."""
    k = 1
    limit = 10 ** BLOCK_DIGITS
    while base ** (k + 1) < limit:
        k += 1
    return k


def _small_to_base(n: int, base: int, symbols: str) -> str:
    if n == 0:
        return symbols[0]
    out: List[str] = []
    while n:
        n, r = divmod(n, base)
        out.append(symbols[r])
    return "".join(reversed(out))


# ----------------------------
# Bases 2..36
# ----------------------------

def parse(calc: "Calculator", text: str, base: int = 10) -> Canonical:
    """Signed text in `base` -> canonical pair.

    Examples:
        parse(calc, "-ff", 16)  -> (-1, "255")
        parse(calc, "0101", 2)  -> (1, "5")
        parse(calc, "19", 8)    -> NumberFormatError
    """
    _check_base(base)
    negative, body = split_sign(text)

    allowed = DICTIONARY[:base]
    for ch in body:
        # Unicode case folding maps some non-ASCII symbols (KELVIN SIGN) onto letters.
        if not ch.isascii() or ch.lower() not in allowed:
            raise NumberFormatError(f'"{ch}" is not a valid character in base {base}.')
    lowered = body.lower()

    if base == 10:
        return canonical(negative, body)

    lowered = lowered.lstrip("0")
    if not lowered:
        return ZERO_PAIR

    k = _chunk_size(base)
    value = "0"
    for i in range(0, len(lowered), k):
        chunk = lowered[i:i + k]
        scale = str(base ** len(chunk))
        value = calc.add(calc.mul(value, scale), str(int(chunk, base)))
    _dbg(f"radix.parse: base={base} chunks={-(-len(lowered) // k)} -> {value}")
    return canonical(negative, value)


def to_base(calc: "Calculator", x: Canonical, base: int = 10) -> str:
    """Canonical pair -> lowercase text in `base`, with a leading '-' when negative."""
    _check_base(base)
    sign, digits = x
    if base == 10:
        body = digits
    elif sign == 0:
        body = "0"
    else:
        k = _chunk_size(base)
        divisor = str(base ** k)
        parts: List[str] = []
        while digits != "0":
            digits, r = calc.div_qr(digits, divisor)
            parts.append(_small_to_base(int(r), base, DICTIONARY).rjust(k, "0"))
        body = "".join(reversed(parts)).lstrip("0") or "0"
    return "-" + body if sign < 0 else body


# ----------------------------
# Arbitrary alphabets
# ----------------------------

def _check_alphabet(alphabet: str) -> Dict[str, int]:
    if len(alphabet) < 2:
        raise InvalidArgumentError("The alphabet must contain at least 2 chars.")
    index = {ch: i for i, ch in enumerate(alphabet)}
    if len(index) != len(alphabet):
        raise InvalidArgumentError("The alphabet must not contain duplicate chars.")
    return index


def to_arbitrary_base(calc: "Calculator", x: Canonical, alphabet: str) -> str:
    """Non-negative value -> text over `alphabet` (zero is alphabet[0])."""
    _check_alphabet(alphabet)
    if x[0] < 0:
        raise NegativeNumberError("to_arbitrary_base() does not support negative numbers.")

    base = str(len(alphabet))
    digits = x[1]
    if digits == "0":
        return alphabet[0]

    out: List[str] = []
    while digits != "0":
        digits, r = calc.div_qr(digits, base)
        out.append(alphabet[int(r)])
    return "".join(reversed(out))


def from_arbitrary_base(calc: "Calculator", text: str, alphabet: str) -> Canonical:
    """Text over `alphabet` -> non-negative canonical pair. Case sensitive, no sign."""
    index = _check_alphabet(alphabet)
    if text == "":
        raise NumberFormatError("The number cannot be empty.")

    values: List[int] = []
    for ch in text:
        if ch not in index:
            raise NumberFormatError.char_not_in_alphabet(ch)
        values.append(index[ch])

    base = len(alphabet)
    k = _chunk_size(base)
    value = "0"
    for i in range(0, len(values), k):
        chunk = values[i:i + k]
        small = 0
        for v in chunk:
            small = small * base + v
        value = calc.add(calc.mul(value, str(base ** len(chunk))), str(small))
    return canonical(False, strip_digits(value))


__all__ = [
    "parse",
    "to_base",
    "to_arbitrary_base",
    "from_arbitrary_base",
]
