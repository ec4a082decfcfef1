"""
Bitwise engine: two's-complement semantics over sign-magnitude values.

Magnitudes are split into little-endian 32-bit limbs (repeated division by
2**32 through the calculator). Negative values are encoded as the two's
complement of their magnitude over a fixed limb width. Every binary operation
uses width = max(limb counts) + 1, so the extra guard limb always holds the
sign bit and the result decodes unambiguously.

Shifts are arithmetic: shift_left multiplies by 2**n, shift_right floors the
division by 2**n (so -1 >> n == -1 for every n).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List

from .constants import LIMB_BASE, LIMB_BITS, LIMB_MASK, MAX_POWER
from .exc import InvalidArgumentError, NegativeNumberError
from .normalize import ZERO_PAIR, Canonical, canonical
from .rounding import RoundingMode, round_quotient
from .signed import ONE_PAIR, make, negate, subtract

if TYPE_CHECKING:
    from ..calculator.base import Calculator

# Debug printing control
DEBUG_BITWISE = False

def _dbg(msg: str) -> None:
    if DEBUG_BITWISE:
        print(msg)


_LIMB_BASE_DIGITS = str(LIMB_BASE)
_MINUS_ONE: Canonical = (-1, "1")
_LIMB_BYTES = LIMB_BITS // 8


# ----------------------------
# Limb conversion
# ----------------------------

def to_limbs(calc: "Calculator", digits: str) -> List[int]:
    """Little-endian 32-bit limbs of an unsigned magnitude ("0" -> [])."""
    limbs: List[int] = []
    while digits != "0":
        digits, r = calc.div_qr(digits, _LIMB_BASE_DIGITS)
        limbs.append(int(r))
    return limbs


def from_limbs(calc: "Calculator", limbs: List[int]) -> str:
    """Inverse of to_limbs."""
    value = "0"
    for limb in reversed(limbs):
        value = calc.add(calc.mul(value, _LIMB_BASE_DIGITS), str(limb))
    return value


def _complement(limbs: List[int]) -> List[int]:
    """Two's complement (invert, add one) within len(limbs) limbs."""
    out: List[int] = []
    carry = 1
    for limb in limbs:
        v = (~limb & LIMB_MASK) + carry
        out.append(v & LIMB_MASK)
        carry = v >> LIMB_BITS
    return out


def _encode(limbs: List[int], negative: bool, width: int) -> List[int]:
    padded = limbs + [0] * (width - len(limbs))
    return _complement(padded) if negative else padded


def _decode(calc: "Calculator", limbs: List[int]) -> Canonical:
    if limbs and (limbs[-1] >> (LIMB_BITS - 1)) & 1:
        return make(-1, from_limbs(calc, _complement(limbs)))
    return canonical(False, from_limbs(calc, limbs))


# ----------------------------
# Logical operations
# ----------------------------

def _combine(calc: "Calculator", x: Canonical, y: Canonical, op: Callable[[int, int], int]) -> Canonical:
    lx = to_limbs(calc, x[1])
    ly = to_limbs(calc, y[1])
    width = max(len(lx), len(ly)) + 1
    ex = _encode(lx, x[0] < 0, width)
    ey = _encode(ly, y[0] < 0, width)
    result = [op(a, b) & LIMB_MASK for a, b in zip(ex, ey)]
    _dbg(f"bitwise: width={width} x={ex} y={ey} -> {result}")
    return _decode(calc, result)


def and_(calc: "Calculator", x: Canonical, y: Canonical) -> Canonical:
    return _combine(calc, x, y, lambda a, b: a & b)


def or_(calc: "Calculator", x: Canonical, y: Canonical) -> Canonical:
    return _combine(calc, x, y, lambda a, b: a | b)


def xor(calc: "Calculator", x: Canonical, y: Canonical) -> Canonical:
    return _combine(calc, x, y, lambda a, b: a ^ b)


def not_(calc: "Calculator", x: Canonical) -> Canonical:
    """Bitwise complement: ~x == -x - 1."""
    return subtract(calc, negate(x), ONE_PAIR)


# ----------------------------
# Shifts
# ----------------------------

def _check_distance(distance: int) -> None:
    if isinstance(distance, bool) or not isinstance(distance, int):
        raise InvalidArgumentError(f"The shift distance must be an int, got {type(distance).__name__}.")


def shift_left(calc: "Calculator", x: Canonical, distance: int) -> Canonical:
    """x * 2**distance; a negative distance shifts right."""
    _check_distance(distance)
    if distance == 0 or x[0] == 0:
        return x
    if distance < 0:
        return shift_right(calc, x, -distance)
    if distance > MAX_POWER:
        raise InvalidArgumentError(f"The shift distance {distance} exceeds the maximum of {MAX_POWER}.")
    return make(x[0], calc.mul(x[1], calc.pow("2", distance)))


def shift_right(calc: "Calculator", x: Canonical, distance: int) -> Canonical:
    """floor(x / 2**distance); a negative distance shifts left."""
    _check_distance(distance)
    if distance == 0 or x[0] == 0:
        return x
    if distance < 0:
        return shift_left(calc, x, -distance)
    if distance >= bit_length(calc, x) + 1:
        # Every magnitude bit is shifted out; only the sign survives.
        return _MINUS_ONE if x[0] < 0 else ZERO_PAIR

    divisor = calc.pow("2", distance)
    q, r = calc.div_qr(x[1], divisor)
    if x[0] > 0:
        return make(1, q)
    return make(-1, round_quotient(calc, q, r, divisor, False, RoundingMode.FLOOR))


# ----------------------------
# Bit inspection
# ----------------------------

def _magnitude_bits(limbs: List[int]) -> int:
    if not limbs:
        return 0
    return (len(limbs) - 1) * LIMB_BITS + limbs[-1].bit_length()


def bit_length(calc: "Calculator", x: Canonical) -> int:
    """Minimal two's-complement width without the sign bit (0 and -1 give 0)."""
    if x[0] < 0:
        x = not_(calc, x)
    return _magnitude_bits(to_limbs(calc, x[1]))


def lowest_set_bit(calc: "Calculator", x: Canonical) -> int:
    """Index of the rightmost one bit, or -1 for zero."""
    if x[0] == 0:
        return -1
    # Negation preserves the lowest set bit in two's complement.
    for i, limb in enumerate(to_limbs(calc, x[1])):
        if limb:
            return i * LIMB_BITS + (limb & -limb).bit_length() - 1
    return -1


def test_bit(calc: "Calculator", x: Canonical, n: int) -> bool:
    """True when bit n of the two's-complement form of x is set."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(f"The bit to test must be an int, got {type(n).__name__}.")
    if n < 0:
        raise InvalidArgumentError("The bit to test cannot be negative.")
    limbs = to_limbs(calc, x[1])
    index, offset = divmod(n, LIMB_BITS)
    if index >= len(limbs):
        return x[0] < 0
    encoded = _encode(limbs, x[0] < 0, len(limbs) + 1)
    return bool((encoded[index] >> offset) & 1)


test_bit.__test__ = False  # keep pytest from collecting the name


# ----------------------------
# Byte strings
# ----------------------------

def to_bytes(calc: "Calculator", x: Canonical, signed: bool = True) -> bytes:
    """Big-endian byte string.

    signed=True: minimal two's complement (always room for the sign bit).
    signed=False: minimal unsigned form; negative values are rejected.
    Zero is a single 0x00 byte either way.
    """
    if not signed and x[0] < 0:
        raise NegativeNumberError("Cannot convert a negative number to an unsigned byte string.")

    nbits = bit_length(calc, x)
    if signed:
        nbytes = nbits // 8 + 1
    else:
        nbytes = max(1, (nbits + 7) // 8)

    limbs = to_limbs(calc, x[1])
    width = max(len(limbs), -(-nbytes // _LIMB_BYTES)) + 1
    encoded = _encode(limbs, x[0] < 0, width)
    raw = b"".join(limb.to_bytes(_LIMB_BYTES, "little") for limb in encoded)
    return raw[:nbytes][::-1]


def from_bytes(calc: "Calculator", data: bytes, signed: bool = True) -> Canonical:
    """Inverse of to_bytes; with signed=True the top bit of data[0] is the sign."""
    data = bytes(data)
    if not data:
        raise InvalidArgumentError("The byte string must not be empty.")

    negative = signed and bool(data[0] & 0x80)
    fill = b"\xff" if negative else b"\x00"
    padded = fill * (-len(data) % _LIMB_BYTES) + data
    limbs = [
        int.from_bytes(padded[i - _LIMB_BYTES:i], "big")
        for i in range(len(padded), 0, -_LIMB_BYTES)
    ]
    if negative:
        return make(-1, from_limbs(calc, _complement(limbs)))
    return canonical(False, from_limbs(calc, limbs))


__all__ = [
    "to_limbs",
    "from_limbs",
    "and_",
    "or_",
    "xor",
    "not_",
    "shift_left",
    "shift_right",
    "bit_length",
    "lowest_set_bit",
    "test_bit",
    "to_bytes",
    "from_bytes",
]
