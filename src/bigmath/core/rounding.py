"""
Rounding engine for integer division.

Given the exact truncating division |a| = |b| * q + r (magnitudes), decide
whether the final quotient stays at q (toward zero) or moves to q + 1 (away
from zero). The sign of the exact result decides what "toward +inf" means.

Tie-breaking for the HALF_* modes compares 2*r with |b|: below is toward
zero, above is away from zero, equal is settled by the mode itself.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Union

from .exc import InvalidArgumentError, RoundingNecessaryError

if TYPE_CHECKING:
    from ..calculator.base import Calculator


class RoundingMode(Enum):
    """Closed set of rounding policies; integer codes are stable."""

    #: Asserts the result is exact; any discarded fraction is an error.
    UNNECESSARY = 0
    #: Away from zero.
    UP = 1
    #: Toward zero (truncation).
    DOWN = 2
    #: Toward positive infinity.
    CEILING = 3
    #: Toward negative infinity.
    FLOOR = 4
    #: Nearest neighbour, ties away from zero.
    HALF_UP = 5
    #: Nearest neighbour, ties toward zero.
    HALF_DOWN = 6
    #: Nearest neighbour, ties toward positive infinity.
    HALF_CEILING = 7
    #: Nearest neighbour, ties toward negative infinity.
    HALF_FLOOR = 8
    #: Nearest neighbour, ties toward the even neighbour (banker's rounding).
    HALF_EVEN = 9

    @classmethod
    def coerce(cls, mode: Union["RoundingMode", int, str]) -> "RoundingMode":
        """Accept a member, its integer code or its name; anything else is invalid."""
        if isinstance(mode, RoundingMode):
            return mode
        if isinstance(mode, bool):
            raise InvalidArgumentError(f"Invalid rounding mode: {mode!r}")
        if isinstance(mode, int):
            try:
                return cls(mode)
            except ValueError:
                raise InvalidArgumentError(f"Invalid rounding mode: {mode!r}") from None
        if isinstance(mode, str) and mode.upper() in cls.__members__:
            return cls[mode.upper()]
        raise InvalidArgumentError(f"Invalid rounding mode: {mode!r}")


def _rounds_away(mode: RoundingMode, positive: bool, half: int, odd: bool) -> bool:
    """Exhaustive decision table: True moves the quotient magnitude up by one.

    half: sign of (2*r - |b|); odd: parity of the truncated quotient.
    """
    if mode is RoundingMode.UNNECESSARY:
        raise RoundingNecessaryError.rounding_necessary()
    if mode is RoundingMode.UP:
        return True
    if mode is RoundingMode.DOWN:
        return False
    if mode is RoundingMode.CEILING:
        return positive
    if mode is RoundingMode.FLOOR:
        return not positive

    if half != 0:
        # Not a tie: every HALF_* mode goes to the nearest neighbour.
        if mode in _HALF_MODES:
            return half > 0
        raise InvalidArgumentError(f"Invalid rounding mode: {mode!r}")

    if mode is RoundingMode.HALF_UP:
        return True
    if mode is RoundingMode.HALF_DOWN:
        return False
    if mode is RoundingMode.HALF_CEILING:
        return positive
    if mode is RoundingMode.HALF_FLOOR:
        return not positive
    if mode is RoundingMode.HALF_EVEN:
        return odd

    raise InvalidArgumentError(f"Invalid rounding mode: {mode!r}")


_HALF_MODES = frozenset({
    RoundingMode.HALF_UP,
    RoundingMode.HALF_DOWN,
    RoundingMode.HALF_CEILING,
    RoundingMode.HALF_FLOOR,
    RoundingMode.HALF_EVEN,
})


def round_quotient(
    calc: "Calculator",
    quotient: str,
    remainder: str,
    divisor: str,
    positive: bool,
    mode: Union[RoundingMode, int, str],
) -> str:
    """Return the rounded quotient magnitude.

    quotient/remainder/divisor are magnitudes of the truncating division;
    `positive` is True when the exact result is >= 0.
    """
    mode = RoundingMode.coerce(mode)

    if remainder == "0":
        return quotient

    half = calc.cmp(calc.mul(remainder, "2"), divisor)
    odd = int(quotient[-1]) % 2 == 1

    if _rounds_away(mode, positive, half, odd):
        return calc.add(quotient, "1")
    return quotient


__all__ = [
    "RoundingMode",
    "round_quotient",
]
