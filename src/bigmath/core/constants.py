"""
bigmath Core Constants
======================

Integer constants shared by the normalizer, the calculators and the
bitwise/radix engines. There is no runtime configuration: everything
tunable lives here as a typed module constant.
"""

# NOTE: Calculators must never read these to change *results*, only to pick block
#       sizes. Identical inputs produce identical outputs on every backend.

# ---------------------------------------------------------------------------
# Arithmetic bounds
# ---------------------------------------------------------------------------

#: Largest exponent accepted by power(); guards against unbounded output size.
MAX_POWER: int = 1_000_000

#: Largest absolute exponent accepted in decimal text ("1e1000000"); bounds the digits it expands to.
MAX_EXPONENT: int = MAX_POWER

#: Native integer range used by to_int() (signed 64-bit).
NATIVE_INT_BITS: int = 64
NATIVE_INT_MIN: int = -(2 ** (NATIVE_INT_BITS - 1))
NATIVE_INT_MAX: int = (2 ** (NATIVE_INT_BITS - 1)) - 1


# ---------------------------------------------------------------------------
# Digit-string calculator block sizes
# ---------------------------------------------------------------------------

#: Decimal digits handled natively per block for add/sub (an extra digit holds the carry).
BLOCK_DIGITS: int = 18

#: Decimal digits per block for multiplication (products of two blocks must fit).
MUL_BLOCK_DIGITS: int = BLOCK_DIGITS // 2


# ---------------------------------------------------------------------------
# Native int <-> str bridge
# ---------------------------------------------------------------------------

#: Digits converted in one piece when bridging str and int; larger values are split
#: recursively so the interpreter's int/str conversion limit is never hit.
STR_CHUNK_DIGITS: int = 4000


# ---------------------------------------------------------------------------
# Bitwise engine
# ---------------------------------------------------------------------------

#: Bits per two's complement limb.
LIMB_BITS: int = 32
LIMB_BASE: int = 1 << LIMB_BITS
LIMB_MASK: int = LIMB_BASE - 1


# ---------------------------------------------------------------------------
# Base conversion
# ---------------------------------------------------------------------------

#: Digit table for bases 2..36 (lowercase on output, case-insensitive on input).
DICTIONARY: str = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE: int = 2
MAX_BASE: int = len(DICTIONARY)


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "MAX_POWER",
    "MAX_EXPONENT",
    "NATIVE_INT_BITS",
    "NATIVE_INT_MIN",
    "NATIVE_INT_MAX",
    "BLOCK_DIGITS",
    "MUL_BLOCK_DIGITS",
    "STR_CHUNK_DIGITS",
    "LIMB_BITS",
    "LIMB_BASE",
    "LIMB_MASK",
    "DICTIONARY",
    "MIN_BASE",
    "MAX_BASE",
]
