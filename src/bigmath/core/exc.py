"""
Core exception types for bigmath.

These are dependency-free and may be imported by all core modules.
Each error also derives from the closest built-in exception so callers
can catch either the bigmath type or the standard one.
"""

__all__ = [
    "MathError",
    "NumberFormatError",
    "RoundingNecessaryError",
    "DivisionByZeroError",
    "NegativeNumberError",
    "IntegerOverflowError",
    "InvalidArgumentError",
    "NoInverseError",
]


class MathError(Exception):
    """Base class for every error raised by bigmath."""
    pass


class NumberFormatError(MathError, ValueError):
    """Raised when text is not a syntactically valid number for the requested base."""

    @classmethod
    def invalid_format(cls, value: str) -> "NumberFormatError":
        return cls(f'The given value "{value}" does not represent a valid number.')

    @classmethod
    def char_not_in_alphabet(cls, char: str) -> "NumberFormatError":
        code = ord(char)
        if code < 32 or code > 126:
            shown = format(code, "02X")
        else:
            shown = f'"{char}"'
        return cls(f"Char {shown} is not a valid character in the given alphabet.")


class RoundingNecessaryError(MathError, ArithmeticError):
    """Raised when an exact integer result was required but information would be lost."""

    @classmethod
    def rounding_necessary(cls) -> "RoundingNecessaryError":
        return cls("Rounding is necessary to represent the result of the operation.")

    @classmethod
    def not_an_integer(cls, value: str) -> "RoundingNecessaryError":
        return cls(f"{value} cannot be represented exactly as an integer.")


class DivisionByZeroError(MathError, ZeroDivisionError):
    """Raised when a divisor, modulus or denominator is zero."""

    @classmethod
    def division_by_zero(cls) -> "DivisionByZeroError":
        return cls("Division by zero.")

    @classmethod
    def modulus_must_not_be_zero(cls) -> "DivisionByZeroError":
        return cls("The modulus must not be zero.")


class NegativeNumberError(MathError, ValueError):
    """Raised when an operation defined only for non-negative values receives a negative one."""
    pass


class IntegerOverflowError(MathError, OverflowError):
    """Raised when a value does not fit the target native representation."""

    @classmethod
    def to_int_overflow(cls, value: str, lo: int, hi: int) -> "IntegerOverflowError":
        return cls(f"{value} is out of range {lo} to {hi} and cannot be represented as an integer.")


class InvalidArgumentError(MathError, ValueError):
    """Raised for out-of-range bases, short alphabets, bad exponents or unknown rounding modes."""
    pass


class NoInverseError(MathError, ArithmeticError):
    """Raised when a modular inverse does not exist."""

    @classmethod
    def no_modular_inverse(cls) -> "NoInverseError":
        return cls("This number has no multiplicative inverse modulo the given modulus.")
