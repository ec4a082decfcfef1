"""
Process-wide default calculator.

The default is detected once, on first use: GMP (gmpy2) when it is installed,
the built-in int calculator otherwise. Detection only probes for the module,
it never falls back on import errors. `set()` overrides the default, which
is mostly useful in tests; every operation also accepts an explicit
`calculator=` argument, which always wins over the registry.
"""

from __future__ import annotations

import importlib.util
from typing import Optional

from .base import Calculator
from .native import NativeCalculator

# Debug printing control
DEBUG_REGISTRY = False

def _dbg(msg: str) -> None:
    if DEBUG_REGISTRY:
        print(msg)


def gmp_available() -> bool:
    """True when gmpy2 can be imported in this process."""
    return importlib.util.find_spec("gmpy2") is not None


def detect() -> Calculator:
    """Return the fastest available calculator implementation."""
    if gmp_available():
        from .gmp import GmpCalculator

        _dbg("registry: gmpy2 found -> GmpCalculator")
        return GmpCalculator()

    _dbg("registry: gmpy2 not found -> NativeCalculator")
    return NativeCalculator()


class CalculatorRegistry:
    """Holds the default Calculator instance used when none is passed explicitly."""

    _instance: Optional[Calculator] = None

    @classmethod
    def set(cls, calculator: Optional[Calculator]) -> None:
        """Use `calculator` as the default, or revert to detection with None."""
        if calculator is not None and not isinstance(calculator, Calculator):
            raise TypeError(f"expected a Calculator, got {type(calculator).__name__}")
        cls._instance = calculator

    @classmethod
    def get(cls) -> Calculator:
        if cls._instance is None:
            cls._instance = detect()
        return cls._instance


def resolve(calculator: Optional[Calculator] = None) -> Calculator:
    """Explicit calculator if given, else the registry default."""
    return calculator if calculator is not None else CalculatorRegistry.get()


__all__ = [
    "CalculatorRegistry",
    "detect",
    "gmp_available",
    "resolve",
]
