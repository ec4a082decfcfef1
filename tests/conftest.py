from __future__ import annotations

import pytest

from bigmath.calculator import (
    Calculator,
    CalculatorRegistry,
    DigitStringCalculator,
    NativeCalculator,
)


# -----------------------------
# Calculator factory
# -----------------------------

CALCULATOR_NAMES = ["digits", "digits-small", "native", "gmp"]


def make_calculator(name: str) -> Calculator:
    """Build a backend by test id; gmp skips the test when gmpy2 is absent."""
    if name == "digits":
        return DigitStringCalculator()
    if name == "digits-small":
        # Tiny blocks force the multi-block code paths on small inputs.
        return DigitStringCalculator(max_digits=4, mul_digits=2)
    if name == "native":
        return NativeCalculator()
    if name == "gmp":
        pytest.importorskip("gmpy2")
        from bigmath.calculator.gmp import GmpCalculator

        return GmpCalculator()
    raise ValueError(f"unknown calculator: {name}")


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture(params=CALCULATOR_NAMES)
def calc(request) -> Calculator:
    """Every backend, passed explicitly to the code under test."""
    return make_calculator(request.param)


@pytest.fixture(params=CALCULATOR_NAMES)
def default_calc(request):
    """Every backend, installed as the registry default for operator-level tests."""
    calculator = make_calculator(request.param)
    CalculatorRegistry.set(calculator)
    yield calculator
    CalculatorRegistry.set(None)
