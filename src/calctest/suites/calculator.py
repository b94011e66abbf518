"""Checks for the arithmetic library.

Every case builds its own :class:`Calculator` so no state is shared between
cases.
"""
from __future__ import annotations

from calctest.arithmetic import Calculator, DivisionByZero
from calctest.core import AssertionFailure, CaseRegistry, assert_equal

_PAIRS = ((0, 0), (5, 3), (-4, 9), (123456789, -987654321), (2**70, 3))


def add_returns_sum() -> None:
    calc = Calculator()
    assert_equal(8, calc.add(5, 3))


def add_is_commutative() -> None:
    calc = Calculator()
    for a, b in _PAIRS:
        assert_equal(calc.add(a, b), calc.add(b, a))


def divide_returns_quotient() -> None:
    calc = Calculator()
    assert_equal(5, calc.divide(10, 2))


def divide_truncates_toward_zero() -> None:
    calc = Calculator()
    assert_equal(3, calc.divide(7, 2))
    assert_equal(-3, calc.divide(-7, 2))
    assert_equal(-3, calc.divide(7, -2))
    assert_equal(3, calc.divide(-7, -2))
    for a, b in _PAIRS:
        if b == 0:
            continue
        remainder = a - calc.divide(a, b) * b
        if abs(remainder) >= abs(b):
            raise AssertionFailure(f"expected |remainder| < {abs(b)}, got {remainder}")


def divide_by_zero_raises() -> None:
    calc = Calculator()
    try:
        calc.divide(10, 0)
    except DivisionByZero:
        return
    raise AssertionFailure("expected DivisionByZero, got no error")


def register(registry: CaseRegistry) -> None:
    registry.register("add_returns_sum", add_returns_sum, tags=("add",))
    registry.register("add_is_commutative", add_is_commutative, tags=("add", "property"))
    registry.register("divide_returns_quotient", divide_returns_quotient, tags=("divide",))
    registry.register("divide_truncates_toward_zero", divide_truncates_toward_zero, tags=("divide", "property"))
    registry.register("divide_by_zero_raises", divide_by_zero_raises, tags=("divide", "error"))
