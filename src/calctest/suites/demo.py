"""Three cases showing each possible outcome."""
from __future__ import annotations

from calctest.arithmetic import add, divide
from calctest.core import CaseRegistry, assert_equal


def a_passes() -> None:
    assert_equal(4, add(2, 2))


def b_fails() -> None:
    assert_equal(5, add(2, 2))


def c_errors() -> None:
    divide(1, 0)


def register(registry: CaseRegistry) -> None:
    registry.register("A_passes", a_passes)
    registry.register("B_fails", b_fails)
    registry.register("C_errors", c_errors)
