"""Addition and truncating integer division."""
from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import numpy as np


class DivisionByZero(ZeroDivisionError):
    """Raised by :func:`divide` when the divisor is zero."""

    def __init__(self, message: str = "division by zero") -> None:
        super().__init__(message)


def add(a: Any, b: Any) -> Any:
    return a + b


def divide(a: Any, b: Any) -> Any:
    """Divide ``a`` by ``b``, truncating the quotient toward zero.

    Python's ``//`` floors, so ``-7 // 2 == -4``; this returns ``-3``.
    Integer operands, numpy integer scalars included, stay exact. numpy
    arrays are divided elementwise and keep their dtype.
    """

    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return _divide_arrays(np.asarray(a), np.asarray(b))
    if b == 0:
        raise DivisionByZero()
    if isinstance(a, numbers.Integral) and isinstance(b, numbers.Integral):
        a, b = int(a), int(b)
        quotient = abs(a) // abs(b)
        return -quotient if (a < 0) != (b < 0) else quotient
    return int(a / b)


def _divide_arrays(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    if np.any(b == 0):
        raise DivisionByZero("division by zero in array divisor")
    quotient = np.abs(a) // np.abs(b)
    return np.where((a < 0) != (b < 0), -quotient, quotient)


class Calculator:
    """Stateless facade over the module functions."""

    def add(self, a: Any, b: Any) -> Any:
        return add(a, b)

    def divide(self, a: Any, b: Any) -> Any:
        return divide(a, b)


OPERATIONS: Dict[str, Callable[[Any, Any], Any]] = {
    "add": add,
    "divide": divide,
}


@dataclass(frozen=True)
class OperationResult:
    """Tagged outcome of :func:`evaluate`: a value or an error kind."""

    operation: str
    value: Any = None
    error: Optional[str] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def evaluate(operation: str, a: Any, b: Any) -> OperationResult:
    """Run a named operation, turning library errors into a failed result."""

    try:
        func = OPERATIONS[operation]
    except KeyError as exc:
        supported = ", ".join(sorted(OPERATIONS))
        raise ValueError(f"Unknown operation '{operation}'. Supported: {supported}") from exc
    try:
        return OperationResult(operation=operation, value=func(a, b))
    except DivisionByZero as exc:
        return OperationResult(operation=operation, error=type(exc).__name__, message=str(exc))
