"""Arithmetic library under test."""
from .operations import (
    OPERATIONS,
    Calculator,
    DivisionByZero,
    OperationResult,
    add,
    divide,
    evaluate,
)

__all__ = [
    "OPERATIONS",
    "Calculator",
    "DivisionByZero",
    "OperationResult",
    "add",
    "divide",
    "evaluate",
]
