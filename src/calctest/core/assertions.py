"""Assertion primitive used inside test procedures."""
from __future__ import annotations

from typing import Any

import numpy as np


class AssertionFailure(AssertionError):
    """Raised by :func:`assert_equal` when the values differ."""


def assert_equal(expected: Any, actual: Any) -> None:
    if not _equal(expected, actual):
        raise AssertionFailure(f"expected {expected!s}, got {actual!s}")


def _equal(expected: Any, actual: Any) -> bool:
    if isinstance(expected, np.ndarray) or isinstance(actual, np.ndarray):
        return bool(np.array_equal(expected, actual))
    return bool(expected == actual)
