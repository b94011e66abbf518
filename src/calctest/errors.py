"""Exception hierarchy shared across calctest subsystems."""
from __future__ import annotations


class CalctestError(Exception):
    """Base class for errors raised by calctest itself."""


class DuplicateTestName(CalctestError, ValueError):
    """Raised when a test case name is registered twice."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Test case '{name}' already registered")
        self.name = name


class PlanError(CalctestError, ValueError):
    """Raised when a plan file cannot be loaded or resolved."""
