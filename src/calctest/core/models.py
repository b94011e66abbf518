"""Core dataclasses shared across calctest subsystems."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

Procedure = Callable[[], object]

PASSED = "passed"
FAILED = "failed"
ERRORED = "errored"

STATUSES: Tuple[str, ...] = (PASSED, FAILED, ERRORED)


@dataclass(frozen=True)
class TestCase:
    """A named procedure performing actions and assertions."""

    __test__ = False

    name: str
    procedure: Procedure
    tags: Tuple[str, ...] = tuple()
    description: str = ""


@dataclass(frozen=True)
class CaseResult:
    """Outcome of executing a single test case."""

    name: str
    status: str
    message: Optional[str] = None
    duration_s: float = 0.0

    def __post_init__(self) -> None:
        if self.status not in STATUSES:
            raise ValueError(f"Unknown status '{self.status}'; expected one of {', '.join(STATUSES)}")

    @property
    def passed(self) -> bool:
        return self.status == PASSED


@dataclass(frozen=True)
class TestReport:
    """Ordered outcomes of one run; counts are derived from the sequence."""

    __test__ = False

    results: Tuple[CaseResult, ...] = field(default_factory=tuple)

    def count(self, status: str) -> int:
        return sum(1 for result in self.results if result.status == status)

    @property
    def passed(self) -> int:
        return self.count(PASSED)

    @property
    def failed(self) -> int:
        return self.count(FAILED)

    @property
    def errored(self) -> int:
        return self.count(ERRORED)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def ok(self) -> bool:
        return all(result.passed for result in self.results)

    @property
    def duration_s(self) -> float:
        return sum(result.duration_s for result in self.results)
