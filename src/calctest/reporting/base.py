"""Reporter interface definitions."""
from __future__ import annotations

from typing import List, Sequence

from calctest.core.models import CaseResult, TestCase, TestReport


class Reporter:
    """Receives run progress from the CLI.

    ``on_start`` gets the selected cases before any of them runs.
    ``on_case_result`` gets each outcome as soon as its case finishes, with
    the 1-based position and the number of selected cases.
    ``on_complete`` gets the final report, which may be shorter than the
    selection when the run stopped early.
    """

    def on_start(self, cases: Sequence[TestCase]) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:  # pragma: no cover
        raise NotImplementedError

    def on_complete(self, report: TestReport) -> None:  # pragma: no cover
        raise NotImplementedError


class ReportManager:
    """Fans each lifecycle call out to its reporters, in order."""

    def __init__(self, reporters: Sequence[Reporter]) -> None:
        self._reporters = list(reporters)

    def start(self, cases: Sequence[TestCase]) -> None:
        for reporter in self._reporters:
            reporter.on_start(cases)

    def handle_result(self, result: CaseResult, index: int, total: int) -> None:
        """Signature matches ``TestRunner.run``'s ``on_result`` callback."""
        for reporter in self._reporters:
            reporter.on_case_result(result, index, total)

    def complete(self, report: TestReport) -> None:
        for reporter in self._reporters:
            reporter.on_complete(report)

    def reporters(self) -> List[Reporter]:
        return list(self._reporters)
