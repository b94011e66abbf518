"""Terminal reporter printing one line per outcome and a summary."""
from __future__ import annotations

from typing import Sequence

import click

from calctest.core.models import CaseResult, TestCase, TestReport

from .base import Reporter


STATUS_COLORS = {
    "passed": "green",
    "failed": "red",
    "errored": "yellow",
}


def format_result(result: CaseResult, *, use_color: bool = False) -> str:
    label = result.status.upper()
    if use_color:
        label = click.style(label, fg=STATUS_COLORS.get(result.status))
    if result.passed:
        return f"{result.name}: {label}"
    return f"{result.name}: {label} - {result.message}"


def format_summary(report: TestReport) -> str:
    return f"{report.passed} passed, {report.failed} failed, {report.errored} errored"


def render_report(report: TestReport) -> str:
    lines = [format_result(result) for result in report.results]
    lines.append(format_summary(report))
    return "\n".join(lines)


class TerminalReporter(Reporter):
    """Human-readable reporter that streams to stdout."""

    def __init__(self, *, use_color: bool = True) -> None:
        self._use_color = use_color

    def on_start(self, cases: Sequence[TestCase]) -> None:
        pass

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:
        click.echo(format_result(result, use_color=self._use_color))

    def on_complete(self, report: TestReport) -> None:
        summary = format_summary(report)
        if self._use_color:
            summary = click.style(summary, fg="green" if report.ok else "red")
        click.echo(summary)
