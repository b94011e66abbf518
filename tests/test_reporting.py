from __future__ import annotations

import json
from pathlib import Path

from calctest.core import CaseResult, TestReport
from calctest.reporting import (
    JsonReporter,
    ReportManager,
    TerminalReporter,
    build_payload,
    format_result,
    format_summary,
)


def _report() -> TestReport:
    return TestReport(
        results=(
            CaseResult(name="a", status="passed", duration_s=0.001),
            CaseResult(name="b", status="failed", message="expected 1, got 2", duration_s=0.002),
            CaseResult(name="c", status="errored", message="ValueError: bad", duration_s=0.003),
        )
    )


def test_format_result_lines() -> None:
    report = _report()
    assert format_result(report.results[0]) == "a: PASSED"
    assert format_result(report.results[1]) == "b: FAILED - expected 1, got 2"
    assert format_result(report.results[2]) == "c: ERRORED - ValueError: bad"
    assert format_summary(report) == "1 passed, 1 failed, 1 errored"


def test_colored_result_keeps_text() -> None:
    line = format_result(CaseResult(name="a", status="passed"), use_color=True)
    assert "\x1b[" in line
    assert line.startswith("a: ")


def test_terminal_reporter_streams_lines(capsys) -> None:
    report = _report()
    manager = ReportManager([TerminalReporter(use_color=False)])
    manager.start([])
    for index, result in enumerate(report.results, start=1):
        manager.handle_result(result, index, report.total)
    manager.complete(report)
    output = capsys.readouterr().out
    assert output.splitlines() == [
        "a: PASSED",
        "b: FAILED - expected 1, got 2",
        "c: ERRORED - ValueError: bad",
        "1 passed, 1 failed, 1 errored",
    ]


def test_build_payload_summary() -> None:
    payload = build_payload(_report())
    assert payload["summary"]["total"] == 3
    assert payload["summary"]["errored"] == 1
    assert payload["cases"][1]["message"] == "expected 1, got 2"
    assert "message" not in payload["cases"][0]
    assert payload["generated_at"].endswith("Z")


def test_json_reporter_writes_file(tmp_path: Path, capsys) -> None:
    path = tmp_path / "out" / "report.json"
    reporter = JsonReporter(path=str(path))
    reporter.on_start([])
    reporter.on_complete(_report())
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert [case["name"] for case in payload["cases"]] == ["a", "b", "c"]
    assert "JSON report written to" in capsys.readouterr().out


def test_json_reporter_without_path_prints(capsys) -> None:
    JsonReporter().on_complete(_report())
    payload = json.loads(capsys.readouterr().out)
    assert payload["summary"]["passed"] == 1
