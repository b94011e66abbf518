from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest
from click.testing import CliRunner

from calctest import __version__
from calctest.cli.main import cli, main


def test_cli_help_short_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-h"])
    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "run" in result.output


def test_cli_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert f"calctest {__version__}" in result.output


def test_cli_run_default_suite_passes() -> None:
    result = CliRunner().invoke(cli, ["run", "--no-color"])
    assert result.exit_code == 0, result.output
    assert "add_returns_sum: PASSED" in result.output
    assert "5 passed, 0 failed, 0 errored" in result.output


def test_cli_run_demo_suite_exits_non_zero() -> None:
    result = CliRunner().invoke(cli, ["run", "--suite", "demo", "--no-color"])
    assert result.exit_code == 1
    assert "B_fails: FAILED - expected 5, got 4" in result.output
    assert "C_errors: ERRORED - DivisionByZero: division by zero" in result.output
    assert result.output.rstrip().endswith("1 passed, 1 failed, 1 errored")


def test_cli_list_cases() -> None:
    result = CliRunner().invoke(cli, ["run", "--suite", "calculator", "--tags", "divide", "--list"])
    assert result.exit_code == 0
    assert result.output.split() == [
        "divide_returns_quotient",
        "divide_truncates_toward_zero",
        "divide_by_zero_raises",
    ]


def test_cli_no_matching_cases() -> None:
    result = CliRunner().invoke(cli, ["run", "--cases", "nothing_*"])
    assert result.exit_code == 1
    assert "No cases matched" in result.output


def test_cli_fail_fast() -> None:
    result = CliRunner().invoke(cli, ["run", "--suite", "demo", "--fail-fast", "--no-color"])
    assert result.exit_code == 1
    assert "C_errors" not in result.output
    assert "1 passed, 1 failed, 0 errored" in result.output


def test_cli_run_plan(tmp_path: Path) -> None:
    plan = tmp_path / "plan.yaml"
    plan.write_text(
        textwrap.dedent(
            """
            name: smoke
            cases:
              - name: add_small
                procedure: tests.fixtures.checks:check_add
              - name: divide_small
                procedure: tests.fixtures.checks:check_divide
            """
        ),
        encoding="utf-8",
    )
    result = CliRunner().invoke(cli, ["run", "--plan", str(plan), "--no-color"])
    assert result.exit_code == 0, result.output
    assert "add_small: PASSED" in result.output
    assert "add_returns_sum" not in result.output


def test_cli_invalid_plan(tmp_path: Path) -> None:
    plan = tmp_path / "plan.yaml"
    plan.write_text("cases: []\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["run", "--plan", str(plan)])
    assert result.exit_code == 1
    assert "Plan schema validation failed" in result.output


def test_cli_json_report(tmp_path: Path) -> None:
    report_path = tmp_path / "report.json"
    result = CliRunner().invoke(
        cli, ["run", "--suite", "demo", "--report", "json", "--report-path", str(report_path)]
    )
    assert result.exit_code == 1
    payload = json.loads(report_path.read_text(encoding="utf-8"))
    assert payload["summary"] == {
        "total": 3,
        "passed": 1,
        "failed": 1,
        "errored": 1,
        "duration_s": payload["summary"]["duration_s"],
    }


def test_cli_calc_add() -> None:
    result = CliRunner().invoke(cli, ["calc", "add", "5", "3"])
    assert result.exit_code == 0
    assert result.output.strip() == "8"


def test_cli_calc_divide_negative() -> None:
    result = CliRunner().invoke(cli, ["calc", "divide", "--", "-7", "2"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "-3"


def test_cli_calc_divide_by_zero() -> None:
    result = CliRunner().invoke(cli, ["calc", "divide", "10", "0"])
    assert result.exit_code == 1
    assert "DivisionByZero: division by zero" in result.output


def test_main_returns_exit_code(capsys) -> None:
    assert main(["run", "--suite", "calculator", "--no-color"]) == 0
    assert main(["run", "--suite", "demo", "--no-color"]) == 1
    assert "1 passed, 1 failed, 1 errored" in capsys.readouterr().out


def test_cli_case_calling_sys_exit_still_fails_run(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    (tmp_path / "exiting_suite.py").write_text(
        textwrap.dedent(
            """
            import sys

            from calctest.core import assert_equal


            def register(registry):
                registry.register("exits", lambda: sys.exit(0))
                registry.register("after", lambda: assert_equal(1, 2))
            """
        ),
        encoding="utf-8",
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    assert main(["run", "--suite", "exiting_suite", "--no-color"]) == 1
    assert capsys.readouterr().out.splitlines() == [
        "exits: ERRORED - SystemExit: 0",
        "after: FAILED - expected 1, got 2",
        "0 passed, 1 failed, 1 errored",
    ]
