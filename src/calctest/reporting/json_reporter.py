"""JSON reporter emitting structured execution results."""
from __future__ import annotations

import datetime as dt
import json
import pathlib
from typing import Any, Dict, Optional, Sequence

import click
from jsonschema import validate

from calctest.core.models import CaseResult, TestCase, TestReport

from .base import Reporter
from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION


class JsonReporter(Reporter):
    """Writes the report as JSON validated against the schema.

    Without a path the document is echoed to stdout.
    """

    def __init__(self, path: Optional[str] = None) -> None:
        self._path = pathlib.Path(path) if path else None

    def on_start(self, cases: Sequence[TestCase]) -> None:
        pass

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:
        pass

    def on_complete(self, report: TestReport) -> None:
        payload = build_payload(report)
        text = json.dumps(payload, indent=2)
        if self._path is None:
            click.echo(text)
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(text, encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem protection
            raise RuntimeError(f"Failed to write JSON report to {self._path}: {exc}") from exc
        click.echo(f"JSON report written to {self._path}")


def build_payload(report: TestReport) -> Dict[str, Any]:
    payload = {
        "schema_version": SCHEMA_VERSION,
        "generated_at": dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        "summary": {
            "total": report.total,
            "passed": report.passed,
            "failed": report.failed,
            "errored": report.errored,
            "duration_s": report.duration_s,
        },
        "cases": [_case_to_dict(result) for result in report.results],
    }
    validate(instance=payload, schema=JSON_SCHEMA_V1)
    return payload


def _case_to_dict(result: CaseResult) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "name": result.name,
        "status": result.status,
        "duration_ms": result.duration_s * 1000,
    }
    if result.message is not None:
        record["message"] = result.message
    return record
