"""Reporting exports."""
from .base import ReportManager, Reporter
from .json_reporter import JsonReporter, build_payload
from .terminal import TerminalReporter, format_result, format_summary, render_report

__all__ = [
    "ReportManager",
    "Reporter",
    "JsonReporter",
    "TerminalReporter",
    "build_payload",
    "format_result",
    "format_summary",
    "render_report",
]
