"""Core models and helpers exposed at the package level."""
from .assertions import AssertionFailure, assert_equal
from .models import ERRORED, FAILED, PASSED, CaseResult, TestCase, TestReport
from .registry import CaseRegistry, register_case
from .runner import TestRunner

__all__ = [
    "ERRORED",
    "FAILED",
    "PASSED",
    "AssertionFailure",
    "CaseRegistry",
    "CaseResult",
    "TestCase",
    "TestReport",
    "TestRunner",
    "assert_equal",
    "register_case",
]
