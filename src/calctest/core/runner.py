"""Test runner executing registered cases sequentially."""
from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, Sequence

from .models import ERRORED, FAILED, PASSED, CaseResult, Procedure, TestCase, TestReport
from .registry import CaseRegistry

logger = logging.getLogger(__name__)

ResultCallback = Callable[[CaseResult, int, int], None]


class TestRunner:
    """Executes test cases one at a time in registration order."""

    __test__ = False

    def __init__(self, registry: Optional[CaseRegistry] = None, *, fail_fast: bool = False) -> None:
        self.registry = registry if registry is not None else CaseRegistry()
        self._fail_fast = fail_fast

    def register(self, name: str, procedure: Procedure, **kwargs) -> TestCase:
        return self.registry.register(name, procedure, **kwargs)

    def run_all(self, *, on_result: Optional[ResultCallback] = None) -> TestReport:
        return self.run(self.registry.cases(), on_result=on_result)

    def run(
        self,
        cases: Sequence[TestCase],
        *,
        on_result: Optional[ResultCallback] = None,
    ) -> TestReport:
        results: List[CaseResult] = []
        total = len(cases)
        for index, case in enumerate(cases, start=1):
            result = self._execute_case(case)
            results.append(result)
            if on_result:
                on_result(result, index, total)
            if self._fail_fast and not result.passed:
                logger.info("Stopping after %s (fail fast)", case.name)
                break
        return TestReport(results=tuple(results))

    def _execute_case(self, case: TestCase) -> CaseResult:
        logger.debug("Running %s", case.name)
        start = time.perf_counter()
        try:
            case.procedure()
        except AssertionError as exc:
            status, message = FAILED, str(exc) or "assertion failed"
        except (Exception, SystemExit) as exc:
            logger.debug("Case %s raised", case.name, exc_info=exc)
            status, message = ERRORED, describe_error(exc)
        else:
            status, message = PASSED, None
        duration = time.perf_counter() - start
        logger.debug("%s -> %s (%.2f ms)", case.name, status, duration * 1000)
        return CaseResult(name=case.name, status=status, message=message, duration_s=duration)


def describe_error(exc: BaseException) -> str:
    text = str(exc)
    if not text:
        return type(exc).__name__
    return f"{type(exc).__name__}: {text}"
