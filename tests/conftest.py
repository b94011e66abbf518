import pytest

from calctest import bootstrap
from calctest.core import CaseRegistry, TestRunner


@pytest.fixture(scope="session", autouse=True)
def setup_calctest() -> None:
    """Bootstrap plugins once for the entire test session."""

    bootstrap()


@pytest.fixture
def runner() -> TestRunner:
    return TestRunner(CaseRegistry())
