from __future__ import annotations

import pytest

from calctest.core import CaseRegistry
from calctest.errors import DuplicateTestName


def _noop() -> None:
    pass


def _other() -> None:
    pass


def test_register_keeps_order() -> None:
    registry = CaseRegistry()
    registry.register("b", _noop)
    registry.register("a", _noop)
    assert registry.names() == ("b", "a")
    assert len(registry) == 2
    assert "a" in registry


def test_duplicate_name_rejected_and_first_kept() -> None:
    registry = CaseRegistry()
    registry.register("same", _noop)
    with pytest.raises(DuplicateTestName) as exc:
        registry.register("same", _other)
    assert "already registered" in str(exc.value)
    assert registry.get("same").procedure is _noop
    assert len(registry) == 1


def test_duplicate_name_is_value_error() -> None:
    assert issubclass(DuplicateTestName, ValueError)


def test_register_validates_inputs() -> None:
    registry = CaseRegistry()
    with pytest.raises(ValueError):
        registry.register("", _noop)
    with pytest.raises(ValueError):
        registry.register("x", "not callable")  # type: ignore[arg-type]


def test_case_decorator_uses_function_name() -> None:
    registry = CaseRegistry()

    @registry.case(tags=("smoke",))
    def check_something() -> None:
        """Checks something."""

    case = registry.get("check_something")
    assert case.procedure is check_something
    assert case.tags == ("smoke",)
    assert case.description == "Checks something."


def test_get_unknown_raises_key_error() -> None:
    with pytest.raises(KeyError):
        CaseRegistry().get("missing")
