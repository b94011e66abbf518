"""Test case registry."""
from __future__ import annotations

from typing import Callable, Dict, Iterable, Iterator, Optional, Sequence

from calctest.errors import DuplicateTestName

from .models import Procedure, TestCase


class CaseRegistry:
    """Stores test cases in registration order, keyed by unique name."""

    def __init__(self) -> None:
        self._cases: Dict[str, TestCase] = {}

    def register(
        self,
        name: str,
        procedure: Procedure,
        *,
        tags: Sequence[str] = (),
        description: str = "",
    ) -> TestCase:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Test case name must be a non-empty string")
        if not callable(procedure):
            raise ValueError(f"Procedure for '{name}' is not callable")
        if name in self._cases:
            raise DuplicateTestName(name)
        case = TestCase(
            name=name,
            procedure=procedure,
            tags=tuple(str(tag) for tag in tags),
            description=description,
        )
        self._cases[name] = case
        return case

    def add(self, case: TestCase) -> TestCase:
        return self.register(case.name, case.procedure, tags=case.tags, description=case.description)

    def case(
        self, name: Optional[str] = None, *, tags: Sequence[str] = ()
    ) -> Callable[[Procedure], Procedure]:
        """Decorator registering the decorated function as a test case."""

        def decorator(func: Procedure) -> Procedure:
            self.register(name or func.__name__, func, tags=tags, description=(func.__doc__ or "").strip())
            return func

        return decorator

    def get(self, name: str) -> TestCase:
        try:
            return self._cases[name]
        except KeyError as exc:
            raise KeyError(f"Test case '{name}' is not registered") from exc

    def __contains__(self, name: object) -> bool:
        return name in self._cases

    def __iter__(self) -> Iterator[TestCase]:
        return iter(tuple(self._cases.values()))

    def __len__(self) -> int:
        return len(self._cases)

    def names(self) -> Iterable[str]:
        return tuple(self._cases.keys())

    def cases(self) -> tuple[TestCase, ...]:
        return tuple(self._cases.values())

    def clear(self) -> None:
        self._cases.clear()


registry = CaseRegistry()


def register_case(name: str, procedure: Procedure, **kwargs) -> TestCase:
    return registry.register(name, procedure, **kwargs)
