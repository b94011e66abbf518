"""YAML loader and validation for plan files."""
from __future__ import annotations

import fnmatch
import logging
from pathlib import Path
from typing import Any, Mapping, Sequence

import yaml
from jsonschema import Draft7Validator

from calctest.core.models import TestCase
from calctest.core.registry import CaseRegistry
from calctest.errors import PlanError
from calctest.suites import load_suite
from calctest.utils.importing import import_string, load_from_source

from .models import CaseConfig, ExecutionPlan, PlanOptions

logger = logging.getLogger(__name__)

PLAN_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["name"],
    "additionalProperties": False,
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "description": {"type": "string"},
        "suites": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "cases": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name"],
                "additionalProperties": False,
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "procedure": {"type": "string", "minLength": 1},
                    "source": {"type": "string", "minLength": 1},
                    "function": {"type": "string", "minLength": 1},
                    "tags": {"type": "array", "items": {"type": "string"}},
                    "description": {"type": "string"},
                },
            },
        },
    },
}

_validator = Draft7Validator(PLAN_SCHEMA)


def load_plan(path: str) -> ExecutionPlan:
    """Load and validate a plan file."""
    plan_path = Path(path).expanduser().resolve()
    try:
        raw = yaml.safe_load(plan_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise PlanError(f"Invalid YAML in {plan_path}: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise PlanError("Plan file must contain a mapping at the top level")
    errors = sorted(_validator.iter_errors(raw), key=lambda e: [str(part) for part in e.path])
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise PlanError(f"Plan schema validation failed: {messages}")
    cases = tuple(_parse_case(item, plan_path.parent) for item in raw.get("cases") or [])
    _check_unique(cases)
    return ExecutionPlan(
        name=raw["name"].strip(),
        description=str(raw.get("description", "")),
        suites=tuple(raw.get("suites") or ()),
        cases=cases,
        plan_dir=plan_path.parent,
    )


def _parse_case(raw: Mapping[str, Any], base: Path) -> CaseConfig:
    name = raw["name"].strip()
    procedure = raw.get("procedure")
    source = raw.get("source")
    function = raw.get("function")
    if procedure and source:
        raise PlanError(f"Case '{name}': use either procedure or source, not both")
    if not procedure and not source:
        raise PlanError(f"Case '{name}': procedure or source is required")
    if source and not function:
        raise PlanError(f"Case '{name}': source requires function")
    return CaseConfig(
        name=name,
        procedure=procedure,
        source=(base / source).resolve() if source else None,
        function=function,
        tags=tuple(raw.get("tags") or ()),
        description=str(raw.get("description", "")),
    )


def _check_unique(cases: Sequence[CaseConfig]) -> None:
    seen: set[str] = set()
    for case in cases:
        if case.name in seen:
            raise PlanError(f"Duplicate case name '{case.name}' in plan")
        seen.add(case.name)


def build_registry(plan: ExecutionPlan, registry: CaseRegistry | None = None) -> CaseRegistry:
    """Register the plan's suites, then its cases, into ``registry``."""

    target = registry if registry is not None else CaseRegistry()
    for suite in plan.suites:
        load_suite(suite, target)
    for case in plan.cases:
        target.register(
            case.name,
            _resolve_procedure(case),
            tags=case.tags,
            description=case.description,
        )
    logger.info("Plan %s resolved to %d case(s)", plan.name, len(target))
    return target


def _resolve_procedure(case: CaseConfig):
    try:
        if case.source is not None:
            return load_from_source(case.source, case.function or "")
        return import_string(case.procedure or "")
    except (ImportError, AttributeError, FileNotFoundError, TypeError, ValueError) as exc:
        raise PlanError(f"Case '{case.name}': cannot load procedure: {exc}") from exc


def select_cases(cases: Sequence[TestCase], options: PlanOptions) -> list[TestCase]:
    """Filter cases by name globs and tags, keeping registration order."""

    matches: list[TestCase] = []
    for case in cases:
        if options.cases and not any(fnmatch.fnmatchcase(case.name, pattern) for pattern in options.cases):
            continue
        if options.tags and not set(options.tags) & set(case.tags):
            continue
        if options.skip_tags and set(options.skip_tags) & set(case.tags):
            continue
        matches.append(case)
    return matches
