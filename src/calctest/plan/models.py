"""Data models for plan files."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence


@dataclass(frozen=True)
class CaseConfig:
    name: str
    procedure: Optional[str] = None
    source: Optional[Path] = None
    function: Optional[str] = None
    tags: Sequence[str] = field(default_factory=tuple)
    description: str = ""


@dataclass(frozen=True)
class ExecutionPlan:
    name: str
    description: str
    suites: Sequence[str]
    cases: Sequence[CaseConfig]
    plan_dir: Path


@dataclass(frozen=True)
class PlanOptions:
    cases: Sequence[str] = field(default_factory=tuple)
    tags: Sequence[str] = field(default_factory=tuple)
    skip_tags: Sequence[str] = field(default_factory=tuple)
    list_only: bool = False
