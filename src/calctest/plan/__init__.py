"""Plan loading and case selection."""

from .loader import build_registry, load_plan, select_cases
from .models import CaseConfig, ExecutionPlan, PlanOptions

__all__ = [
    "CaseConfig",
    "ExecutionPlan",
    "PlanOptions",
    "build_registry",
    "load_plan",
    "select_cases",
]
