"""Built-in test suites and suite loading."""
from __future__ import annotations

import importlib
import logging
from typing import Dict

from calctest.core.registry import CaseRegistry

logger = logging.getLogger(__name__)

BUILTIN_SUITES: Dict[str, str] = {
    "calculator": "calctest.suites.calculator",
    "demo": "calctest.suites.demo",
}


def load_suite(name: str, registry: CaseRegistry) -> None:
    """Register a suite's cases; ``name`` is a built-in alias or module path."""

    module_name = BUILTIN_SUITES.get(name, name)
    module = importlib.import_module(module_name)
    register = getattr(module, "register", None)
    if not callable(register):
        raise AttributeError(f"Suite module '{module_name}' has no register() function")
    before = len(registry)
    register(registry)
    logger.info("Loaded suite %s (%d case(s))", name, len(registry) - before)
