"""calctest package initialization."""
from __future__ import annotations

import importlib
import logging
import os

from .version import __version__

__all__ = [
    "__version__",
    "bootstrap",
    "load_plugins",
]

logger = logging.getLogger(__name__)

PLUGINS_ENV = "CALCTEST_PLUGINS"

_BOOTSTRAPPED = False


def bootstrap() -> None:
    """Initialize calctest (idempotent)."""

    global _BOOTSTRAPPED
    if _BOOTSTRAPPED:
        return
    from .core.registry import registry

    load_plugins(registry)
    _BOOTSTRAPPED = True


def load_plugins(target) -> list[str]:
    """Import modules named in ``CALCTEST_PLUGINS`` and let them register cases."""

    plugin_env = os.environ.get(PLUGINS_ENV)
    if not plugin_env:
        return []
    loaded: list[str] = []
    for item in plugin_env.split(","):
        module_name = item.strip()
        if not module_name:
            continue
        module = importlib.import_module(module_name)
        register = getattr(module, "register", None)
        if callable(register):
            register(target)
            logger.info("Loaded plugin %s", module_name)
            loaded.append(module_name)
        else:
            logger.warning("Plugin %s has no register() hook", module_name)
    return loaded
