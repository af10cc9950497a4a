"""Loader observers dispatched through pluggy.

:class:`LoaderObserver` is what a :class:`~hookwright.plugins.loader.PluginLoader`
receives. Implementations are plain objects carrying ``@hookimpl`` methods.
"""

from __future__ import annotations

import logging
from typing import Any

import pluggy

from hookwright.plugins._helpers import describe
from hookwright.plugins.hookspecs import PROJECT_NAME, LoaderHookSpec, hookimpl

logger = logging.getLogger("hookwright.plugins")


class LoaderObserver:
    """Fans loader events out to registered hook implementations."""

    def __init__(self, *implementations: object) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(LoaderHookSpec)
        for impl in implementations:
            self.register(impl)

    def register(self, implementation: object, name: str | None = None) -> None:
        """Register an object carrying ``@hookimpl`` methods."""
        self._pm.register(implementation, name=name or implementation.__class__.__name__)

    def unregister(self, implementation: object) -> None:
        self._pm.unregister(implementation)

    def list_names(self) -> list[str]:
        """Return names of all registered implementations."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def notify_loaded(self, export_name: str, count: int, module_name: str | None) -> None:
        self._pm.hook.plugin_loaded(export_name=export_name, count=count, module_name=module_name)

    def notify_rejected(
        self, export_name: str, module_name: str | None, error: Exception
    ) -> None:
        self._pm.hook.plugin_rejected(
            export_name=export_name, module_name=module_name, error=error
        )

    def notify_finalized(self, settings: dict[str, Any]) -> None:
        self._pm.hook.plugins_finalized(settings=settings)


class LoggingObserver:
    """Logs loader events; registered by the CLI when ``--verbose`` is set."""

    @hookimpl
    def plugin_loaded(self, export_name: str, count: int, module_name: str | None) -> None:
        logger.debug(
            "Loaded %d %s contribution(s) from %s", count, export_name, module_name or "<exports>"
        )

    @hookimpl
    def plugin_rejected(
        self,
        export_name: str,
        module_name: str | None,
        error: Exception,
    ) -> None:
        logger.warning("Rejected %s from %s: %s", export_name, module_name or "<exports>", error)

    @hookimpl
    def plugins_finalized(self, settings: dict[str, Any]) -> None:
        for key, value in settings.items():
            logger.debug("Finalized %s: %s", key, _summarize(value))


def _summarize(value: Any) -> str:
    as_dict = getattr(value, "as_dict", None)
    if callable(as_dict):
        return ", ".join(f"{slot}={len(hooks)}" for slot, hooks in as_dict().items())
    if isinstance(value, list):
        return ", ".join(describe(item) for item in value) or "<none>"
    return describe(value)
