"""Pluggy hook specifications for loader observers.

Observers watch the loader without the loader doing any output itself.
All three hooks are notifications; return values are ignored.
"""

from __future__ import annotations

from typing import Any

import pluggy

PROJECT_NAME = "hookwright"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class LoaderHookSpec:
    """Hook specifications for plugin loader events."""

    @hookspec
    def plugin_loaded(self, export_name: str, count: int, module_name: str | None) -> None:
        """Called after a module's contributions for one kind are accumulated."""

    @hookspec
    def plugin_rejected(
        self,
        export_name: str,
        module_name: str | None,
        error: Exception,
    ) -> None:
        """Called when a validator rejects an export, before the error propagates."""

    @hookspec
    def plugins_finalized(self, settings: dict[str, Any]) -> None:
        """Called once ``finalize`` has built the output mapping."""
