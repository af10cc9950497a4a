"""InspectService and KindsService: report what plugins a project provides.

``inspect`` runs the same require, load, finalize sequence a runner would
and summarizes the finalized settings without invoking any hook.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from hookwright.plugins._helpers import describe
from hookwright.plugins.errors import UnsupportedPluginError
from hookwright.plugins.loader import PluginLoader
from hookwright.plugins.registry import PluginRegistry, default_registry
from hookwright.plugins.requires import RequiredModule, collect_specs, require_all
from hookwright.plugins.root_hooks import RootHookSet
from hookwright.services.result import ServiceResult

if TYPE_CHECKING:
    from hookwright.config.settings import HookwrightSettings
    from hookwright.plugins.observers import LoaderObserver

logger = logging.getLogger(__name__)


def summarize_settings(settings: dict[str, Any]) -> dict[str, Any]:
    """Replace callbacks in finalized settings with their names."""
    summary: dict[str, Any] = {}
    for key, value in settings.items():
        if isinstance(value, RootHookSet):
            summary[key] = {
                slot: [describe(hook) for hook in hooks] for slot, hooks in value.as_dict().items()
            }
        elif isinstance(value, list):
            summary[key] = [describe(item) for item in value]
        else:
            summary[key] = describe(value)
    return summary


class InspectService:
    """Require a project's plugin modules and report the merged result."""

    def __init__(
        self,
        settings: HookwrightSettings,
        *,
        registry: PluginRegistry | None = None,
        observer: LoaderObserver | None = None,
    ) -> None:
        self._settings = settings
        self._registry = registry
        self._observer = observer

    def inspect(self, requires: Iterable[str] = ()) -> ServiceResult:
        """Require configured modules followed by *requires*, then finalize."""
        op = "inspect"
        specs = collect_specs(
            [*self._settings.plugins.require, *requires],
            plugin_dir=self._settings.plugin_dir,
        )
        loader = PluginLoader(self._registry, observer=self._observer)

        modules: list[RequiredModule] = []
        for spec in specs:
            try:
                modules.extend(require_all([spec], loader, cwd=self._settings.root))
            except UnsupportedPluginError as exc:
                return ServiceResult.failure(op, "UNSUPPORTED_PLUGIN", str(exc), spec=spec)
            except Exception as exc:
                logger.debug("Require of %s failed", spec, exc_info=True)
                return ServiceResult.failure(
                    op, "IMPORT_FAILED", f"{type(exc).__name__}: {exc}", spec=spec
                )

        try:
            settings = asyncio.run(loader.finalize())
        except UnsupportedPluginError as exc:
            return ServiceResult.failure(op, "UNSUPPORTED_PLUGIN", str(exc))
        except Exception as exc:
            logger.debug("Finalize failed", exc_info=True)
            return ServiceResult.failure(
                op, "AGGREGATION_FAILED", f"{type(exc).__name__}: {exc}"
            )

        warnings = [
            f"Required module {m.spec} exports no recognized plugins"
            for m in modules
            if not m.has_plugins
        ]
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "modules": [
                    {"spec": m.spec, "module": m.module_name, "has_plugins": m.has_plugins}
                    for m in modules
                ],
                "plugins": summarize_settings(settings),
            },
            warnings=warnings,
        )


class KindsService:
    """Describe the plugin kinds a registry recognizes."""

    def __init__(self, registry: PluginRegistry | None = None) -> None:
        self._registry = registry if registry is not None else default_registry()

    def list_kinds(self) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op="kinds",
            data={
                "kinds": [
                    {
                        "export_name": kind.export_name,
                        "output_key": kind.output_key,
                        "validated": kind.validate is not None,
                        "aggregated": kind.finalize is not None,
                        "passthrough": kind.passthrough,
                    }
                    for kind in self._registry
                ]
            },
        )
