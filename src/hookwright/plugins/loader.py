"""Plugin loader: accumulate contributions from user modules, then finalize.

The loader is created per run. A driver feeds it the exports of each
imported module through :meth:`PluginLoader.load`, one module at a time,
then awaits :meth:`PluginLoader.finalize` once to obtain the settings the
runner consumes.

Modules exporting unrelated names are fine; only registered kinds are
looked at.
"""

from __future__ import annotations

import inspect
from types import ModuleType
from typing import TYPE_CHECKING, Any

from hookwright.plugins._helpers import cast_list, is_present, is_scalar, lookup
from hookwright.plugins.errors import UnsupportedPluginError
from hookwright.plugins.registry import PluginRegistry, default_registry

if TYPE_CHECKING:
    from hookwright.plugins.observers import LoaderObserver


class PluginLoader:
    """Collects plugin contributions per kind and reduces them to settings.

    Parameters:
        registry: Recognized plugin kinds. Shared, not copied. Defaults to
            a fresh :func:`~hookwright.plugins.registry.default_registry`.
        observer: Optional observer notified of load and finalize events.
    """

    def __init__(
        self,
        registry: PluginRegistry | None = None,
        *,
        observer: LoaderObserver | None = None,
    ) -> None:
        self._registry = registry if registry is not None else default_registry()
        self._observer = observer
        self._buckets: dict[str, list[Any]] = {name: [] for name in self._registry.list_kinds()}

    @classmethod
    def create(
        cls,
        registry: PluginRegistry | None = None,
        *,
        observer: LoaderObserver | None = None,
    ) -> PluginLoader:
        return cls(registry, observer=observer)

    @property
    def registry(self) -> PluginRegistry:
        return self._registry

    def contributions(self, export_name: str) -> tuple[Any, ...]:
        """Return a snapshot of the contributions accumulated for a kind.

        Raises:
            KeyError: If *export_name* is not a registered kind.
        """
        return tuple(self._buckets[export_name])

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, module_exports: Any) -> bool:
        """Accumulate any recognized plugins exported by one module.

        *module_exports* may be a module, a mapping of exports, or any
        object exposing exports as attributes. ``None`` and scalars are
        ignored.

        Returns:
            True if at least one recognized kind was found.

        Raises:
            UnsupportedPluginError: If a kind's validator rejects the
                exported value. Contributions from earlier modules are kept.
        """
        if module_exports is None or is_scalar(module_exports):
            return False

        module_name = _module_name(module_exports)
        found = False
        for kind in self._registry:
            value = lookup(module_exports, kind.export_name)
            if not is_present(value):
                continue

            if kind.validate is not None:
                try:
                    kind.validate(value)
                except UnsupportedPluginError as exc:
                    if self._observer is not None:
                        self._observer.notify_rejected(kind.export_name, module_name, exc)
                    raise

            items = cast_list(value)
            self._buckets.setdefault(kind.export_name, []).extend(items)
            found = True
            if self._observer is not None:
                self._observer.notify_loaded(kind.export_name, len(items), module_name)

        return found

    # ------------------------------------------------------------------
    # Finalization
    # ------------------------------------------------------------------

    async def finalize(self) -> dict[str, Any]:
        """Reduce every non-empty bucket to its finalized value.

        Kinds are visited in registration order. Empty buckets are left out
        of the result entirely. Kinds without an aggregator appear only when
        flagged ``passthrough``, as a copy of their contribution list.
        Buckets are not drained, so a second call yields an equal result.
        """
        settings: dict[str, Any] = {}
        for kind in self._registry:
            bucket = self._buckets.get(kind.export_name)
            if not bucket:
                continue
            if kind.finalize is not None:
                result = kind.finalize(list(bucket))
                if inspect.isawaitable(result):
                    result = await result
                settings[kind.output_key] = result
            elif kind.passthrough:
                settings[kind.output_key] = list(bucket)

        if self._observer is not None:
            self._observer.notify_finalized(settings)
        return settings


def _module_name(module_exports: Any) -> str | None:
    if isinstance(module_exports, ModuleType):
        return module_exports.__name__
    return None
