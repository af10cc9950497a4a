"""Plugin registry: the catalog of recognized plugin kinds."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from hookwright.plugins.errors import PluginConflictError
from hookwright.plugins.kinds import (
    PLUGIN_GLOBAL_SETUP,
    PLUGIN_GLOBAL_TEARDOWN,
    PLUGIN_ROOT_HOOKS,
    PluginKind,
)
from hookwright.plugins.root_hooks import aggregate_root_hooks
from hookwright.plugins.validators import function_list_validator, validate_root_hooks


class PluginRegistry:
    """Ordered mapping of export name to :class:`PluginKind`.

    Iteration follows registration order so finalized output keys are
    reproducible. The loader treats a registry as read-only.
    """

    def __init__(self, kinds: Iterable[PluginKind] = ()) -> None:
        self._kinds: dict[str, PluginKind] = {}
        for kind in kinds:
            self.register(kind)

    def register(self, kind: PluginKind) -> None:
        """Add *kind*, failing if its export name is already taken."""
        if kind.export_name in self._kinds:
            msg = f"Plugin kind {kind.export_name!r} is already registered"
            raise PluginConflictError(msg)
        self._kinds[kind.export_name] = kind

    def list_kinds(self) -> list[str]:
        """Return registered export names in registration order."""
        return list(self._kinds)

    def get(self, export_name: str) -> PluginKind:
        """Return the kind registered under *export_name*.

        Raises:
            KeyError: If no such kind is registered.
        """
        return self._kinds[export_name]

    def __contains__(self, export_name: object) -> bool:
        return export_name in self._kinds

    def __iter__(self) -> Iterator[PluginKind]:
        return iter(self._kinds.values())

    def __len__(self) -> int:
        return len(self._kinds)

    def __repr__(self) -> str:
        return f"PluginRegistry({self.list_kinds()!r})"


def builtin_kinds() -> list[PluginKind]:
    """The root-hook, global-setup and global-teardown kinds."""
    return [
        PluginKind(
            export_name=PLUGIN_ROOT_HOOKS,
            option_name="rootHooks",
            validate=validate_root_hooks,
            finalize=aggregate_root_hooks,
        ),
        PluginKind(
            export_name=PLUGIN_GLOBAL_SETUP,
            option_name="globalSetup",
            validate=function_list_validator(PLUGIN_GLOBAL_SETUP),
            passthrough=True,
        ),
        PluginKind(
            export_name=PLUGIN_GLOBAL_TEARDOWN,
            option_name="globalTeardown",
            validate=function_list_validator(PLUGIN_GLOBAL_TEARDOWN),
            passthrough=True,
        ),
    ]


def default_registry() -> PluginRegistry:
    """Return a fresh registry holding the built-in kinds."""
    return PluginRegistry(builtin_kinds())
