"""Plugin core: kind registry, loader, and root hook aggregation.

Discovery: modules named via ``--require`` / ``[plugins] require`` plus an
optional plugin directory, imported by :mod:`hookwright.plugins.requires`.
INVARIANT: Contribution order is preserved from load to finalize.
"""

from hookwright.plugins.errors import PluginConflictError, PluginError, UnsupportedPluginError
from hookwright.plugins.kinds import (
    PLUGIN_GLOBAL_SETUP,
    PLUGIN_GLOBAL_TEARDOWN,
    PLUGIN_ROOT_HOOKS,
    PluginKind,
)
from hookwright.plugins.loader import PluginLoader
from hookwright.plugins.observers import LoaderObserver, LoggingObserver
from hookwright.plugins.registry import PluginRegistry, default_registry
from hookwright.plugins.root_hooks import RootHookSet, aggregate_root_hooks

__all__ = [
    "PLUGIN_GLOBAL_SETUP",
    "PLUGIN_GLOBAL_TEARDOWN",
    "PLUGIN_ROOT_HOOKS",
    "LoaderObserver",
    "LoggingObserver",
    "PluginConflictError",
    "PluginError",
    "PluginKind",
    "PluginLoader",
    "PluginRegistry",
    "RootHookSet",
    "UnsupportedPluginError",
    "aggregate_root_hooks",
    "default_registry",
]
