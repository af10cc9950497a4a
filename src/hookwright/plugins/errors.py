"""Plugin error types.

Every error carries a class-level ``code`` so services can translate it
into a structured ``ServiceError`` without string matching.
"""

from __future__ import annotations


class PluginError(Exception):
    """Base class for plugin registry and loader errors."""

    code: str = "ERR_PLUGIN"


class PluginConflictError(PluginError, ValueError):
    """Two plugin kinds were registered under the same export name."""

    code = "ERR_PLUGIN_CONFLICT"


class UnsupportedPluginError(PluginError, TypeError):
    """A module exported a plugin value with the wrong shape."""

    code = "ERR_UNSUPPORTED"
