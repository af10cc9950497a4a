"""Plugin kind definitions.

A plugin kind names the export a user module must provide and bundles the
behavior the loader applies to it: an optional validator run on each raw
export, and an optional aggregator run once over every accumulated
contribution. Adding a kind never touches the loader's control flow.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

PLUGIN_ROOT_HOOKS = "mochaHooks"
PLUGIN_GLOBAL_SETUP = "mochaGlobalSetup"
PLUGIN_GLOBAL_TEARDOWN = "mochaGlobalTeardown"

Aggregator = Callable[[list[Any]], "Any | Awaitable[Any]"]


@dataclass(frozen=True)
class PluginKind:
    """One recognized plugin kind.

    Attributes:
        export_name: Name a user module exports the plugin under. Unique
            within a registry.
        option_name: Key for the finalized value in the loader output.
            Defaults to ``export_name``.
        validate: Raises ``UnsupportedPluginError`` for a malformed export.
        finalize: Reduces the ordered contributions to the output value.
            May return an awaitable.
        passthrough: Surface the raw contribution list when no
            ``finalize`` is defined. Ignored when ``finalize`` is set.
    """

    export_name: str
    option_name: str | None = None
    validate: Callable[[Any], None] | None = None
    finalize: Aggregator | None = None
    passthrough: bool = False

    @property
    def output_key(self) -> str:
        """Key this kind's finalized value is stored under."""
        return self.option_name or self.export_name

    @property
    def is_surfaced(self) -> bool:
        """Whether a non-empty bucket of this kind reaches the output."""
        return self.finalize is not None or self.passthrough
