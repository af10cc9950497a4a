"""Root hook aggregation.

Root hooks are exported as ``mochaHooks`` and may be a hook object or a
callable (sync or async) returning one. Contributions from every module
are resolved concurrently and merged, slot by slot, in contribution order.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from hookwright.plugins._helpers import cast_list, is_scalar, lookup
from hookwright.plugins.errors import UnsupportedPluginError

# (attribute, exported camelCase key, snake_case alias)
LIFECYCLE_SLOTS: tuple[tuple[str, str, str], ...] = (
    ("before_all", "beforeAll", "before_all"),
    ("before_each", "beforeEach", "before_each"),
    ("after_all", "afterAll", "after_all"),
    ("after_each", "afterEach", "after_each"),
)


@dataclass(frozen=True)
class RootHookSet:
    """Merged root hooks, one ordered tuple of callbacks per lifecycle slot."""

    before_all: tuple[Callable[..., Any], ...] = ()
    before_each: tuple[Callable[..., Any], ...] = ()
    after_all: tuple[Callable[..., Any], ...] = ()
    after_each: tuple[Callable[..., Any], ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.before_all or self.before_each or self.after_all or self.after_each)

    def as_dict(self) -> dict[str, list[Callable[..., Any]]]:
        """Return the camelCase mapping a runner expects."""
        return {key: list(getattr(self, attr)) for attr, key, _alias in LIFECYCLE_SLOTS}

    def merge(self, hooks: Any) -> RootHookSet:
        """Return a new set with *hooks* appended slot by slot."""
        return RootHookSet(
            **{
                attr: getattr(self, attr) + tuple(slot_callbacks(hooks, key, alias))
                for attr, key, alias in LIFECYCLE_SLOTS
            }
        )


def slot_callbacks(hooks: Any, key: str, alias: str) -> list[Any]:
    """Callbacks a hook object provides for one slot, camelCase key first."""
    callbacks = cast_list(lookup(hooks, key))
    if alias != key:
        callbacks.extend(cast_list(lookup(hooks, alias)))
    return callbacks


async def _resolve(contribution: Any) -> Any:
    if isinstance(contribution, type) or not callable(contribution):
        return contribution
    result = contribution()
    if inspect.isawaitable(result):
        result = await result
    return result


def _check_hook_object(hooks: Any, position: int) -> None:
    if hooks is None or is_scalar(hooks) or isinstance(hooks, (list, tuple)):
        msg = (
            f"Root hook contribution #{position} resolved to "
            f"{type(hooks).__name__}; expected an object of lifecycle hooks"
        )
        raise UnsupportedPluginError(msg)


async def aggregate_root_hooks(contributions: Iterable[Any] = ()) -> RootHookSet:
    """Resolve and merge root hook contributions into one :class:`RootHookSet`.

    Functions are called with no arguments and awaited when they return an
    awaitable. Classes are hook objects in their own right and are read
    as-is, never instantiated. All contributions resolve concurrently; the
    merge always follows contribution order, never completion order. Any
    failure while resolving propagates and nothing is merged.
    """
    resolved = await asyncio.gather(*(_resolve(item) for item in contributions))

    merged = RootHookSet()
    for position, hooks in enumerate(resolved):
        _check_hook_object(hooks, position)
        merged = merged.merge(hooks)
    return merged
