"""Small shared utilities for the plugin core."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Values with these types are never treated as an export container or a
# hook object, even though Python lets you getattr() on them.
SCALAR_TYPES: tuple[type, ...] = (str, bytes, bytearray, int, float, complex, bool)


def cast_list(value: Any) -> list[Any]:
    """Coerce a contribution to a list.

    Lists and tuples are copied as-is; ``None`` becomes an empty list;
    anything else becomes a one-element list.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def is_scalar(value: Any) -> bool:
    """Whether *value* is a plain scalar rather than an object."""
    return isinstance(value, SCALAR_TYPES)


def lookup(container: Any, name: str) -> Any:
    """Read *name* from a mapping key or an attribute, ``None`` if absent."""
    if isinstance(container, Mapping):
        return container.get(name)
    return getattr(container, name, None)


def is_present(value: Any) -> bool:
    """Whether an exported value counts as a contribution.

    ``None`` and falsy scalars (``False``, ``0``, ``""``) are absent.
    Empty containers are present: an empty hook mapping is a valid (if
    useless) contribution.
    """
    if value is None:
        return False
    if is_scalar(value):
        return bool(value)
    return True


def describe(value: Any) -> str:
    """Short human-readable name for a callback or value."""
    name = getattr(value, "__qualname__", None) or getattr(value, "__name__", None)
    if isinstance(name, str):
        return name
    return type(value).__name__
