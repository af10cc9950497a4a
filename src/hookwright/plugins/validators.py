"""Shape validators for the built-in plugin kinds.

A validator receives the raw exported value (before list coercion) and
raises :class:`UnsupportedPluginError` if the shape is wrong. Validators
are synchronous and side-effect free.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hookwright.plugins._helpers import is_scalar
from hookwright.plugins.errors import UnsupportedPluginError
from hookwright.plugins.kinds import PLUGIN_ROOT_HOOKS

Validator = Callable[[Any], None]


def validate_root_hooks(value: Any) -> None:
    """Accept a hook object or a callable that produces one.

    Lists are rejected: multiple hook sets come from multiple modules,
    never from one export.
    """
    if isinstance(value, (list, tuple)) or (not callable(value) and is_scalar(value)):
        msg = (
            f"{PLUGIN_ROOT_HOOKS} must be an object or a function "
            "returning (or fulfilling with) an object"
        )
        raise UnsupportedPluginError(msg)


def function_list_validator(export_name: str) -> Validator:
    """Build a validator accepting a callable or a list of callables."""

    def validate(value: Any) -> None:
        if isinstance(value, (list, tuple)):
            is_valid = all(callable(item) for item in value)
        else:
            is_valid = callable(value)
        if not is_valid:
            msg = f"{export_name} must be a function or an array of functions"
            raise UnsupportedPluginError(msg)

    validate.__name__ = f"validate_{export_name}"
    return validate
