"""Locate and read the hookwright configuration for a project.

Settings live either in a dedicated ``hookwright.toml`` or in the
``[tool.hookwright]`` table of ``pyproject.toml``. The nearest directory
providing either one wins; within a directory ``hookwright.toml`` is
preferred. ``HOOKWRIGHT_CONFIG`` names a file directly and skips the walk.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "hookwright.toml"
CONFIG_ENV_VAR = "HOOKWRIGHT_CONFIG"
PYPROJECT_FILENAME = "pyproject.toml"
PYPROJECT_TABLE = ("tool", "hookwright")

logger = logging.getLogger(__name__)


def _pyproject_table(data: dict[str, Any]) -> dict[str, Any] | None:
    table: Any = data
    for key in PYPROJECT_TABLE:
        if not isinstance(table, dict) or key not in table:
            return None
        table = table[key]
    return table if isinstance(table, dict) else None


def _declares_hookwright(pyproject: Path) -> bool:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        logger.debug("Ignoring unreadable %s during config discovery", pyproject)
        return False
    return _pyproject_table(data) is not None


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), if any.

    A ``pyproject.toml`` only counts when it has a ``[tool.hookwright]``
    table, so an unrelated one does not stop the walk.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in [current, *current.parents]:
        dedicated = directory / CONFIG_FILENAME
        if dedicated.is_file():
            return dedicated
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _declares_hookwright(pyproject):
            return pyproject
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Load the settings table from *path*.

    For ``pyproject.toml`` this is the ``[tool.hookwright]`` table (empty
    when absent); any other file is read whole.

    Raises:
        click.ClickException: If the file is not valid TOML.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
    if path.name == PYPROJECT_FILENAME:
        return _pyproject_table(data) or {}
    return data
