"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  (CLI flags passed by Click)
  2. Env vars     (``HOOKWRIGHT_*`` prefix)
  3. TOML file    (``hookwright.toml`` or ``[tool.hookwright]`` in
                   ``pyproject.toml``, discovered via walk-up)
  4. Code defaults

Uses Pydantic Settings v2 with a :class:`TomlSettingsSource` fed by
:func:`hookwright.config.discovery.find_config`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from hookwright.config.discovery import find_config, read_config
from hookwright.config.models import PluginsConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from ``hookwright.toml`` or ``[tool.hookwright]``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_config(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for the TOML path during construction.
_tls = threading.local()


class HookwrightSettings(BaseSettings):
    """Settings for the hookwright CLI.

    Attributes:
        root: Project directory; relative require paths and ``plugin_dir``
            resolve against it. Parent of ``hookwright.toml`` when one is
            found, else CWD.
        config_path: The TOML file in effect, if any.
        plugins: ``[plugins]`` section.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "HOOKWRIGHT_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @property
    def plugin_dir(self) -> Path | None:
        """``[plugins] plugin_dir`` resolved against :attr:`root`."""
        if self.plugins.plugin_dir is None:
            return None
        return self.root / self.plugins.plugin_dir

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> HookwrightSettings:
        """Construct settings from a CLI invocation.

        Uses *config_path* when given, otherwise walks up from *root*
        looking for ``hookwright.toml`` or a ``pyproject.toml`` with a
        ``[tool.hookwright]`` table.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if not p.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
            toml_path = p
        else:
            toml_path = find_config(root)

        resolved_root = root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(root=resolved_root, config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
