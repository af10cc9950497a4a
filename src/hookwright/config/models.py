"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, hookwright.toml only contains
overrides. A project with no config file requires nothing.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    require: list[str] = Field(default_factory=list)
    plugin_dir: str | None = None
