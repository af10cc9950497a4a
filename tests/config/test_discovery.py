"""Tests for config discovery and reading."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from hookwright.config.discovery import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    PYPROJECT_FILENAME,
    find_config,
    read_config,
)


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        config = tmp_path / CONFIG_FILENAME
        config.write_text("")
        assert find_config(tmp_path) == config.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        config = tmp_path / CONFIG_FILENAME
        config.write_text("")
        nested = tmp_path / "tests" / "unit"
        nested.mkdir(parents=True)
        assert find_config(nested) == config.resolve()

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.chdir(tmp_path)
        assert find_config() == (tmp_path / CONFIG_FILENAME).resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        other = tmp_path / "elsewhere.toml"
        other.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(other))
        assert find_config(tmp_path) == other

    def test_env_var_pointing_nowhere(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None

    def test_pyproject_with_tool_table(self, tmp_path: Path) -> None:
        pyproject = tmp_path / PYPROJECT_FILENAME
        pyproject.write_text('[tool.hookwright.plugins]\nrequire = ["hooks.py"]\n')
        assert find_config(tmp_path) == pyproject.resolve()

    def test_unrelated_pyproject_does_not_stop_walk(self, tmp_path: Path) -> None:
        config = tmp_path / CONFIG_FILENAME
        config.write_text("")
        nested = tmp_path / "pkg"
        nested.mkdir()
        (nested / PYPROJECT_FILENAME).write_text('[project]\nname = "pkg"\n')
        assert find_config(nested) == config.resolve()

    def test_broken_pyproject_is_skipped(self, tmp_path: Path) -> None:
        (tmp_path / PYPROJECT_FILENAME).write_text("[tool.hookwright\n")
        assert find_config(tmp_path) is None

    def test_dedicated_file_preferred_in_same_dir(self, tmp_path: Path) -> None:
        config = tmp_path / CONFIG_FILENAME
        config.write_text("")
        (tmp_path / PYPROJECT_FILENAME).write_text("[tool.hookwright]\n")
        assert find_config(tmp_path) == config.resolve()


class TestReadConfig:
    def test_dedicated_file_read_whole(self, tmp_path: Path) -> None:
        config = tmp_path / CONFIG_FILENAME
        config.write_text('[plugins]\nplugin_dir = "support"\n')
        assert read_config(config) == {"plugins": {"plugin_dir": "support"}}

    def test_pyproject_reads_tool_table(self, tmp_path: Path) -> None:
        pyproject = tmp_path / PYPROJECT_FILENAME
        pyproject.write_text(
            '[project]\nname = "demo"\n\n[tool.hookwright.plugins]\nrequire = ["a.py"]\n'
        )
        assert read_config(pyproject) == {"plugins": {"require": ["a.py"]}}

    def test_pyproject_without_table_is_empty(self, tmp_path: Path) -> None:
        pyproject = tmp_path / PYPROJECT_FILENAME
        pyproject.write_text('[project]\nname = "demo"\n')
        assert read_config(pyproject) == {}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        config = tmp_path / CONFIG_FILENAME
        config.write_text("[plugins\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            read_config(config)
