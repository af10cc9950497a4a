"""Shared pytest fixtures and test helpers for hookwright tests."""

from __future__ import annotations

import logging
import sys
import textwrap
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from hookwright.plugins.requires import MODULE_PREFIX

# Dotted-name fixture packages created by tests use this prefix.
FIXTURE_PACKAGE_PREFIX = "hwfixture_"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _forget_required_modules() -> Generator[None]:
    """Drop modules imported by tests so every test re-executes its files."""
    yield
    for name in list(sys.modules):
        if name.startswith((MODULE_PREFIX, FIXTURE_PACKAGE_PREFIX)):
            del sys.modules[name]


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state; the CLI reconfigures it on every invocation."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    hw = logging.getLogger("hookwright")
    hw_level = hw.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    hw.setLevel(hw_level)


@pytest.fixture
def write_module(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a Python module into ``tmp_path`` and return its path."""

    def _write(name: str, source: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from ``tmp_path`` with no config env var leaking in."""
    monkeypatch.delenv("HOOKWRIGHT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Plugin module sources shared across test modules
# ---------------------------------------------------------------------------

HOOKS_MODULE_SRC = """\
calls = []


def open_db():
    calls.append("open_db")


def reset_db():
    calls.append("reset_db")


mochaHooks = {"beforeAll": open_db, "beforeEach": [reset_db]}
"""

FIXTURES_MODULE_SRC = """\
def start_server():
    pass


def stop_server():
    pass


mochaGlobalSetup = start_server
mochaGlobalTeardown = [stop_server]
"""

ASYNC_HOOKS_MODULE_SRC = """\
import asyncio


def flush_cache():
    pass


async def mochaHooks():
    await asyncio.sleep(0)
    return {"afterEach": flush_cache}
"""

PLAIN_MODULE_SRC = """\
VALUE = 42


def helper():
    return VALUE
"""
