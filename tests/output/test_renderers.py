"""Tests for Rich renderers and output format selection."""

from __future__ import annotations

import json

from hookwright.output.console import create_console, get_output
from hookwright.output.formatters import format_result
from hookwright.output.renderers import render_result
from hookwright.services.result import ServiceResult


def _inspect_result() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="inspect",
        data={
            "modules": [
                {"spec": "hooks.py", "module": "hookwright_required_hooks", "has_plugins": True},
                {"spec": "plain.py", "module": "hookwright_required_plain", "has_plugins": False},
            ],
            "plugins": {
                "rootHooks": {
                    "beforeAll": ["open_db"],
                    "beforeEach": ["reset_db", "seed"],
                    "afterAll": [],
                    "afterEach": [],
                },
                "globalSetup": ["start_server"],
            },
        },
    )


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print("hello")
        assert get_output(console) == "hello\n"


class TestRenderInspect:
    def test_shows_hooks_per_slot(self) -> None:
        output = render_result(_inspect_result())
        assert output.splitlines()[0].startswith("OK")
        assert "rootHooks" in output
        assert "beforeEach: reset_db, seed" in output
        assert "afterAll: -" in output
        assert "1. start_server" in output

    def test_modules_only_when_verbose(self) -> None:
        assert "hookwright_required_plain" not in render_result(_inspect_result())
        verbose = render_result(_inspect_result(), verbose=True)
        assert "+ hookwright_required_hooks" in verbose
        assert "- hookwright_required_plain" in verbose

    def test_no_plugins(self) -> None:
        result = ServiceResult(ok=True, op="inspect", data={"modules": [], "plugins": {}})
        assert "no plugins found" in render_result(result)


class TestRenderKinds:
    def test_table(self) -> None:
        result = ServiceResult(
            ok=True,
            op="kinds",
            data={
                "kinds": [
                    {
                        "export_name": "mochaHooks",
                        "output_key": "rootHooks",
                        "validated": True,
                        "aggregated": True,
                        "passthrough": False,
                    }
                ]
            },
        )
        output = render_result(result)
        assert "mochaHooks" in output
        assert "rootHooks" in output
        assert "Passthrough" in output


class TestRenderOther:
    def test_error(self) -> None:
        result = ServiceResult.failure("inspect", "IMPORT_FAILED", "boom", spec="hooks.py")
        output = render_result(result)
        assert output.startswith("ERROR")
        assert "IMPORT_FAILED" in output
        assert "boom" in output
        assert "spec: hooks.py" not in output
        assert "spec: hooks.py" in render_result(result, verbose=True)

    def test_generic_fallback(self) -> None:
        result = ServiceResult(ok=True, op="something", data={"count": 2, "names": ["a"]})
        output = render_result(result)
        assert "count: 2" in output
        assert 'names: ["a"]' in output


class TestFormatResult:
    def test_json(self) -> None:
        parsed = json.loads(format_result(_inspect_result(), json_output=True))
        assert parsed["ok"] is True
        assert parsed["data"]["plugins"]["globalSetup"] == ["start_server"]

    def test_human(self) -> None:
        assert format_result(_inspect_result()) == render_result(_inspect_result())
