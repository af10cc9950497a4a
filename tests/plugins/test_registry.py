"""Tests for PluginRegistry and the built-in plugin kinds."""

from __future__ import annotations

import pytest

from hookwright.plugins.errors import PluginConflictError
from hookwright.plugins.kinds import (
    PLUGIN_GLOBAL_SETUP,
    PLUGIN_GLOBAL_TEARDOWN,
    PLUGIN_ROOT_HOOKS,
    PluginKind,
)
from hookwright.plugins.registry import PluginRegistry, default_registry
from hookwright.plugins.root_hooks import aggregate_root_hooks


class TestPluginKind:
    def test_output_key_defaults_to_export_name(self) -> None:
        assert PluginKind(export_name="mochaBananaPhone").output_key == "mochaBananaPhone"

    def test_output_key_uses_option_name(self) -> None:
        kind = PluginKind(export_name="mochaBananaPhone", option_name="bananaPhone")
        assert kind.output_key == "bananaPhone"

    def test_is_surfaced(self) -> None:
        assert not PluginKind(export_name="a").is_surfaced
        assert PluginKind(export_name="a", passthrough=True).is_surfaced
        assert PluginKind(export_name="a", finalize=list).is_surfaced

    def test_frozen(self) -> None:
        kind = PluginKind(export_name="a")
        with pytest.raises(Exception):
            kind.export_name = "b"  # type: ignore[misc]


class TestPluginRegistry:
    def test_register_and_list_in_order(self) -> None:
        registry = PluginRegistry()
        registry.register(PluginKind(export_name="zeta"))
        registry.register(PluginKind(export_name="alpha"))
        assert registry.list_kinds() == ["zeta", "alpha"]
        assert len(registry) == 2

    def test_duplicate_export_name_conflicts(self) -> None:
        registry = PluginRegistry([PluginKind(export_name="mochaBananaPhone")])
        with pytest.raises(PluginConflictError, match="mochaBananaPhone"):
            registry.register(PluginKind(export_name="mochaBananaPhone", option_name="other"))

    def test_conflict_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            PluginRegistry([PluginKind(export_name="a"), PluginKind(export_name="a")])

    def test_conflict_leaves_original_kind(self) -> None:
        original = PluginKind(export_name="a", option_name="first")
        registry = PluginRegistry([original])
        with pytest.raises(PluginConflictError):
            registry.register(PluginKind(export_name="a", option_name="second"))
        assert registry.get("a") is original

    def test_lookup(self) -> None:
        kind = PluginKind(export_name="a")
        registry = PluginRegistry([kind])
        assert registry.get("a") is kind
        assert "a" in registry
        assert "b" not in registry
        with pytest.raises(KeyError):
            registry.get("b")

    def test_iterates_kinds(self) -> None:
        kinds = [PluginKind(export_name="a"), PluginKind(export_name="b")]
        assert list(PluginRegistry(kinds)) == kinds


class TestDefaultRegistry:
    def test_builtin_kinds(self) -> None:
        registry = default_registry()
        assert registry.list_kinds() == [
            PLUGIN_ROOT_HOOKS,
            PLUGIN_GLOBAL_SETUP,
            PLUGIN_GLOBAL_TEARDOWN,
        ]

    def test_output_keys(self) -> None:
        registry = default_registry()
        assert registry.get("mochaHooks").output_key == "rootHooks"
        assert registry.get("mochaGlobalSetup").output_key == "globalSetup"
        assert registry.get("mochaGlobalTeardown").output_key == "globalTeardown"

    def test_root_hooks_are_aggregated(self) -> None:
        kind = default_registry().get(PLUGIN_ROOT_HOOKS)
        assert kind.finalize is aggregate_root_hooks
        assert kind.validate is not None

    def test_global_fixtures_pass_through(self) -> None:
        registry = default_registry()
        for name in (PLUGIN_GLOBAL_SETUP, PLUGIN_GLOBAL_TEARDOWN):
            kind = registry.get(name)
            assert kind.finalize is None
            assert kind.passthrough is True
            assert kind.validate is not None

    def test_each_call_is_independent(self) -> None:
        first = default_registry()
        first.register(PluginKind(export_name="extra"))
        assert "extra" not in default_registry()
