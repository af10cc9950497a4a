"""Import user modules and feed their exports to a plugin loader.

A require spec is either a dotted module name (``myproject.test_hooks``)
or a path to a ``.py`` file. An existing file always wins; otherwise a
spec ending in ``.py`` is a path unless it names an importable submodule
called ``py``. File specs are executed under a synthetic module name
derived from the resolved path and registered in ``sys.modules`` like a
regular import.

Unlike entry-point plugins elsewhere, a required module that fails to
import is fatal: the user asked for it explicitly.
"""

from __future__ import annotations

import hashlib
import importlib
import importlib.util
import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING, Any

from hookwright.plugins.loader import PluginLoader

if TYPE_CHECKING:
    from hookwright.plugins.observers import LoaderObserver
    from hookwright.plugins.registry import PluginRegistry

MODULE_PREFIX = "hookwright_required_"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequiredModule:
    """Outcome of requiring one module."""

    spec: str
    module_name: str
    has_plugins: bool


def _is_importable(spec: str) -> bool:
    try:
        return importlib.util.find_spec(spec) is not None
    except (ImportError, ValueError):
        return False


def _is_path_spec(spec: str, base: Path) -> bool:
    if (base / spec).is_file():
        return True
    return spec.endswith(".py") and not _is_importable(spec)


def file_module_name(path: Path) -> str:
    """Synthetic module name for a required file, unique per resolved path."""
    digest = hashlib.sha1(str(path.resolve()).encode("utf-8")).hexdigest()[:8]
    return f"{MODULE_PREFIX}{path.stem}_{digest}"


def _import_file(path: Path) -> ModuleType:
    module_name = file_module_name(path)
    module_spec = importlib.util.spec_from_file_location(module_name, path)
    if module_spec is None or module_spec.loader is None:
        msg = f"Could not create module spec for {path}"
        raise ImportError(msg, path=str(path))
    module = importlib.util.module_from_spec(module_spec)
    sys.modules[module_name] = module
    try:
        module_spec.loader.exec_module(module)
    except BaseException:
        # Clean up partial module registration
        sys.modules.pop(module_name, None)
        raise
    return module


def require_module(spec: str, *, cwd: Path | None = None) -> ModuleType:
    """Import the module named by *spec*.

    Relative file paths resolve against *cwd* (default: the current
    directory).

    Raises:
        ImportError: If the module or file cannot be imported.
        FileNotFoundError: If a ``.py`` spec names a missing file.
    """
    base = cwd or Path.cwd()
    if _is_path_spec(spec, base):
        path = Path(spec)
        if not path.is_absolute():
            path = base / path
        if not path.is_file():
            msg = f"Required file not found: {path}"
            raise FileNotFoundError(msg)
        return _import_file(path.resolve())
    return importlib.import_module(spec)


def _plugin_dir_specs(plugin_dir: Path) -> list[str]:
    if not plugin_dir.is_dir():
        logger.debug("Plugin directory %s does not exist, skipping", plugin_dir)
        return []
    return [str(p) for p in sorted(plugin_dir.glob("*.py")) if not p.name.startswith("_")]


def collect_specs(specs: Iterable[str], *, plugin_dir: Path | None = None) -> list[str]:
    """Explicit *specs* followed by the ``.py`` files of *plugin_dir*, sorted."""
    all_specs = list(specs)
    if plugin_dir is not None:
        all_specs.extend(_plugin_dir_specs(plugin_dir))
    return all_specs


def require_all(
    specs: Iterable[str],
    loader: PluginLoader,
    *,
    plugin_dir: Path | None = None,
    cwd: Path | None = None,
) -> list[RequiredModule]:
    """Require every spec in order and load each module into *loader*.

    Files found in *plugin_dir* are required after the explicit specs,
    sorted by name. Each module is loaded exactly once, before the next is
    imported.
    """
    results: list[RequiredModule] = []
    for spec in collect_specs(specs, plugin_dir=plugin_dir):
        module = require_module(spec, cwd=cwd)
        has_plugins = loader.load(module)
        if not has_plugins:
            logger.debug("Required module %s exports no recognized plugins", module.__name__)
        results.append(RequiredModule(spec=spec, module_name=module.__name__, has_plugins=has_plugins))
    return results


async def load_plugins(
    specs: Iterable[str],
    *,
    registry: PluginRegistry | None = None,
    plugin_dir: Path | None = None,
    cwd: Path | None = None,
    observer: LoaderObserver | None = None,
) -> dict[str, Any]:
    """Require *specs*, then return the finalized plugin settings."""
    loader = PluginLoader(registry, observer=observer)
    require_all(specs, loader, plugin_dir=plugin_dir, cwd=cwd)
    return await loader.finalize()
