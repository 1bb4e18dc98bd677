"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the cache namespace and config home at throwaway directories."""
    base = tmp_path_factory.mktemp("wsg-env")
    monkeypatch.setenv("WSG_CACHE_DIR", str(base / "cache"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(base / "config"))
    monkeypatch.setenv("COLUMNS", "200")
    return base


@pytest.fixture
def cache_dir(isolated_dirs: Path) -> Path:
    """Cache namespace used by the current test."""
    return isolated_dirs / "cache"


@pytest.fixture
def write_bytes() -> Callable[[Path, int], Path]:
    """Create a file of an exact size, creating parent directories."""

    def _write(path: Path, size: int) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\0" * size)
        return path

    return _write


@pytest.fixture
def workspace(tmp_path: Path, write_bytes: Callable[[Path, int], Path]) -> Path:
    """A directory tree with one Flutter, one NodeJS and one Rust project.

    Layout::

        workspace/
            app/            pubspec.yaml, build/ (3000 bytes)
            web/            package.json, node_modules/ (1500 bytes)
            tool/           Cargo.toml, target/ (700 bytes)
            notes/          README.md (no project)
    """
    root = tmp_path / "workspace"

    write_bytes(root / "app" / "pubspec.yaml", 10)
    write_bytes(root / "app" / "build" / "app.bin", 2000)
    write_bytes(root / "app" / "build" / "outputs" / "apk.bin", 1000)

    write_bytes(root / "web" / "package.json", 20)
    write_bytes(root / "web" / "node_modules" / "left-pad" / "index.js", 1500)

    write_bytes(root / "tool" / "Cargo.toml", 30)
    write_bytes(root / "tool" / "target" / "debug" / "tool", 700)

    write_bytes(root / "notes" / "README.md", 5)

    return root
