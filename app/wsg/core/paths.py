"""Path management for wsg.

This module provides the locations wsg reads from and writes to, and the
path normalization shared by the scanner and the result cache.

Defaults:
- Config: ~/.config/wsg/ (XDG_CONFIG_HOME respected)
- Cache: <system temp dir>/wsg/ (WSG_CACHE_DIR respected)
"""

import os
import tempfile
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "wsg"

CACHE_DIR_ENV = "WSG_CACHE_DIR"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/wsg/ (or XDG_CONFIG_HOME/wsg/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_settings_path() -> Path:
    """Get the settings file path.

    Returns:
        Path to ~/.config/wsg/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/wsg/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_cache_dir() -> Path:
    """Get the result cache namespace.

    Scan results are regenerable, so they live under the system temporary
    directory rather than the XDG cache home.

    Returns:
        Path to <tempdir>/wsg/ (or WSG_CACHE_DIR if set).
    """
    override = os.environ.get(CACHE_DIR_ENV)
    if override:
        return Path(override)
    return Path(tempfile.gettempdir()) / APP_NAME


def ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path


def normalize_path(path: str | os.PathLike[str]) -> Path:
    """Normalize a user-supplied path to a canonical absolute form.

    Expands ``~``, makes the path absolute against the current directory
    and collapses ``.``, ``..``, duplicate and trailing separators.
    Symbolic links are not resolved, so no filesystem access happens.

    Args:
        path: Path as typed by the user.

    Returns:
        Normalized absolute path.
    """
    return Path(os.path.abspath(os.path.expanduser(os.fspath(path))))
