"""User settings for wsg.

Settings are optional and stored in ~/.config/wsg/config.toml. Command-line
options always take precedence over values loaded here.
"""

import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wsg.core.paths import get_settings_path
from wsg.garbage.cache import DEFAULT_CACHE_TTL


class Settings(BaseModel):
    """Configuration for scanning and caching.

    Attributes:
        cache_ttl_seconds: Maximum age of cached scan results (default: 300s).
        include_recognizers: Recognizer names to use (empty = all).
        exclude_recognizers: Recognizer names to skip.
    """

    model_config = ConfigDict(extra="forbid")

    cache_ttl_seconds: Annotated[
        int,
        Field(ge=0, le=86400, description="Cache time-to-live in seconds (0-86400)"),
    ] = int(DEFAULT_CACHE_TTL)
    include_recognizers: Annotated[
        list[str],
        Field(description="Recognizer names to use (empty = all)"),
    ] = []
    exclude_recognizers: Annotated[
        list[str],
        Field(description="Recognizer names to skip"),
    ] = []


class SettingsError(Exception):
    """Raised when the settings file cannot be read or validated."""


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    A missing file is not an error: defaults are returned.

    Args:
        path: Path to the settings file. If None, uses the default location.

    Returns:
        Validated Settings object.

    Raises:
        SettingsError: If the file is unreadable, not valid TOML, or
            doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        return Settings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings {settings_path}: {e}") from e

    try:
        return Settings.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e
