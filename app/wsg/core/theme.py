"""Colors for wsg output.

The palette can be overridden per color in ``~/.config/wsg/theme.toml``::

    [colors]
    index = "#faf870"
    deletable = "#ff5555"
"""

import logging
import re
import tomllib
from functools import cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from wsg.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Palette used by panels, tables and messages."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"
    index: str = "#faf870"
    recognizer: str = "#69B9A1"
    size: str = "#0ec1c8"
    deletable: str = "#f53263"

    @field_validator("*", mode="before")
    @classmethod
    def _hex_only(cls, value: object) -> object:
        if not isinstance(value, str) or not _HEX_COLOR.fullmatch(value.strip()):
            msg = f"expected a #RGB or #RRGGBB color, got {value!r}"
            raise ValueError(msg)
        return value.strip()


def _read_overrides(path: Path) -> dict[str, object]:
    """Return the ``[colors]`` table of a theme file, or {} if unusable."""
    try:
        with open(path, "rb") as f:
            colors = tomllib.load(f).get("colors", {})
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}
    return colors


def load_theme(path: Path | None = None) -> ThemeColors:
    """Load the palette, applying user overrides when they are valid.

    Args:
        path: Theme file. Defaults to ``~/.config/wsg/theme.toml``.

    Returns:
        The overridden palette, or the defaults if the file is invalid.
    """
    theme_path = path or get_user_theme_path()
    overrides = _read_overrides(theme_path)
    try:
        return ThemeColors.model_validate(overrides)
    except ValidationError as e:
        logger.warning("Ignoring theme file %s: %s", theme_path, e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich styles referenced in markup such as ``[size]``."""
    c = colors or load_theme()
    return Theme(
        {
            "text": c.text,
            "muted": c.muted,
            "dim": c.muted,
            "header": c.header,
            "bold_header": f"bold {c.header}",
            "border": c.border,
            "success": c.success,
            "warning": c.warning,
            "error": f"bold {c.error}",
            "info": c.info,
            "index": f"bold {c.index}",
            "recognizer": f"bold {c.recognizer}",
            "size": c.size,
            "deletable": c.deletable,
        }
    )


@cache
def get_theme() -> Theme:
    """Rich theme shared by the module-level consoles, built once."""
    return get_rich_theme()
