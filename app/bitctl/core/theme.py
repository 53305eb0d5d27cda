"""Color theme for bitctl output.

The bundled ``data/theme.toml`` holds the defaults; entries in the user's
``~/.config/bitctl/theme.toml`` override them one by one.
"""

import logging
import re
import sys
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from rich.theme import Theme

from bitctl.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) keyed by role."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    kind_label: str = "#3b8eea"
    component_enabled: str = "#23d18b"
    component_disabled: str = "#d0d0d0"
    flash: str = "#f5b332"

    @field_validator("*", mode="before")
    @classmethod
    def check_hex(cls, v: object, info: Any) -> str:
        if not isinstance(v, str):
            msg = f"{info.field_name}: color must be a string"
            raise ValueError(msg)
        color = v.strip()
        if not color.startswith("#"):
            msg = f"{info.field_name}: color must start with '#'"
            raise ValueError(msg)
        if len(color) not in (4, 7):
            msg = f"{info.field_name}: color must be #RGB or #RRGGBB format"
            raise ValueError(msg)
        if not _HEX_COLOR.fullmatch(color):
            msg = f"{info.field_name}: invalid hex color '{color}'"
            raise ValueError(msg)
        return color


def _read_colors(path: Path) -> dict[str, str] | None:
    """Read the ``[colors]`` table of a theme file.

    Non-string entries are skipped. Returns None when the file is missing
    or unreadable.
    """
    try:
        with open(path, "rb") as f:
            table = tomllib.load(f).get("colors", {})
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as e:
        logger.warning("Failed to parse theme file %s: %s", path, e)
        print(f"Warning: Failed to parse {path}: {e}", file=sys.stderr)
        return None
    except OSError as e:
        logger.warning("Failed to read theme file %s: %s", path, e)
        return None

    if not isinstance(table, dict):
        logger.warning("Invalid 'colors' section in %s", path)
        return None
    return {key: value for key, value in table.items() if isinstance(value, str)}


def load_theme() -> ThemeColors:
    """Merge the bundled colors with the user's overrides.

    An invalid merged theme is reported and replaced by the defaults.
    """
    bundled = resources.files("bitctl.data").joinpath("theme.toml")
    colors = _read_colors(Path(str(bundled)))
    if colors is None:
        logger.error("Bundled theme missing, installation may be corrupted")
        colors = {}

    user_path = get_user_theme_path()
    overrides = _read_colors(user_path)
    if overrides:
        logger.debug("Loaded user theme overrides from %s", user_path)
        colors.update(overrides)

    try:
        return ThemeColors(**colors)
    except ValueError as e:
        logger.warning("Theme validation failed, using defaults: %s", e)
        print(f"Warning: Invalid theme configuration: {e}", file=sys.stderr)
        return ThemeColors()


def build_rich_theme(colors: ThemeColors) -> Theme:
    """Map theme colors onto the style names used by bitctl output."""
    return Theme(
        {
            "text": colors.text,
            "muted": colors.muted,
            "border": colors.border,
            "bold_header": f"bold {colors.header}",
            "success": colors.success,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "info": colors.info,
            "search.kind": f"bold {colors.kind_label}",
            "component.enabled": f"bold {colors.component_enabled}",
            "component.disabled": colors.component_disabled,
            "component.flash": f"bold {colors.flash}",
        }
    )


@cache
def get_theme() -> Theme:
    """Return the Rich theme, loaded once per process."""
    return build_rich_theme(load_theme())
