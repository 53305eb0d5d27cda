"""Settings file I/O.

This module loads and saves the user settings file in TOML format,
validated with Pydantic. A missing settings file is not an error:
defaults are used.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from bitctl.core.errors import SettingsError, SettingsParseError, SettingsValidationError
from bitctl.core.paths import get_settings_path


class Settings(BaseModel):
    """User settings for bitctl.

    Attributes:
        bash_it_dir: bash-it installation directory (``$BASH_IT`` wins).
        color: Use colored search output by default.
        animate: Animate state transitions on interactive terminals.
        animation_delay: Delay in seconds between animation frames.
        use_cache: Cache catalog listings between invocations.
    """

    model_config = ConfigDict(extra="forbid")

    bash_it_dir: Annotated[Path | None, Field(description="bash-it root directory")] = None
    color: Annotated[bool, Field(description="Colored search output")] = True
    animate: Annotated[bool, Field(description="Animate state transitions")] = True
    animation_delay: Annotated[
        float,
        Field(ge=0.0, le=1.0, description="Seconds between animation frames"),
    ] = 0.05
    use_cache: Annotated[bool, Field(description="Cache catalog listings")] = True


def load_settings(path: Path | None = None) -> Settings:
    """Load and validate settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated Settings; defaults if the file does not exist.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsValidationError: If the content doesn't match the schema.
        SettingsError: If the file cannot be read.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        return Settings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsValidationError(f"Invalid settings in {settings_path}: {e}") from e


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically through a temporary file in the
    same directory followed by os.replace().

    Args:
        settings: Settings to save.
        path: Destination path. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    data = _settings_to_dict(settings)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path


def _settings_to_dict(settings: Settings) -> dict[str, Any]:
    """Convert Settings to a TOML-serializable dictionary.

    TOML has no null, so unset optional values are omitted.
    """
    return settings.model_dump(mode="json", exclude_none=True)
