"""XDG-compliant path management for bitctl.

This module provides standardized paths following the XDG Base Directory
Specification for configuration and cache storage, and resolves the
bash-it installation that bitctl operates on.

XDG defaults:
- Config: ~/.config/bitctl/
- Cache: ~/.cache/bitctl/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "bitctl"

# Environment variable bash-it itself exports for its install location
BASH_IT_ENV_VAR = "BASH_IT"

DEFAULT_BASH_IT_DIR = Path.home() / ".bash_it"


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
        Path to ~/.config/bitctl/ (or XDG_CONFIG_HOME/bitctl/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_cache_dir() -> Path:
    """Get the cache directory path.

    Cache data holds catalog listings that can be regenerated at any time.

    Returns:
        Path to ~/.cache/bitctl/ (or XDG_CACHE_HOME/bitctl/).
    """
    return _get_xdg_dir("XDG_CACHE_HOME", ".cache")


def get_settings_path() -> Path:
    """Get the settings file path.

    Returns:
        Path to ~/.config/bitctl/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/bitctl/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def resolve_bash_it_dir(configured: Path | None = None) -> Path:
    """Resolve the bash-it installation directory.

    Priority:
    1. ``$BASH_IT`` environment variable
    2. ``configured`` (from the settings file)
    3. ``~/.bash_it``

    Args:
        configured: Directory from the settings file, if any.

    Returns:
        Path to the bash-it root (not checked for existence).
    """
    from_env = os.environ.get(BASH_IT_ENV_VAR)
    if from_env:
        return Path(from_env).expanduser()
    if configured is not None:
        return configured.expanduser()
    return DEFAULT_BASH_IT_DIR
