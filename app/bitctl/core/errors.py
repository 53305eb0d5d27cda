"""Exception hierarchy for bitctl.

Domain errors are raised by the core and catalog layers and converted
to user-facing messages by the CLI commands.
"""


class BitctlError(Exception):
    """Base exception for all bitctl errors."""


class InvalidComponentKindError(BitctlError, ValueError):
    """Raised when a component kind name is not aliases, plugins or completions.

    This indicates a wiring bug or a bad command-line argument and is
    never recovered from inside the search pipeline.
    """


class CatalogError(BitctlError):
    """Raised when the bash-it component catalog cannot be read."""


class SettingsError(BitctlError):
    """Base exception for settings-file errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file is not valid TOML."""


class SettingsValidationError(SettingsError):
    """Raised when the settings file content does not match the schema."""
