"""CLI commands for bitctl.

This package contains all subcommand implementations.
"""

from bitctl.cli.commands import config, search, show, toggle

__all__ = ["config", "search", "show", "toggle"]
