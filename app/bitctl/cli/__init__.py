"""CLI package for bitctl.

This package contains the Typer application and all subcommands.
"""

from bitctl.cli.main import app

__all__ = ["app"]
