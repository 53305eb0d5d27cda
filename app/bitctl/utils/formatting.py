"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from bitctl.core.theme import get_theme

if TYPE_CHECKING:
    from bitctl.models.component import ComponentRecord


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_component_table(title: str) -> Table:
    """Create a pre-configured table for listing components.

    Args:
        title: Table title.

    Returns:
        Rich Table with status, name and description columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("", width=2, justify="center")
    table.add_column("Name", no_wrap=True)
    table.add_column("Description", style="text", overflow="ellipsis")
    return table


def format_component_row(record: ComponentRecord) -> tuple[str, str, str]:
    """Format a component as a table row with proper styling.

    Enabled components get a check mark and the enabled color.

    Returns:
        Tuple of (icon, name, description) with Rich markup.
    """
    if record.enabled:
        icon = "[component.enabled]✓[/]"
        name = f"[component.enabled]{record.name}[/]"
    else:
        icon = "[muted]○[/]"
        name = f"[component.disabled]{record.name}[/]"
    return (icon, name, f"[text]{record.description or '-'}[/]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
