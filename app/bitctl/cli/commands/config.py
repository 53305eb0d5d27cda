"""Settings commands.

Provides commands to show the effective settings and to create the
settings file with default values.
"""

from typing import Annotated

import typer
from rich.table import Table

from bitctl.cli.types import require_settings
from bitctl.core.errors import SettingsError
from bitctl.core.paths import get_settings_path, resolve_bash_it_dir
from bitctl.core.settings import Settings, save_settings
from bitctl.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the bitctl settings file.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective settings."""
    settings = require_settings()
    path = get_settings_path()

    table = Table(
        title="Settings",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Key", no_wrap=True)
    table.add_column("Value")

    for key, value in settings.model_dump().items():
        table.add_row(key, f"[muted]{value}[/muted]" if value is None else str(value))
    table.add_row("bash-it root (resolved)", str(resolve_bash_it_dir(settings.bash_it_dir)))

    console.print(table)
    if not path.exists():
        print_info(f"No settings file at {path}; using defaults.")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing settings file.",
        ),
    ] = False,
) -> None:
    """Write a settings file with default values."""
    path = get_settings_path()

    if path.exists() and not force:
        print_error(f"Settings file already exists: {path}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        saved = save_settings(Settings(), path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {saved}")
