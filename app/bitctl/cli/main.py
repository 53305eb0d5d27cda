"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from bitctl import __version__
from bitctl.cli.commands import config, search, show, toggle
from bitctl.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="bitctl",
    help="Search, enable and disable bash-it aliases, plugins and completions.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"bitctl version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through Rich when verbose output is requested."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
) -> None:
    """bitctl - search and bulk-toggle bash-it components.

    Find aliases, plugins and completions by keyword and enable or
    disable every match in one go.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(verbose)


# Register commands
app.command(name="search", context_settings=search.CONTEXT_SETTINGS)(search.search)
app.command(name="enable")(toggle.enable)
app.command(name="disable")(toggle.disable)
app.command(name="list")(show.list_components)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
