"""List command implementation.

Shows every component of one kind with its enabled state and description.
"""

from typing import Annotated

import typer

from bitctl.cli.types import build_workspace, parse_kind
from bitctl.core.errors import CatalogError
from bitctl.utils.formatting import (
    console,
    create_component_table,
    format_component_row,
    print_error,
)


def list_components(
    kind: Annotated[
        str,
        typer.Argument(help="Component kind: alias, plugin or completion."),
    ],
    enabled_only: Annotated[
        bool,
        typer.Option(
            "--enabled",
            "-e",
            help="Only show enabled components.",
        ),
    ] = False,
) -> None:
    """List available components of a kind.

    Examples:
        bitctl list plugins                 # All plugins
        bitctl list alias --enabled         # Enabled aliases only
    """
    component_kind = parse_kind(kind)
    workspace = build_workspace()

    try:
        records = list(workspace.catalog.list_components(component_kind))
    except CatalogError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if enabled_only:
        records = [r for r in records if r.enabled]

    table = create_component_table(component_kind.value.capitalize())
    for record in records:
        table.add_row(*format_component_row(record))
    console.print(table)

    enabled_count = sum(1 for r in records if r.enabled)
    console.print(f"\n[muted]{len(records)} {component_kind.value}, {enabled_count} enabled[/]")
