"""Enable and disable command implementations.

Thin wrappers around the activator for enabling or disabling named
components of one kind, or every component of a kind with ``all``.
"""

from typing import Annotated

import typer

from bitctl.activators.base import ActivationResult
from bitctl.cli.types import Workspace, build_workspace, parse_kind
from bitctl.core.errors import CatalogError
from bitctl.models.component import ComponentKind
from bitctl.models.search import ActionDirective
from bitctl.utils.formatting import console, print_error, print_info

ALL_COMPONENTS = "all"

KindArgument = Annotated[
    str,
    typer.Argument(help="Component kind: alias, plugin or completion (singular or plural)."),
]
NamesArgument = Annotated[
    list[str],
    typer.Argument(help="Component names, or 'all'.", show_default=False),
]
DryRunOption = Annotated[
    bool,
    typer.Option(
        "--dry-run",
        "-n",
        help="Show what would change without changing anything.",
    ),
]


def _select_names(
    workspace: Workspace,
    kind: ComponentKind,
    names: list[str],
    directive: ActionDirective,
) -> list[str]:
    """Expand ``all`` into the components the directive can act on."""
    if ALL_COMPONENTS not in names:
        return list(dict.fromkeys(names))

    records = list(workspace.bash_it.list_components(kind))
    if directive is ActionDirective.ENABLE:
        return [r.name for r in records if not r.enabled]
    return sorted(workspace.bash_it.enabled_names(kind))


def _print_result(result: ActivationResult) -> None:
    """Print one activation result in the bash-it message style."""
    if result.failed:
        print_error(result.error or f"Could not {result.directive.value} {result.name}")
        return

    if result.dry_run:
        print_info(f"Would {result.directive.value} {result.kind.singular}: {result.name}")
    elif not result.changed:
        print_info(result.message or f"{result.name} unchanged")
    elif result.directive is ActionDirective.ENABLE:
        console.print(
            f"[component.enabled]✓ enabled[/] [success]{result.kind.singular}:[/] {result.name}"
        )
    else:
        console.print(f"[error]◯ disabled[/] [success]{result.kind.singular}:[/] {result.name}")


def run_toggle(kind_name: str, names: list[str], directive: ActionDirective, dry_run: bool) -> None:
    """Enable or disable components and print one line per component.

    Disabling a component that is not enabled is reported as an error,
    like bash-it does.

    Raises:
        typer.Exit: With code 1 if the catalog is missing or any component failed.
    """
    kind = parse_kind(kind_name)
    workspace = build_workspace(dry_run=dry_run)

    try:
        selected = _select_names(workspace, kind, names, directive)
    except CatalogError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not selected:
        print_info(f"No {kind.value} to {directive.value}.")
        return

    enabled = workspace.bash_it.enabled_names(kind)
    failed = False
    changed = False

    for name in selected:
        if directive is ActionDirective.DISABLE and name not in enabled:
            print_error(f"{name} does not appear to be an enabled {kind.singular}")
            failed = True
            continue

        result = workspace.activator.apply(kind, name, directive)
        _print_result(result)
        failed = failed or result.failed
        changed = changed or result.changed

    if changed and workspace.cache is not None:
        workspace.cache.invalidate(kind)

    if failed:
        raise typer.Exit(code=1)


def enable(kind: KindArgument, names: NamesArgument, dry_run: DryRunOption = False) -> None:
    """Enable one or more components.

    Examples:
        bitctl enable plugin git ruby       # Enable two plugins
        bitctl enable alias all             # Enable every alias
    """
    run_toggle(kind, names, ActionDirective.ENABLE, dry_run)


def disable(kind: KindArgument, names: NamesArgument, dry_run: DryRunOption = False) -> None:
    """Disable one or more components.

    Examples:
        bitctl disable completion git       # Disable one completion
        bitctl disable plugin all           # Disable every plugin
    """
    run_toggle(kind, names, ActionDirective.DISABLE, dry_run)
