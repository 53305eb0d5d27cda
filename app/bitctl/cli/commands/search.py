"""Search command implementation.

Finds aliases, plugins and completions whose name or description match
the given terms, and optionally enables or disables every match.
"""

from typing import Annotated

import typer

from bitctl.cli.display import get_renderer
from bitctl.cli.types import build_workspace, color_supported, require_settings
from bitctl.core.applier import ActionApplier
from bitctl.core.errors import CatalogError
from bitctl.core.search import SearchEngine
from bitctl.core.terms import parse_arguments
from bitctl.models.search import ActionOutcome, SearchOptions
from bitctl.utils.formatting import console, print_error, print_warning

# Tokens are parsed by parse_arguments(), not by click: "-chruby" must stay
# a negative term and "-h" must reach the search help.
CONTEXT_SETTINGS = {
    "ignore_unknown_options": True,
    "allow_extra_args": True,
    "help_option_names": [],
}

SEARCH_HELP = """
[warning]USAGE[/]

   bitctl search [-|@]term1 [-|@]term2 ... \\
     [ --enable   | -e ] \\
     [ --disable  | -d ] \\
     [ --no-color | -c ] \\
     [ --refresh  | -r ] \\
     [ --help     | -h ]

[warning]DESCRIPTION[/]

   Search for terms or term negations across all bash-it components:
   aliases, plugins and completions. Enabled components are shown in green
   (or with a check mark when --no-color is used).

   The results of a search can be enabled or disabled in bulk, so terms can
   also be exact or negated:

      * To exclude components whose name contains a substring, prefix the
        term with a minus, e.g. '-flow'.

      * To match only a component with exactly this name, prefix the term
        with '@', e.g. '@git'.

[warning]FLAGS[/]
   --enable   | -e    [info]Enable all matching components.[/]
   --disable  | -d    [info]Disable all matching components.[/]
   --help     | -h    [info]Print this help.[/]
   --refresh  | -r    [info]Force a refresh of the search cache.[/]
   --no-color | -c    [info]Disable color output and use monochrome text.[/]

[warning]EXAMPLES[/]

   [success]bitctl search git[/]
         aliases:  git gitsvn
         plugins:  autojump git git-subrepo jgitflow jump
     completions:  git git_flow git_flow_avh

   [success]bitctl search git -flow -svn[/]
         aliases:  git
         plugins:  autojump git git-subrepo jump
     completions:  git

   [success]bitctl search @git --enable[/]
         aliases:  git
         plugins:  git
     completions:  git
"""


def print_search_help() -> None:
    """Print the search usage text."""
    console.print(SEARCH_HELP, highlight=False)


def _report_failures(failures: list[ActionOutcome]) -> None:
    for outcome in failures:
        print_warning(f"Could not change {outcome.name}: {outcome.error}")


def search(
    ctx: typer.Context,
    tokens: Annotated[
        list[str] | None,
        typer.Argument(
            help="Search terms: 'term' (partial), '@term' (exact), '-term' (exclude), plus flags.",
            show_default=False,
        ),
    ] = None,
) -> None:
    """Search aliases, plugins and completions, optionally enabling or disabling matches.

    Examples:
        bitctl search ruby                  # Partial match on name or description
        bitctl search ruby -chruby          # Exclude names containing 'chruby'
        bitctl search @git --enable         # Enable every component named 'git'
        bitctl search docker --disable -c   # Disable matches, monochrome output
    """
    raw_tokens = list(tokens or []) + list(ctx.args)
    if not raw_tokens:
        print_search_help()
        return

    settings = require_settings()
    defaults = SearchOptions(
        use_color=settings.color and color_supported(),
        animate=settings.animate,
    )
    options, terms = parse_arguments(raw_tokens, defaults)

    if options.show_help:
        print_search_help()
        return

    workspace = build_workspace(settings)

    if not terms:
        if options.refresh and workspace.cache is not None:
            workspace.cache.invalidate()
        return

    engine = SearchEngine(
        workspace.catalog,
        ActionApplier(workspace.activator, workspace.cache),
        workspace.cache,
    )
    renderer = get_renderer(options, console, delay=settings.animation_delay)

    failures: list[ActionOutcome] = []
    try:
        for result in engine.run(terms, options):
            renderer.render(result, options.use_color)
            failures.extend(result.failures)
    except CatalogError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if failures:
        _report_failures(failures)
        raise typer.Exit(code=1)
