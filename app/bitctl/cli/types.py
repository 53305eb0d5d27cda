"""Shared types and utilities for CLI commands.

This module provides helpers used across multiple CLI command modules
to load settings and wire up the catalog, cache and activator.
"""

import os
from dataclasses import dataclass

import typer

from bitctl.activators.bash_it import BashItActivator
from bitctl.catalog.base import CatalogProvider
from bitctl.catalog.bash_it import BashItCatalog
from bitctl.catalog.cache import CachedCatalog, ComponentCache
from bitctl.core.errors import InvalidComponentKindError, SettingsError
from bitctl.core.paths import resolve_bash_it_dir
from bitctl.core.settings import Settings, load_settings
from bitctl.models.component import ComponentKind
from bitctl.utils.formatting import console, print_error


@dataclass(frozen=True, slots=True)
class Workspace:
    """Collaborators for one invocation.

    Attributes:
        settings: Loaded user settings.
        bash_it: Filesystem catalog of the bash-it installation.
        catalog: Catalog used for reading (cached when enabled in settings).
        cache: Listing cache, or None when caching is disabled.
        activator: Activator bound to the bash-it installation.
    """

    settings: Settings
    bash_it: BashItCatalog
    catalog: CatalogProvider
    cache: ComponentCache | None
    activator: BashItActivator


def require_settings() -> Settings:
    """Load settings or exit with a helpful error message.

    Raises:
        typer.Exit: If the settings file is invalid.
    """
    try:
        return load_settings()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def build_workspace(settings: Settings | None = None, dry_run: bool = False) -> Workspace:
    """Create the catalog, cache and activator for the configured bash-it root.

    Args:
        settings: Settings to use. If None, loads them from disk.
        dry_run: Whether the activator only simulates changes.

    Returns:
        Workspace with all collaborators wired together.
    """
    settings = settings or require_settings()
    root = resolve_bash_it_dir(settings.bash_it_dir)
    bash_it = BashItCatalog(root)

    cache: ComponentCache | None = None
    catalog: CatalogProvider = bash_it
    if settings.use_cache:
        cache = ComponentCache()
        catalog = CachedCatalog(bash_it, cache, source=str(root.resolve()))

    return Workspace(
        settings=settings,
        bash_it=bash_it,
        catalog=catalog,
        cache=cache,
        activator=BashItActivator(bash_it, dry_run=dry_run),
    )


def parse_kind(text: str) -> ComponentKind:
    """Parse a kind argument or exit with an error message.

    Raises:
        typer.Exit: If the kind is unknown.
    """
    try:
        return ComponentKind.parse(text)
    except InvalidComponentKindError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def color_supported() -> bool:
    """Check if colored output can be shown on the shared console.

    Honors the ``NO_COLOR`` convention. Output that is not a terminal
    gets the monochrome form so the enabled state stays visible.
    """
    if os.environ.get("NO_COLOR") or not console.is_terminal:
        return False
    return console.color_system is not None and not console.no_color
