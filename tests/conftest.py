"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules. Most tests run
against a throwaway bash-it tree built under ``tmp_path``.
"""

import os
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
from bitctl.models.component import ComponentKind

ComponentFactory = Callable[..., Path]


def _write_component(
    root: Path,
    kind: ComponentKind,
    name: str,
    description: str | None = None,
    enabled: bool = False,
    priority: int | None = None,
) -> Path:
    """Create an available component file and optionally enable it."""
    available = root / kind.value / "available"
    available.mkdir(parents=True, exist_ok=True)

    lines = ["# shellcheck shell=bash"]
    if priority is not None:
        lines.append(f"# BASH_IT_LOAD_PRIORITY: {priority}")
    if description is not None:
        lines.append(f"{kind.about_keyword} '{description}'")
    lines.append(f"# {name} body")

    path = available / f"{name}.{kind.file_suffix}"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    if enabled:
        enabled_dir = root / "enabled"
        enabled_dir.mkdir(exist_ok=True)
        marker = enabled_dir / f"{priority or kind.default_priority}---{path.name}"
        marker.symlink_to(os.path.join("..", kind.value, "available", path.name))

    return path


@pytest.fixture
def bash_it_root(tmp_path: Path) -> Path:
    """Empty bash-it installation with an available dir for every kind."""
    root = tmp_path / "bash_it"
    for kind in ComponentKind:
        (root / kind.value / "available").mkdir(parents=True)
    return root


@pytest.fixture
def make_component(bash_it_root: Path) -> ComponentFactory:
    """Factory creating components inside ``bash_it_root``."""

    def factory(
        kind: ComponentKind,
        name: str,
        description: str | None = None,
        enabled: bool = False,
        priority: int | None = None,
    ) -> Path:
        return _write_component(bash_it_root, kind, name, description, enabled, priority)

    return factory


@pytest.fixture
def sample_bash_it(bash_it_root: Path, make_component: ComponentFactory) -> Path:
    """bash-it tree with a small, realistic catalog.

    Enabled: alias ``git``, plugin ``ruby``.
    """
    make_component(ComponentKind.ALIAS, "bundler", "ruby bundler aliases")
    make_component(ComponentKind.ALIAS, "git", "common git abbreviations", enabled=True)
    make_component(ComponentKind.ALIAS, "gitsvn", "common git-svn abbreviations")

    make_component(ComponentKind.PLUGIN, "chruby", "load chruby")
    make_component(ComponentKind.PLUGIN, "chruby-auto", "load chruby + auto-switching")
    make_component(ComponentKind.PLUGIN, "git", "git helper functions")
    make_component(ComponentKind.PLUGIN, "jgitflow", "maven jgitflow build helpers")
    make_component(ComponentKind.PLUGIN, "rbenv", "load rbenv, if you are using it")
    make_component(
        ComponentKind.PLUGIN,
        "ruby",
        "ruby and rubygems specific functions and settings",
        enabled=True,
    )

    make_component(ComponentKind.COMPLETION, "gem", "gem completion")
    make_component(ComponentKind.COMPLETION, "git", "git completion")
    make_component(ComponentKind.COMPLETION, "rake", "rake task completion")
    return bash_it_root


@pytest.fixture
def cli_env(tmp_path: Path, sample_bash_it: Path) -> Iterator[Path]:
    """Point bitctl at the sample bash-it tree with isolated config and cache dirs."""
    env = {
        "BASH_IT": str(sample_bash_it),
        "XDG_CONFIG_HOME": str(tmp_path / "config"),
        "XDG_CACHE_HOME": str(tmp_path / "cache"),
    }
    with patch.dict(os.environ, env):
        os.environ.pop("NO_COLOR", None)
        yield sample_bash_it
