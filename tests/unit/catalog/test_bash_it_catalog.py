"""Unit tests for BashItCatalog.

Tests for reading available components, descriptions, priorities and
enabled markers from a bash-it tree.
"""

import os
from pathlib import Path

import pytest
from bitctl.catalog.bash_it import BashItCatalog, strip_priority
from bitctl.core.errors import CatalogError
from bitctl.models.component import ComponentKind


class TestStripPriority:
    """Tests for strip_priority function."""

    @pytest.mark.parametrize(
        ("marker", "expected"),
        [
            ("250---git.plugin.bash", "git.plugin.bash"),
            ("git.plugin.bash", "git.plugin.bash"),
            ("abc---git.plugin.bash", "abc---git.plugin.bash"),
        ],
    )
    def test_strip_priority(self, marker: str, expected: str) -> None:
        """Only numeric priority prefixes are removed."""
        assert strip_priority(marker) == expected


class TestBashItCatalog:
    """Tests for BashItCatalog class."""

    @pytest.fixture
    def catalog(self, sample_bash_it: Path) -> BashItCatalog:
        """Create catalog over the sample tree."""
        return BashItCatalog(sample_bash_it)

    def test_is_available(self, catalog: BashItCatalog) -> None:
        """A tree with available dirs is a bash-it installation."""
        assert catalog.is_available() is True

    def test_is_available_missing_root(self, tmp_path: Path) -> None:
        """A missing directory is not a bash-it installation."""
        assert BashItCatalog(tmp_path / "missing").is_available() is False

    def test_list_components_sorted(self, catalog: BashItCatalog) -> None:
        """Components are listed sorted by name."""
        names = [r.name for r in catalog.list_components(ComponentKind.PLUGIN)]
        assert names == ["chruby", "chruby-auto", "git", "jgitflow", "rbenv", "ruby"]

    def test_list_components_reads_description_and_state(self, catalog: BashItCatalog) -> None:
        """Records carry the about line and the enabled state."""
        records = {r.name: r for r in catalog.list_components(ComponentKind.ALIAS)}

        assert records["bundler"].description == "ruby bundler aliases"
        assert records["bundler"].enabled is False
        assert records["git"].enabled is True

    def test_list_components_ignores_other_files(
        self, catalog: BashItCatalog, sample_bash_it: Path
    ) -> None:
        """Files without the kind suffix are not components."""
        (sample_bash_it / "plugins" / "available" / "README.md").write_text("docs\n")
        (sample_bash_it / "plugins" / "available" / "git.aliases.bash").write_text("")

        names = [r.name for r in catalog.list_components(ComponentKind.PLUGIN)]

        assert "README" not in names
        assert names.count("git") == 1

    def test_list_components_missing_root_raises(self, tmp_path: Path) -> None:
        """A missing installation raises CatalogError."""
        catalog = BashItCatalog(tmp_path / "missing")

        with pytest.raises(CatalogError, match="No bash-it installation"):
            list(catalog.list_components(ComponentKind.ALIAS))

    def test_list_components_missing_kind_dir(self, bash_it_root: Path) -> None:
        """A kind without an available dir has no components."""
        (bash_it_root / "completions" / "available").rmdir()

        assert list(BashItCatalog(bash_it_root).list_components(ComponentKind.COMPLETION)) == []

    def test_enabled_names(self, catalog: BashItCatalog) -> None:
        """Enabled names are read from priority-prefixed markers."""
        assert catalog.enabled_names(ComponentKind.PLUGIN) == {"ruby"}
        assert catalog.enabled_names(ComponentKind.ALIAS) == {"git"}
        assert catalog.enabled_names(ComponentKind.COMPLETION) == set()

    def test_enabled_names_separates_kinds(self, catalog: BashItCatalog) -> None:
        """An enabled git alias does not enable the git plugin."""
        assert "git" in catalog.enabled_names(ComponentKind.ALIAS)
        assert "git" not in catalog.enabled_names(ComponentKind.PLUGIN)

    def test_legacy_markers(self, catalog: BashItCatalog, sample_bash_it: Path) -> None:
        """Markers in the per-kind enabled directory are honoured."""
        legacy = sample_bash_it / "completions" / "enabled"
        legacy.mkdir()
        (legacy / "rake.completion.bash").symlink_to(
            os.path.join("..", "available", "rake.completion.bash")
        )

        assert catalog.enabled_names(ComponentKind.COMPLETION) == {"rake"}
        assert catalog.enabled_markers(ComponentKind.COMPLETION, "rake") == [
            legacy / "rake.completion.bash"
        ]

    def test_enabled_markers(self, catalog: BashItCatalog, sample_bash_it: Path) -> None:
        """enabled_markers returns the marker paths of one component."""
        assert catalog.enabled_markers(ComponentKind.PLUGIN, "ruby") == [
            sample_bash_it / "enabled" / "250---ruby.plugin.bash"
        ]
        assert catalog.enabled_markers(ComponentKind.PLUGIN, "git") == []

    def test_read_priority(self, bash_it_root: Path, make_component) -> None:
        """Declared priorities win over the kind default."""
        make_component(ComponentKind.PLUGIN, "base", priority=260)
        make_component(ComponentKind.PLUGIN, "plain")
        catalog = BashItCatalog(bash_it_root)

        assert catalog.read_priority(ComponentKind.PLUGIN, "base") == 260
        assert catalog.read_priority(ComponentKind.PLUGIN, "plain") == 250
        assert catalog.read_priority(ComponentKind.PLUGIN, "missing") == 250

    def test_read_description_quotes(self, tmp_path: Path) -> None:
        """Both quote styles are accepted."""
        path = tmp_path / "x.plugin.bash"
        path.write_text("cite about-plugin\nabout-plugin \"say 'hi'\"\n")

        assert BashItCatalog.read_description(ComponentKind.PLUGIN, path) == "say 'hi'"

    def test_read_description_missing(self, tmp_path: Path) -> None:
        """A file without an about line has an empty description."""
        path = tmp_path / "x.completion.bash"
        path.write_text("complete -F _x x\n")

        assert BashItCatalog.read_description(ComponentKind.COMPLETION, path) == ""
