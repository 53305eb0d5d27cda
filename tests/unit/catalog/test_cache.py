"""Unit tests for ComponentCache and CachedCatalog."""

import json
import shutil
from pathlib import Path

import pytest
from bitctl.catalog.bash_it import BashItCatalog
from bitctl.catalog.cache import CachedCatalog, ComponentCache
from bitctl.core.errors import CatalogError
from bitctl.models.component import ComponentKind, ComponentRecord


@pytest.fixture
def cache(tmp_path: Path) -> ComponentCache:
    """Cache in a temporary directory."""
    return ComponentCache(tmp_path / "cache")


RECORDS = [
    ComponentRecord(ComponentKind.ALIAS, "bundler", "ruby bundler aliases"),
    ComponentRecord(ComponentKind.ALIAS, "git", "common git abbreviations", enabled=True),
]


class TestComponentCache:
    """Tests for ComponentCache class."""

    def test_path_for(self, cache: ComponentCache, tmp_path: Path) -> None:
        """Each kind has its own file."""
        assert cache.path_for(ComponentKind.PLUGIN) == tmp_path / "cache" / "catalog-plugins.json"

    def test_miss(self, cache: ComponentCache) -> None:
        """Loading a missing entry returns None."""
        assert cache.load(ComponentKind.ALIAS, "/src") is None
        assert cache.path_for(ComponentKind.ALIAS).exists() is False

    def test_store_and_load(self, cache: ComponentCache) -> None:
        """Stored names and descriptions load back in order."""
        cache.store(ComponentKind.ALIAS, "/src", RECORDS)

        assert cache.path_for(ComponentKind.ALIAS).exists()
        assert cache.load(ComponentKind.ALIAS, "/src") == [
            ("bundler", "ruby bundler aliases"),
            ("git", "common git abbreviations"),
        ]

    def test_enabled_state_not_stored(self, cache: ComponentCache) -> None:
        """The cache file holds no enabled state."""
        cache.store(ComponentKind.ALIAS, "/src", RECORDS)

        data = json.loads(cache.path_for(ComponentKind.ALIAS).read_text())
        assert data["source"] == "/src"
        assert data["components"][1] == {"name": "git", "description": "common git abbreviations"}

    def test_other_source_is_miss(self, cache: ComponentCache) -> None:
        """A listing built from another root is ignored."""
        cache.store(ComponentKind.ALIAS, "/src", RECORDS)

        assert cache.load(ComponentKind.ALIAS, "/elsewhere") is None

    def test_corrupt_file_is_miss(self, cache: ComponentCache) -> None:
        """An unreadable cache file is treated as a miss."""
        path = cache.path_for(ComponentKind.ALIAS)
        path.parent.mkdir(parents=True)
        path.write_text("{not json")

        assert cache.load(ComponentKind.ALIAS, "/src") is None

    def test_invalidate_one_kind(self, cache: ComponentCache) -> None:
        """invalidate(kind) removes only that kind."""
        cache.store(ComponentKind.ALIAS, "/src", RECORDS)
        cache.store(ComponentKind.PLUGIN, "/src", [])

        cache.invalidate(ComponentKind.ALIAS)

        assert not cache.path_for(ComponentKind.ALIAS).exists()
        assert cache.path_for(ComponentKind.PLUGIN).exists()

    def test_invalidate_all(self, cache: ComponentCache) -> None:
        """invalidate() removes every kind and tolerates missing files."""
        cache.store(ComponentKind.PLUGIN, "/src", [])

        cache.invalidate()

        assert not any(cache.path_for(kind).exists() for kind in ComponentKind)


class TestCachedCatalog:
    """Tests for CachedCatalog decorator."""

    @pytest.fixture
    def cached(self, sample_bash_it: Path, cache: ComponentCache) -> CachedCatalog:
        """Cached catalog over the sample tree."""
        return CachedCatalog(BashItCatalog(sample_bash_it), cache, str(sample_bash_it))

    def test_fills_cache_on_miss(self, cached: CachedCatalog) -> None:
        """The first listing populates the cache."""
        names = [r.name for r in cached.list_components(ComponentKind.COMPLETION)]

        assert names == ["gem", "git", "rake"]
        assert cached.cache.path_for(ComponentKind.COMPLETION).exists()

    def test_serves_from_cache(self, cached: CachedCatalog, sample_bash_it: Path) -> None:
        """Later listings come from the cache, not the filesystem."""
        list(cached.list_components(ComponentKind.COMPLETION))
        (sample_bash_it / "completions" / "available" / "pip.completion.bash").write_text("")

        names = [r.name for r in cached.list_components(ComponentKind.COMPLETION)]

        assert "pip" not in names

    def test_refresh_after_invalidate(self, cached: CachedCatalog, sample_bash_it: Path) -> None:
        """Invalidating the cache picks up new components."""
        list(cached.list_components(ComponentKind.COMPLETION))
        (sample_bash_it / "completions" / "available" / "pip.completion.bash").write_text("")

        cached.cache.invalidate(ComponentKind.COMPLETION)

        assert "pip" in [r.name for r in cached.list_components(ComponentKind.COMPLETION)]

    def test_enabled_state_is_live(self, cached: CachedCatalog, sample_bash_it: Path) -> None:
        """Enabled state is read live even on a cache hit."""
        list(cached.list_components(ComponentKind.PLUGIN))
        (sample_bash_it / "enabled" / "250---ruby.plugin.bash").unlink()

        records = {r.name: r for r in cached.list_components(ComponentKind.PLUGIN)}

        assert records["ruby"].enabled is False
        assert records["ruby"].description.startswith("ruby and rubygems")
        assert cached.enabled_names(ComponentKind.PLUGIN) == set()

    def test_is_available_delegates(self, cached: CachedCatalog) -> None:
        """is_available comes from the wrapped catalog."""
        assert cached.is_available() is True

    def test_missing_root_raises_on_cache_hit(
        self, cached: CachedCatalog, sample_bash_it: Path
    ) -> None:
        """A cached listing is not served once the bash-it root is gone."""
        list(cached.list_components(ComponentKind.ALIAS))
        shutil.rmtree(sample_bash_it)

        with pytest.raises(CatalogError, match="No bash-it installation"):
            list(cached.list_components(ComponentKind.ALIAS))
