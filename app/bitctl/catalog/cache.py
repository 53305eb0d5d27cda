"""Catalog listing cache.

Reading descriptions means opening every component file, so listings
are memoized per kind as JSON files in the cache directory. Only names
and descriptions are cached; enabled state is always read live.
"""

import json
import logging
from collections.abc import Iterator
from pathlib import Path

from bitctl.catalog.base import CatalogProvider
from bitctl.core.errors import CatalogError
from bitctl.core.paths import get_cache_dir
from bitctl.models.component import ComponentKind, ComponentRecord

logger = logging.getLogger(__name__)


class ComponentCache:
    """Manages cached catalog listings, one JSON file per kind.

    Storage location: ~/.cache/bitctl/catalog-<kind>.json

    Each file records the catalog source it was built from; an entry
    for a different source is treated as a miss.
    """

    FILENAME_TEMPLATE = "catalog-{kind}.json"

    def __init__(self, cache_dir: Path | None = None) -> None:
        """Initialize ComponentCache.

        Args:
            cache_dir: Optional override for the cache directory.
                      Default: ~/.cache/bitctl
        """
        self._cache_dir = cache_dir if cache_dir is not None else get_cache_dir()

    def path_for(self, kind: ComponentKind) -> Path:
        """Return the cache file path for a kind."""
        return self._cache_dir / self.FILENAME_TEMPLATE.format(kind=kind.value)

    def load(self, kind: ComponentKind, source: str) -> list[tuple[str, str]] | None:
        """Read a cached listing.

        Args:
            kind: Component kind.
            source: Identifier of the catalog the listing must come from.

        Returns:
            List of (name, description) pairs, or None on a miss.
        """
        path = self.path_for(kind)
        if not path.exists():
            return None

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if data.get("source") != source:
                logger.debug("Cache for %s built from another source, ignoring", kind.value)
                return None
            return [(item["name"], item.get("description", "")) for item in data["components"]]
        except (OSError, json.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Ignoring corrupt cache file %s: %s", path, e)
            return None

    def store(self, kind: ComponentKind, source: str, records: list[ComponentRecord]) -> None:
        """Write a listing to the cache.

        Write failures are logged and otherwise ignored: the cache is an
        optimization only.
        """
        payload = {
            "source": source,
            "components": [{"name": r.name, "description": r.description} for r in records],
        }
        path = self.path_for(kind)
        try:
            self._cache_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            logger.warning("Failed to write cache file %s: %s", path, e)

    def invalidate(self, kind: ComponentKind | None = None) -> None:
        """Remove cached listings.

        Args:
            kind: Kind to invalidate. If None, invalidates every kind.
        """
        kinds = [kind] if kind is not None else list(ComponentKind)
        for item in kinds:
            path = self.path_for(item)
            try:
                path.unlink(missing_ok=True)
                logger.debug("Invalidated %s cache", item.value)
            except OSError as e:
                logger.warning("Failed to remove cache file %s: %s", path, e)


class CachedCatalog(CatalogProvider):
    """Catalog decorator serving listings from a ComponentCache.

    Example:
        >>> catalog = CachedCatalog(BashItCatalog(root), ComponentCache(), source=str(root))
        >>> list(catalog.list_components(ComponentKind.ALIAS))
    """

    def __init__(self, provider: CatalogProvider, cache: ComponentCache, source: str) -> None:
        self._provider = provider
        self._cache = cache
        self._source = source

    @property
    def cache(self) -> ComponentCache:
        """Return the underlying cache."""
        return self._cache

    def is_available(self) -> bool:
        """Delegate to the wrapped catalog."""
        return self._provider.is_available()

    def enabled_names(self, kind: ComponentKind) -> set[str]:
        """Read enabled names live from the wrapped catalog."""
        return self._provider.enabled_names(kind)

    def list_components(self, kind: ComponentKind) -> Iterator[ComponentRecord]:
        """Yield components from the cache, filling it on a miss.

        Raises:
            CatalogError: If the wrapped catalog is no longer available.
        """
        if not self._provider.is_available():
            msg = f"No bash-it installation found at {self._source}"
            raise CatalogError(msg)

        cached = self._cache.load(kind, self._source)
        if cached is None:
            records = list(self._provider.list_components(kind))
            self._cache.store(kind, self._source, records)
            yield from records
            return

        enabled = self._provider.enabled_names(kind)
        for name, description in cached:
            yield ComponentRecord(
                kind=kind,
                name=name,
                description=description,
                enabled=name in enabled,
            )
