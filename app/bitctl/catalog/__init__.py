"""Component catalogs for discovering bash-it aliases, plugins and completions.

This module exports the catalog classes and the listing cache.
"""

from bitctl.catalog.base import CatalogProvider
from bitctl.catalog.bash_it import PRIORITY_SEPARATOR, BashItCatalog
from bitctl.catalog.cache import CachedCatalog, ComponentCache

__all__ = [
    "PRIORITY_SEPARATOR",
    "BashItCatalog",
    "CachedCatalog",
    "CatalogProvider",
    "ComponentCache",
]
