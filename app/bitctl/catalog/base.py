"""Abstract base class for component catalogs.

This module defines the CatalogProvider interface that the search
engine reads component listings and enabled state from.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from bitctl.models.component import ComponentKind, ComponentRecord


class CatalogProvider(ABC):
    """Abstract base class for all component catalogs.

    A catalog knows every installable component of each kind, with its
    one-line description, and whether it is currently enabled.

    Example:
        >>> catalog = BashItCatalog(Path("~/.bash_it").expanduser())
        >>> if catalog.is_available():
        ...     for record in catalog.list_components(ComponentKind.PLUGIN):
        ...         print(f"{record.name}: {record.enabled}")
    """

    @abstractmethod
    def list_components(self, kind: ComponentKind) -> Iterator[ComponentRecord]:
        """Yield every component of a kind, sorted by name.

        Yields:
            ComponentRecord for each available component.

        Raises:
            CatalogError: If the catalog cannot be read.
        """

    @abstractmethod
    def enabled_names(self, kind: ComponentKind) -> set[str]:
        """Return names of the currently enabled components of a kind."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the catalog can be read.

        Returns:
            True if the catalog exists, False otherwise.
        """
