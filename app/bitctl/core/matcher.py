"""Catalog matching for search terms.

Matches search terms against one kind's catalog listing. Partial terms
are plain case-insensitive substrings (no regex); exact terms compare
component names case-sensitively.
"""

from collections.abc import Iterable

from bitctl.models.component import ComponentRecord


class CatalogMatcher:
    """Matches search terms against a snapshot of a kind's catalog.

    Example:
        >>> matcher = CatalogMatcher(records)
        >>> matcher.partial_names("ruby")
        ('chruby', 'chruby-auto', 'ruby')
        >>> matcher.has_exact("git")
        True
    """

    def __init__(self, records: Iterable[ComponentRecord]) -> None:
        self._records = tuple(records)
        self._names = frozenset(record.name for record in self._records)

    @staticmethod
    def matches(record: ComponentRecord, term: str) -> bool:
        """Check if a term is a case-insensitive substring of name or description.

        An empty term never matches.
        """
        if not term:
            return False
        needle = term.casefold()
        return needle in record.name.casefold() or needle in record.description.casefold()

    def partial_names(self, term: str) -> tuple[str, ...]:
        """Return names of every record matching a partial term.

        Args:
            term: Partial search text.

        Returns:
            Matching names in catalog order; empty if nothing matches.
        """
        return tuple(record.name for record in self._records if self.matches(record, term))

    def has_exact(self, name: str) -> bool:
        """Check if ``name`` is exactly a catalog component name."""
        return name in self._names

    def expand(self, exact: Iterable[str], partial: Iterable[str]) -> tuple[list[str], list[str]]:
        """Expand exact and partial terms into component names.

        Args:
            exact: Exact term texts.
            partial: Partial term texts.

        Returns:
            Tuple of (validated exact names, flattened partial names).
        """
        exact_names = [name for name in exact if self.has_exact(name)]
        partial_names: list[str] = []
        for term in partial:
            partial_names.extend(self.partial_names(term))
        return exact_names, partial_names
