"""Search pipeline for bash-it components.

Pure business logic turning search tokens into per-kind results:
classify, match, aggregate (dedupe and sort), filter negations, then
apply the requested directive. Each kind is processed start-to-finish
before the next, in declaration order (aliases, plugins, completions).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from bitctl.core.matcher import CatalogMatcher
from bitctl.core.terms import classify_terms
from bitctl.models.component import ComponentKind
from bitctl.models.search import ClassifiedTerms, KindResult, SearchOptions

if TYPE_CHECKING:
    from bitctl.catalog.base import CatalogProvider
    from bitctl.catalog.cache import ComponentCache
    from bitctl.core.applier import ActionApplier

logger = logging.getLogger(__name__)


def aggregate_matches(exact_names: Iterable[str], partial_names: Iterable[str]) -> tuple[str, ...]:
    """Merge exact and partial matches into a sorted, duplicate-free tuple.

    Args:
        exact_names: Names validated by exact terms.
        partial_names: Names produced by partial terms.

    Returns:
        Each name once, in ascending string order.
    """
    return tuple(sorted({*exact_names, *partial_names}))


def filter_negations(matches: Iterable[str], negatives: Iterable[str]) -> tuple[str, ...]:
    """Drop every name containing any negative term.

    Containment is case-sensitive and checks the name only. Empty
    negative terms are ignored. Order of the input is preserved.

    Args:
        matches: Aggregated names.
        negatives: Negative term texts.

    Returns:
        Surviving names; always a subset of ``matches``.
    """
    excluded = [term for term in negatives if term]
    if not excluded:
        return tuple(matches)
    return tuple(name for name in matches if not any(term in name for term in excluded))


class SearchEngine:
    """Runs the search pipeline over a catalog.

    Example:
        >>> engine = SearchEngine(catalog, ActionApplier(activator, cache), cache)
        >>> for result in engine.run(["ruby", "-chruby"], SearchOptions()):
        ...     print(result.kind.value, result.matches)
    """

    def __init__(
        self,
        catalog: CatalogProvider,
        applier: ActionApplier,
        cache: ComponentCache | None = None,
    ) -> None:
        self._catalog = catalog
        self._applier = applier
        self._cache = cache

    def search_kind(
        self,
        kind: ComponentKind,
        terms: ClassifiedTerms,
        options: SearchOptions,
    ) -> KindResult:
        """Run the pipeline for a single kind.

        Args:
            kind: Component kind to search.
            terms: Classified search terms.
            options: Invocation options (directive in particular).

        Returns:
            KindResult for the kind; ``matches`` is empty when nothing matched.

        Raises:
            InvalidComponentKindError: If ``kind`` is not a known kind.
            CatalogError: If the catalog cannot be read.
        """
        if not isinstance(kind, ComponentKind):
            kind = ComponentKind.parse(str(kind))
        if terms.is_empty:
            return KindResult(kind=kind)

        records = list(self._catalog.list_components(kind))
        matcher = CatalogMatcher(records)

        exact_names, partial_names = matcher.expand(terms.exact, terms.partial)
        matches = filter_negations(aggregate_matches(exact_names, partial_names), terms.negative)
        logger.debug("%s: %d match(es) for %s", kind.value, len(matches), terms)

        if not matches:
            return KindResult(kind=kind)

        enabled = {record.name: record.enabled for record in records}
        return self._applier.apply(kind, matches, options.action, enabled.__getitem__)

    def run(self, tokens: Iterable[str], options: SearchOptions) -> Iterator[KindResult]:
        """Search every kind in ``options.kinds`` and yield results as they complete.

        Results are yielded lazily so the caller can render one kind before
        the next is processed.

        Args:
            tokens: Search tokens with control flags already removed.
            options: Invocation options.

        Yields:
            KindResult per kind, including kinds without matches.
        """
        if options.refresh and self._cache is not None:
            logger.debug("Refreshing component cache")
            self._cache.invalidate()

        terms = classify_terms(tokens)
        for kind in options.kinds:
            yield self.search_kind(kind, terms, options)
