"""Search term parsing and classification.

Splits raw command-line tokens into control flags and search terms, and
classifies each search term by its prefix:

- ``--word``: reserved for directives, never search text
- ``-word``: negative term (exclusion)
- ``@word``: exact term (must equal a component name)
- anything else: partial term (substring of name or description)
"""

import logging
from collections.abc import Iterable

from bitctl.models.search import (
    ActionDirective,
    ClassifiedTerms,
    ControlFlag,
    SearchOptions,
    SearchTerm,
    TermType,
)

logger = logging.getLogger(__name__)

_FLAG_DIRECTIVES: dict[ControlFlag, ActionDirective] = {
    ControlFlag.ENABLE: ActionDirective.ENABLE,
    ControlFlag.DISABLE: ActionDirective.DISABLE,
}


def parse_arguments(
    tokens: Iterable[str],
    defaults: SearchOptions | None = None,
) -> tuple[SearchOptions, tuple[str, ...]]:
    """Consume control flags from raw tokens.

    Flags may appear anywhere among the tokens. When both ``--enable`` and
    ``--disable`` are given, the first one encountered wins.

    Args:
        tokens: Raw command-line tokens in order.
        defaults: Options to start from (e.g. color from settings).

    Returns:
        Tuple of (options, remaining search tokens in order).
    """
    base = defaults or SearchOptions()
    action = base.action
    use_color = base.use_color
    refresh = base.refresh
    show_help = base.show_help
    remaining: list[str] = []

    for token in tokens:
        flag = ControlFlag.from_token(token)
        if flag is None:
            remaining.append(token)
        elif flag in _FLAG_DIRECTIVES:
            if action is None:
                action = _FLAG_DIRECTIVES[flag]
            elif action is not _FLAG_DIRECTIVES[flag]:
                logger.debug("Ignoring %s: %s already requested", token, action.value)
        elif flag is ControlFlag.NO_COLOR:
            use_color = False
        elif flag is ControlFlag.REFRESH:
            refresh = True
        elif flag is ControlFlag.HELP:
            show_help = True

    options = SearchOptions(
        action=action,
        use_color=use_color,
        refresh=refresh,
        show_help=show_help,
        animate=base.animate,
        kinds=base.kinds,
    )
    return options, tuple(remaining)


def classify_token(token: str) -> SearchTerm | None:
    """Classify one token by its prefix.

    Args:
        token: Raw search token.

    Returns:
        SearchTerm, or None for ``--`` prefixed tokens, which are discarded.
    """
    if token.startswith("--"):
        return None
    if token.startswith("-"):
        return SearchTerm(TermType.NEGATIVE, token[1:])
    if token.startswith("@"):
        return SearchTerm(TermType.EXACT, token[1:])
    return SearchTerm(TermType.PARTIAL, token)


def classify_terms(tokens: Iterable[str]) -> ClassifiedTerms:
    """Classify tokens into exact, partial and negative buckets.

    Args:
        tokens: Search tokens with control flags already removed.

    Returns:
        ClassifiedTerms with token order preserved within each bucket.
    """
    buckets: dict[TermType, list[str]] = {term_type: [] for term_type in TermType}

    for token in tokens:
        term = classify_token(token)
        if term is None:
            logger.debug("Discarding unrecognized directive %r", token)
            continue
        buckets[term.term_type].append(term.text)

    return ClassifiedTerms(
        exact=tuple(buckets[TermType.EXACT]),
        partial=tuple(buckets[TermType.PARTIAL]),
        negative=tuple(buckets[TermType.NEGATIVE]),
    )
