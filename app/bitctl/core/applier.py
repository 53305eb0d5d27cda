"""Applies an enable/disable directive to search matches.

Only components whose state would actually flip are touched: enabling
an enabled component or disabling a disabled one is a no-op. When any
component of a kind changes, that kind's cached listing is invalidated.
"""

import logging
from collections.abc import Callable, Sequence

from bitctl.activators.base import Activator
from bitctl.catalog.cache import ComponentCache
from bitctl.models.component import ComponentKind
from bitctl.models.search import ActionDirective, ActionOutcome, KindResult

logger = logging.getLogger(__name__)


class ActionApplier:
    """Runs the activator over one kind's matches and tracks changes.

    Attributes:
        activator: Activator used to change component state.
        cache: Listing cache to invalidate after a change, if any.
    """

    def __init__(self, activator: Activator, cache: ComponentCache | None = None) -> None:
        self._activator = activator
        self._cache = cache

    def apply(
        self,
        kind: ComponentKind,
        matches: Sequence[str],
        directive: ActionDirective | None,
        is_enabled: Callable[[str], bool],
    ) -> KindResult:
        """Apply a directive to every match of a kind.

        Activator failures do not stop the run: the failing component keeps
        its previous state in the outcome, carries the error message, and
        processing moves on to the next match.

        Args:
            kind: Kind of the matched components.
            matches: Sorted, deduplicated component names.
            directive: Requested action, or None to only report state.
            is_enabled: Returns the current enabled state of a component.

        Returns:
            KindResult with one outcome per match.
        """
        outcomes: list[ActionOutcome] = []
        modified = False

        for name in matches:
            was_enabled = is_enabled(name)

            if directive is None or ActionDirective.compatible_with(was_enabled) is not directive:
                outcomes.append(
                    ActionOutcome(name=name, was_enabled=was_enabled, is_enabled_after=was_enabled)
                )
                continue

            result = self._activator.apply(kind, name, directive)
            if result.failed:
                logger.warning(
                    "Failed to %s %s %s: %s",
                    directive.value,
                    kind.singular,
                    name,
                    result.error,
                )
                outcomes.append(
                    ActionOutcome(
                        name=name,
                        was_enabled=was_enabled,
                        is_enabled_after=was_enabled,
                        error=result.error or "unknown error",
                    )
                )
                continue

            modified = True
            outcomes.append(
                ActionOutcome(
                    name=name,
                    was_enabled=was_enabled,
                    is_enabled_after=not was_enabled,
                    applied=True,
                )
            )

        if modified and self._cache is not None:
            self._cache.invalidate(kind)

        return KindResult(
            kind=kind,
            matches=tuple(matches),
            outcomes=tuple(outcomes),
            modified=modified,
        )
