"""Search models for term classification and action results.

This module defines the data structures flowing through the search
pipeline: classified search terms, the enable/disable directive, the
per-invocation options and the per-kind result.
"""

from dataclasses import dataclass, field
from enum import Enum

from bitctl.models.component import ComponentKind


class TermType(Enum):
    """How a search term is matched against the catalog.

    Attributes:
        PARTIAL: Case-insensitive substring of name or description.
        EXACT: Token prefixed with ``@``; must equal a component name.
        NEGATIVE: Token prefixed with ``-``; removes names containing it.
    """

    PARTIAL = "partial"
    EXACT = "exact"
    NEGATIVE = "negative"


@dataclass(frozen=True, slots=True)
class SearchTerm:
    """A single classified search token.

    Attributes:
        term_type: Matching mode derived from the token prefix.
        text: Token text with the prefix stripped.
    """

    term_type: TermType
    text: str


@dataclass(frozen=True, slots=True)
class ClassifiedTerms:
    """Search terms split into buckets, preserving token order per bucket."""

    exact: tuple[str, ...] = ()
    partial: tuple[str, ...] = ()
    negative: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        """Check if no term can contribute a match."""
        return not self.exact and not self.partial


class ControlFlag(Enum):
    """Command-line flags consumed before term classification."""

    ENABLE = "enable"
    DISABLE = "disable"
    NO_COLOR = "no-color"
    REFRESH = "refresh"
    HELP = "help"

    @property
    def long_form(self) -> str:
        """Return the ``--flag`` spelling."""
        return f"--{self.value}"

    @property
    def short_form(self) -> str:
        """Return the single-letter ``-f`` spelling."""
        return _SHORT_FLAGS[self]

    @classmethod
    def from_token(cls, token: str) -> "ControlFlag | None":
        """Return the flag spelled by ``token``, or None for search text."""
        for flag in cls:
            if token in (flag.long_form, flag.short_form):
                return flag
        return None


_SHORT_FLAGS: dict[ControlFlag, str] = {
    ControlFlag.ENABLE: "-e",
    ControlFlag.DISABLE: "-d",
    ControlFlag.NO_COLOR: "-c",
    ControlFlag.REFRESH: "-r",
    ControlFlag.HELP: "-h",
}


class ActionDirective(Enum):
    """Action applied to every search match."""

    ENABLE = "enable"
    DISABLE = "disable"

    @classmethod
    def compatible_with(cls, enabled: bool) -> "ActionDirective":
        """Return the only directive that would change a component's state."""
        return cls.DISABLE if enabled else cls.ENABLE


@dataclass(frozen=True, slots=True)
class SearchOptions:
    """Options for one search invocation.

    Built once from settings and command-line flags, then passed to
    every stage of the pipeline.

    Attributes:
        action: Enable/disable directive, or None to only search.
        use_color: Render with theme colors instead of text suffixes.
        refresh: Invalidate the catalog cache before searching.
        show_help: Print help instead of searching.
        animate: Use the animated renderer for state transitions.
        kinds: Kinds to search, in processing order.
    """

    action: ActionDirective | None = None
    use_color: bool = True
    refresh: bool = False
    show_help: bool = False
    animate: bool = False
    kinds: tuple[ComponentKind, ...] = field(default=tuple(ComponentKind))


@dataclass(frozen=True, slots=True)
class ActionOutcome:
    """Result of applying the directive to one matched component.

    Attributes:
        name: Component name.
        was_enabled: Enabled state before the action.
        is_enabled_after: Enabled state after the action.
        applied: Whether the activator changed the component.
        error: Activator error message if the change failed.
    """

    name: str
    was_enabled: bool
    is_enabled_after: bool
    applied: bool = False
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if an attempted change failed."""
        return self.error is not None


@dataclass(frozen=True, slots=True)
class KindResult:
    """Search result for a single component kind.

    Attributes:
        kind: Component kind searched.
        matches: Sorted, deduplicated names surviving negation.
        outcomes: One outcome per match, in match order.
        modified: Whether any component of this kind was changed.
    """

    kind: ComponentKind
    matches: tuple[str, ...] = ()
    outcomes: tuple[ActionOutcome, ...] = ()
    modified: bool = False

    @property
    def has_matches(self) -> bool:
        """Check if any component matched."""
        return bool(self.matches)

    @property
    def failures(self) -> tuple[ActionOutcome, ...]:
        """Return outcomes whose activation failed."""
        return tuple(o for o in self.outcomes if o.failed)
