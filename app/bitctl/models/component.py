"""Component models for the bash-it catalog.

This module defines the component kinds known to bash-it and the
immutable record describing a single installable component.
"""

from dataclasses import dataclass, field
from enum import Enum

from bitctl.core.errors import InvalidComponentKindError


class ComponentKind(str, Enum):
    """Kind of bash-it component.

    The value is the plural directory name used on disk and in search
    output. Declaration order (aliases, plugins, completions) is the order
    in which search results are processed and printed.
    """

    ALIAS = "aliases"
    PLUGIN = "plugins"
    COMPLETION = "completions"

    @property
    def singular(self) -> str:
        """Return the singular name used in messages (e.g. ``plugin``)."""
        return _SINGULAR[self]

    @property
    def file_suffix(self) -> str:
        """Return the suffix of component files, e.g. ``plugin.bash``.

        bash-it keeps the plural for aliases (``git.aliases.bash``).
        """
        if self is ComponentKind.ALIAS:
            return f"{self.value}.bash"
        return f"{self.singular}.bash"

    @property
    def about_keyword(self) -> str:
        """Return the metadata keyword holding the description (``about-plugin``)."""
        return f"about-{self.singular}"

    @property
    def default_priority(self) -> int:
        """Return the default load priority for newly enabled components."""
        return _DEFAULT_PRIORITY[self]

    @classmethod
    def parse(cls, text: str) -> "ComponentKind":
        """Resolve a kind from its singular or plural name.

        Args:
            text: Kind name such as ``plugin``, ``plugins`` or ``ALIASES``.

        Returns:
            Matching ComponentKind.

        Raises:
            InvalidComponentKindError: If the name is not a known kind.
        """
        key = text.strip().lower()
        for kind in cls:
            if key in (kind.value, kind.singular):
                return kind
        valid = ", ".join(kind.value for kind in cls)
        msg = f"Unknown component kind '{text}' (expected one of: {valid})"
        raise InvalidComponentKindError(msg)


_SINGULAR: dict[ComponentKind, str] = {
    ComponentKind.ALIAS: "alias",
    ComponentKind.PLUGIN: "plugin",
    ComponentKind.COMPLETION: "completion",
}

_DEFAULT_PRIORITY: dict[ComponentKind, int] = {
    ComponentKind.ALIAS: 150,
    ComponentKind.PLUGIN: 250,
    ComponentKind.COMPLETION: 350,
}


@dataclass(frozen=True, slots=True)
class ComponentRecord:
    """A single component discovered in the bash-it catalog.

    Attributes:
        kind: Kind of component.
        name: Component name, unique within its kind (e.g. ``git``).
        description: One-line description from the component's ``about-*`` line.
        enabled: Whether the component is currently enabled.
    """

    kind: ComponentKind
    name: str
    description: str = field(default="")
    enabled: bool = field(default=False)

    def __post_init__(self) -> None:
        """Validate component data after initialization."""
        if not self.name:
            msg = "Component name cannot be empty"
            raise ValueError(msg)
