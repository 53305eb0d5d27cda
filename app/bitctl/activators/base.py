"""Abstract base class for component activators.

This module defines the Activator interface that enables and disables
individual components, and the result type it reports.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from bitctl.models.component import ComponentKind
from bitctl.models.search import ActionDirective


@dataclass(frozen=True, slots=True)
class ActivationResult:
    """Result of enabling or disabling one component.

    Attributes:
        kind: Kind of the component.
        name: Component name.
        directive: Action that was requested.
        success: Whether the component is now in the requested state.
        changed: Whether anything on disk was modified.
        message: Optional success message or additional information.
        error: Optional error message if the action failed.
        dry_run: Whether this was a dry-run (nothing written).
    """

    kind: ComponentKind
    name: str
    directive: ActionDirective
    success: bool
    changed: bool = False
    message: str | None = None
    error: str | None = None
    dry_run: bool = False

    @property
    def failed(self) -> bool:
        """Check if the action failed."""
        return not self.success


class Activator(ABC):
    """Abstract base class for all component activators.

    Activators physically enable or disable one component. Both
    operations are idempotent: enabling an enabled component or disabling
    a disabled one succeeds without changing anything.

    Attributes:
        dry_run: If True, only report what would change.

    Example:
        >>> activator = BashItActivator(catalog, dry_run=True)
        >>> result = activator.apply(ComponentKind.PLUGIN, "git", ActionDirective.ENABLE)
        >>> result.success
        True
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the activator.

        Args:
            dry_run: If True, only simulate actions without executing them.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Check if activator is in dry-run mode."""
        return self._dry_run

    @abstractmethod
    def enable(self, kind: ComponentKind, name: str) -> ActivationResult:
        """Enable a component.

        Args:
            kind: Kind of the component.
            name: Component name.

        Returns:
            ActivationResult describing the outcome.
        """

    @abstractmethod
    def disable(self, kind: ComponentKind, name: str) -> ActivationResult:
        """Disable a component.

        Args:
            kind: Kind of the component.
            name: Component name.

        Returns:
            ActivationResult describing the outcome.
        """

    def apply(
        self,
        kind: ComponentKind,
        name: str,
        directive: ActionDirective,
    ) -> ActivationResult:
        """Dispatch a directive to enable() or disable().

        Args:
            kind: Kind of the component.
            name: Component name.
            directive: Action to perform.

        Returns:
            ActivationResult describing the outcome.
        """
        handlers: dict[ActionDirective, Callable[[ComponentKind, str], ActivationResult]] = {
            ActionDirective.ENABLE: self.enable,
            ActionDirective.DISABLE: self.disable,
        }
        return handlers[directive](kind, name)
