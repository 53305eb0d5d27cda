"""bash-it filesystem activator.

Enables a component by creating a relative symlink in ``<root>/enabled``
named ``<priority>---<file>``, and disables it by removing every marker
of that component (including legacy per-kind markers).
"""

import logging
import os

from bitctl.activators.base import ActivationResult, Activator
from bitctl.catalog.bash_it import PRIORITY_SEPARATOR, BashItCatalog
from bitctl.models.component import ComponentKind
from bitctl.models.search import ActionDirective

logger = logging.getLogger(__name__)


class BashItActivator(Activator):
    """Activator for components of a bash-it installation.

    Attributes:
        dry_run: If True, report changes without touching the filesystem.
    """

    def __init__(self, catalog: BashItCatalog, dry_run: bool = False) -> None:
        """Initialize the activator.

        Args:
            catalog: Catalog of the bash-it installation to modify.
            dry_run: If True, only simulate actions without executing them.
        """
        super().__init__(dry_run)
        self._catalog = catalog

    def enable(self, kind: ComponentKind, name: str) -> ActivationResult:
        """Enable a component by symlinking it into the enabled directory."""
        directive = ActionDirective.ENABLE
        source = self._catalog.component_path(kind, name)

        if not source.is_file():
            return ActivationResult(
                kind=kind,
                name=name,
                directive=directive,
                success=False,
                error=f"{name} does not appear to be an available bash-it {kind.singular}",
            )

        if self._catalog.enabled_markers(kind, name):
            return ActivationResult(
                kind=kind,
                name=name,
                directive=directive,
                success=True,
                message=f"{kind.singular} {name} is already enabled",
            )

        priority = self._catalog.read_priority(kind, name)
        marker = self._catalog.enabled_dir / f"{priority}{PRIORITY_SEPARATOR}{source.name}"
        target = os.path.join("..", kind.value, "available", source.name)

        if self._dry_run:
            logger.info("Dry-run: would link %s -> %s", marker, target)
            return ActivationResult(
                kind=kind,
                name=name,
                directive=directive,
                success=True,
                dry_run=True,
            )

        try:
            marker.parent.mkdir(parents=True, exist_ok=True)
            marker.symlink_to(target)
        except OSError as e:
            logger.warning("Failed to enable %s %s: %s", kind.singular, name, e)
            return ActivationResult(
                kind=kind,
                name=name,
                directive=directive,
                success=False,
                error=str(e),
            )

        logger.debug("Enabled %s %s via %s", kind.singular, name, marker)
        return ActivationResult(
            kind=kind,
            name=name,
            directive=directive,
            success=True,
            changed=True,
            message=f"enabled {kind.singular}: {name}",
        )

    def disable(self, kind: ComponentKind, name: str) -> ActivationResult:
        """Disable a component by removing all of its enabled markers."""
        directive = ActionDirective.DISABLE
        markers = self._catalog.enabled_markers(kind, name)

        if not markers:
            return ActivationResult(
                kind=kind,
                name=name,
                directive=directive,
                success=True,
                message=f"{kind.singular} {name} is already disabled",
            )

        if self._dry_run:
            logger.info("Dry-run: would remove %s", ", ".join(str(m) for m in markers))
            return ActivationResult(
                kind=kind,
                name=name,
                directive=directive,
                success=True,
                dry_run=True,
            )

        try:
            for marker in markers:
                marker.unlink()
        except OSError as e:
            logger.warning("Failed to disable %s %s: %s", kind.singular, name, e)
            return ActivationResult(
                kind=kind,
                name=name,
                directive=directive,
                success=False,
                error=str(e),
            )

        logger.debug("Disabled %s %s", kind.singular, name)
        return ActivationResult(
            kind=kind,
            name=name,
            directive=directive,
            success=True,
            changed=True,
            message=f"disabled {kind.singular}: {name}",
        )
