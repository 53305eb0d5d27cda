"""bash-it filesystem catalog.

Reads components from a bash-it installation:

- available: ``<root>/<kind>/available/<name>.<suffix>``
- enabled:   ``<root>/enabled/<priority>---<name>.<suffix>`` symlinks

Legacy per-kind ``<root>/<kind>/enabled/`` markers, with or without a
priority prefix, are also recognized.
"""

import logging
import re
from collections.abc import Iterator
from pathlib import Path

from bitctl.catalog.base import CatalogProvider
from bitctl.core.errors import CatalogError
from bitctl.models.component import ComponentKind, ComponentRecord

logger = logging.getLogger(__name__)

# Separator between load priority and file name in enabled markers
PRIORITY_SEPARATOR = "---"

_PRIORITY_PATTERN = re.compile(r"^#\s*BASH_IT_LOAD_PRIORITY:\s*(\d+)\s*$")


def _about_pattern(kind: ComponentKind) -> re.Pattern[str]:
    return re.compile(rf"^\s*{re.escape(kind.about_keyword)}\s+(['\"])(.*)\1")


def strip_priority(marker_name: str) -> str:
    """Remove a ``NNN---`` load priority prefix from a marker file name."""
    prefix, sep, rest = marker_name.partition(PRIORITY_SEPARATOR)
    if sep and prefix.isdigit():
        return rest
    return marker_name


class BashItCatalog(CatalogProvider):
    """Catalog backed by a bash-it installation directory.

    Attributes:
        root: bash-it installation directory.
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        """Return the bash-it installation directory."""
        return self._root

    @property
    def enabled_dir(self) -> Path:
        """Return the global directory holding enabled markers."""
        return self._root / "enabled"

    def available_dir(self, kind: ComponentKind) -> Path:
        """Return the directory holding available components of a kind."""
        return self._root / kind.value / "available"

    def legacy_enabled_dir(self, kind: ComponentKind) -> Path:
        """Return the pre-global per-kind enabled directory."""
        return self._root / kind.value / "enabled"

    def component_path(self, kind: ComponentKind, name: str) -> Path:
        """Return the path of an available component file."""
        return self.available_dir(kind) / f"{name}.{kind.file_suffix}"

    def is_available(self) -> bool:
        """Check if the root looks like a bash-it installation."""
        return any(self.available_dir(kind).is_dir() for kind in ComponentKind)

    def list_components(self, kind: ComponentKind) -> Iterator[ComponentRecord]:
        """Yield every available component of a kind, sorted by name.

        Raises:
            CatalogError: If the bash-it directory is missing or unreadable.
        """
        if not self.is_available():
            msg = f"No bash-it installation found at {self._root}"
            raise CatalogError(msg)

        directory = self.available_dir(kind)
        if not directory.is_dir():
            logger.debug("No %s directory at %s", kind.value, directory)
            return

        suffix = f".{kind.file_suffix}"
        try:
            files = sorted(
                (p for p in directory.iterdir() if p.name.endswith(suffix)),
                key=lambda p: p.name[: -len(suffix)],
            )
        except OSError as e:
            msg = f"Cannot read {directory}: {e}"
            raise CatalogError(msg) from e

        enabled = self.enabled_names(kind)
        for path in files:
            name = path.name[: -len(suffix)]
            if not name:
                continue
            yield ComponentRecord(
                kind=kind,
                name=name,
                description=self.read_description(kind, path),
                enabled=name in enabled,
            )

    def enabled_names(self, kind: ComponentKind) -> set[str]:
        """Return names of enabled components of a kind."""
        suffix = f".{kind.file_suffix}"
        return {
            strip_priority(marker.name)[: -len(suffix)]
            for marker in self._iter_markers(kind)
        }

    def enabled_markers(self, kind: ComponentKind, name: str) -> list[Path]:
        """Return every enabled marker of a component (global and legacy)."""
        file_name = f"{name}.{kind.file_suffix}"
        return [m for m in self._iter_markers(kind) if strip_priority(m.name) == file_name]

    def read_priority(self, kind: ComponentKind, name: str) -> int:
        """Read the load priority declared in a component file.

        Falls back to the kind's default when no
        ``# BASH_IT_LOAD_PRIORITY: N`` header is present.
        """
        path = self.component_path(kind, name)
        try:
            with path.open(encoding="utf-8", errors="replace") as f:
                for line in f:
                    match = _PRIORITY_PATTERN.match(line.strip())
                    if match:
                        return int(match.group(1))
        except OSError as e:
            logger.debug("Cannot read priority from %s: %s", path, e)
        return kind.default_priority

    @staticmethod
    def read_description(kind: ComponentKind, path: Path) -> str:
        """Extract the ``about-<kind> '...'`` description from a component file.

        Returns:
            Description text, or an empty string when none is declared.
        """
        pattern = _about_pattern(kind)
        try:
            with path.open(encoding="utf-8", errors="replace") as f:
                for line in f:
                    match = pattern.match(line)
                    if match:
                        return match.group(2).strip()
        except OSError as e:
            logger.warning("Cannot read %s: %s", path, e)
        return ""

    def _iter_markers(self, kind: ComponentKind) -> Iterator[Path]:
        suffix = f".{kind.file_suffix}"
        for directory in (self.enabled_dir, self.legacy_enabled_dir(kind)):
            if not directory.is_dir():
                continue
            try:
                entries = sorted(directory.iterdir())
            except PermissionError:
                logger.warning("Permission denied scanning directory: %s", directory)
                continue
            for entry in entries:
                if entry.name.endswith(suffix) and len(strip_priority(entry.name)) > len(suffix):
                    yield entry
