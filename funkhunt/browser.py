"""Directory browser backing the add-location picker.

Shows one directory level at a time, restricted to visible sub-directories.
Every mutating call leaves ``cursor`` inside ``entries`` (or at 0 when empty).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .catalogue import DirectoryListEntry

logger = logging.getLogger(__name__)


def default_start_location() -> Path:
    """Return the user's home directory, or the filesystem root when unknown."""
    try:
        return Path.home()
    except (RuntimeError, KeyError, OSError):
        return Path(os.path.abspath(os.sep))


def list_subdirectories(directory: Path) -> tuple[list[DirectoryListEntry], Exception | None]:
    """List visible sub-directories of ``directory`` sorted by name.

    Returns ``(entries, scan_error)``. Hidden names (leading ``.``) and
    non-directories are dropped; names compare by code point, so upper-case
    sorts before lower-case.
    """
    entries: list[DirectoryListEntry] = []
    try:
        with os.scandir(directory) as it:
            for child in it:
                name = child.name
                if name.startswith("."):
                    continue
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                if not is_dir:
                    continue
                entries.append(DirectoryListEntry(name=name, location=Path(child.path), is_directory=True))
    except OSError as exc:
        return [], exc

    entries.sort(key=lambda entry: entry.name)
    return entries, None


class DirectoryBrowser:
    """Cursor over the sub-directories of ``current_location``."""

    def __init__(self, start_location: Path | None = None) -> None:
        location = start_location if start_location is not None else default_start_location()
        self.current_location = Path(location).expanduser().absolute()
        self.entries: list[DirectoryListEntry] = []
        self.cursor = 0
        self.reload()

    def reload(self) -> None:
        """Re-read ``current_location`` and reset the cursor to the first row."""
        entries, scan_error = list_subdirectories(self.current_location)
        if scan_error is not None:
            logger.debug("cannot list %s: %s", self.current_location, scan_error)
        self.entries = entries
        self.cursor = 0

    def selected_entry(self) -> DirectoryListEntry | None:
        if 0 <= self.cursor < len(self.entries):
            return self.entries[self.cursor]
        return None

    def move_cursor_up(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def move_cursor_down(self) -> None:
        if self.cursor < max(0, len(self.entries) - 1):
            self.cursor += 1

    def descend_into_selected(self) -> None:
        """Enter the highlighted directory; no-op when nothing is highlighted."""
        entry = self.selected_entry()
        if entry is None or not entry.is_directory:
            return
        self.current_location = entry.location
        self.reload()

    def ascend(self) -> None:
        """Move to the parent directory; no-op at the filesystem root."""
        parent = self.current_location.parent
        if parent == self.current_location:
            return
        self.current_location = parent
        self.reload()


__all__ = [
    "DirectoryBrowser",
    "default_start_location",
    "list_subdirectories",
]
