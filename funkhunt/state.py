"""Application state: catalogue, selection, interaction mode, and picker.

``AppState`` is the single source of truth read by the renderer and mutated by
the key router and by the controller when it folds action results back in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .browser import DirectoryBrowser
from .catalogue import CatalogueEntry

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Top-level interaction context; exactly one is active."""

    BROWSING = "browsing"
    SELECTING_LOCATION = "selecting_location"


@dataclass(frozen=True)
class RequestScan:
    """Ask the controller to scan ``location`` and fold the books in."""

    location: Path


@dataclass(frozen=True)
class RequestOpen:
    """Ask the controller to open ``entry`` in the platform viewer."""

    entry: CatalogueEntry


Action = RequestScan | RequestOpen


@dataclass
class AppState:
    catalogue: list[CatalogueEntry] = field(default_factory=list)
    scanned_locations: list[str] = field(default_factory=list)
    browser: DirectoryBrowser = field(default_factory=DirectoryBrowser)
    selected_index: int = 0
    quit_requested: bool = False
    mode: Mode = Mode.BROWSING
    status_message: str = ""
    status_message_until: float = 0.0
    dirty: bool = True

    def __post_init__(self) -> None:
        self.catalogue = list(self.catalogue)
        self.scanned_locations = [str(location) for location in self.scanned_locations]
        self._clamp_selection()

    def _clamp_selection(self) -> None:
        self.selected_index = max(0, min(self.selected_index, len(self.catalogue) - 1))

    def selected_entry(self) -> CatalogueEntry | None:
        """Return the highlighted book, or ``None`` for an empty catalogue."""
        if 0 <= self.selected_index < len(self.catalogue):
            return self.catalogue[self.selected_index]
        return None

    def move_selection_up(self) -> None:
        if self.selected_index > 0:
            self.selected_index -= 1
            self.dirty = True

    def move_selection_down(self) -> None:
        if self.selected_index < max(0, len(self.catalogue) - 1):
            self.selected_index += 1
            self.dirty = True

    def request_quit(self) -> None:
        self.quit_requested = True

    def open_location_picker(self) -> None:
        """Switch to the picker, refreshed from the filesystem."""
        self.mode = Mode.SELECTING_LOCATION
        self.browser.reload()
        self.dirty = True
        logger.debug("mode -> %s at %s", self.mode.value, self.browser.current_location)

    def close_location_picker(self) -> None:
        self.mode = Mode.BROWSING
        self.dirty = True
        logger.debug("mode -> %s", self.mode.value)

    def replace_catalogue(self, entries: list[CatalogueEntry], location: Path | str) -> None:
        """Discard previous books and locations in favour of one scan result."""
        self.catalogue = list(entries)
        self.scanned_locations = [str(location)]
        self.selected_index = 0
        self.dirty = True

    def extend_catalogue(self, entries: list[CatalogueEntry], location: Path | str) -> None:
        """Append books not already catalogued and record ``location`` once.

        The current selection is kept; it stays valid because the list only
        grows.
        """
        known = set(self.catalogue)
        for entry in entries:
            if entry in known:
                continue
            known.add(entry)
            self.catalogue.append(entry)
        location_text = str(location)
        if location_text not in self.scanned_locations:
            self.scanned_locations.append(location_text)
        self._clamp_selection()
        self.dirty = True

    def apply_scan_result(self, location: Path | str, entries: list[CatalogueEntry]) -> None:
        """Fold a finished ``RequestScan`` into the catalogue (accumulating)."""
        self.extend_catalogue(entries, location)

    def set_status(self, message: str, until: float) -> None:
        self.status_message = message
        self.status_message_until = until
        self.dirty = True


__all__ = [
    "Action",
    "AppState",
    "Mode",
    "RequestOpen",
    "RequestScan",
]
