"""Domain datatypes for catalogued books and location-picker rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class CatalogueEntry:
    """One discovered book file.

    Two entries are equal when they point at the same ``location``; the
    display name does not take part in comparison or hashing.
    """

    display_name: str = field(compare=False)
    location: Path

    @classmethod
    def from_path(cls, path: Path) -> CatalogueEntry:
        """Build an entry whose display name is the file name of ``path``."""
        return cls(display_name=path.name or "Unknown", location=path)


@dataclass(frozen=True)
class DirectoryListEntry:
    """One visible row of the location picker."""

    name: str
    location: Path
    is_directory: bool = True


__all__ = [
    "CatalogueEntry",
    "DirectoryListEntry",
]
