"""Recursive filesystem scanning for catalogue-eligible book files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .types import CatalogueEntry

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = ("epub",)


def normalize_extensions(extensions: Iterable[str] | None) -> frozenset[str]:
    """Lower-case extensions and strip leading dots; empty input means defaults."""
    normalized = {
        str(ext).strip().lstrip(".").lower()
        for ext in (extensions or ())
    }
    normalized.discard("")
    return frozenset(normalized) if normalized else frozenset(DEFAULT_EXTENSIONS)


def has_catalogue_extension(path: Path, extensions: frozenset[str]) -> bool:
    """Return whether ``path`` ends in one of ``extensions`` (case-insensitive)."""
    suffix = path.suffix
    if not suffix:
        return False
    return suffix[1:].lower() in extensions


def _walk_files(directory: Path) -> Iterable[Path]:
    """Yield regular files below ``directory`` in name order.

    Unreadable dirs are skipped. Symlinked directories are not followed so
    link cycles cannot recurse; symlinks to regular files are yielded, while
    dangling links, FIFOs and sockets are not.
    """
    try:
        with os.scandir(directory) as it:
            children = sorted(it, key=lambda child: child.name)
    except OSError as exc:
        logger.debug("skipping unreadable directory %s: %s", directory, exc)
        return

    for child in children:
        try:
            is_dir = child.is_dir(follow_symlinks=False)
            is_file = not is_dir and child.is_file()
        except OSError:
            continue
        if is_dir:
            yield from _walk_files(Path(child.path))
        elif is_file:
            yield Path(child.path)


def scan_catalogue(location: Path | str, extensions: Iterable[str] | None = None) -> list[CatalogueEntry]:
    """Recursively collect book files below ``location``.

    Returns an empty list when ``location`` is missing or is not a directory.
    Never raises: unreadable sub-directories are skipped.
    """
    root = Path(location).expanduser()
    wanted = normalize_extensions(extensions)
    try:
        if not root.is_dir():
            return []
    except OSError:
        return []

    entries = [
        CatalogueEntry.from_path(path)
        for path in _walk_files(root)
        if has_catalogue_extension(path, wanted)
    ]
    logger.info("scanned %s: %d book(s)", root, len(entries))
    return entries


def scan_locations(
    locations: Iterable[Path | str],
    extensions: Iterable[str] | None = None,
) -> list[CatalogueEntry]:
    """Scan several roots and concatenate their results in argument order."""
    catalogue: list[CatalogueEntry] = []
    for location in locations:
        catalogue.extend(scan_catalogue(location, extensions))
    return catalogue


__all__ = [
    "DEFAULT_EXTENSIONS",
    "normalize_extensions",
    "has_catalogue_extension",
    "scan_catalogue",
    "scan_locations",
]
