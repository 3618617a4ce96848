"""Human-readable details block for the selected book."""

from __future__ import annotations

from .types import CatalogueEntry

METADATA_ERROR_TEXT = "Error reading metadata"


def describe(entry: CatalogueEntry) -> str:
    """Return title, path, and size in KB, or a fixed sentinel on stat failure."""
    try:
        size_bytes = entry.location.stat().st_size
    except OSError:
        return METADATA_ERROR_TEXT
    return f"Title: {entry.display_name}\n\nPath: {entry.location}\n\nSize: {size_bytes // 1024} KB"


__all__ = ["METADATA_ERROR_TEXT", "describe"]
