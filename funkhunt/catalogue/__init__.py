"""Catalogue domain: book entries, recursive scanning, and metadata text.

This package contains non-UI primitives only:
- book and picker-row datatypes
- recursive extension-filtered scanning
- the details block shown for the selected book
"""

from __future__ import annotations

from .metadata import METADATA_ERROR_TEXT, describe
from .scanner import DEFAULT_EXTENSIONS, normalize_extensions, scan_catalogue, scan_locations
from .types import CatalogueEntry, DirectoryListEntry

__all__ = [
    "CatalogueEntry",
    "DirectoryListEntry",
    "DEFAULT_EXTENSIONS",
    "normalize_extensions",
    "scan_catalogue",
    "scan_locations",
    "METADATA_ERROR_TEXT",
    "describe",
]
