"""Viewer launch helper for opening a book with the platform default app.

Spawns the opener without waiting for it to exit.
Returns an error message string instead of raising for UI-friendly handling.
"""

from __future__ import annotations

import subprocess
import sys

from .catalogue import CatalogueEntry


def opener_command(target: str, platform: str | None = None) -> list[str]:
    """Return the argv that opens ``target`` with the default application."""
    platform = sys.platform if platform is None else platform
    if platform == "darwin":
        return ["open", target]
    if platform.startswith("win"):
        # The empty string is the window title consumed by ``start``.
        return ["cmd", "/C", "start", "", target]
    return ["xdg-open", target]


def open_entry(entry: CatalogueEntry) -> str | None:
    cmd = opener_command(str(entry.location))
    try:
        subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except (OSError, ValueError) as exc:
        return f"Failed to open {entry.display_name}: {exc}"
    return None
