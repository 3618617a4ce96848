"""Key-binding help text for the footer rows and the ``--help`` epilog.

Stores one hint row per interaction mode. Helpers here are presentation-only
and side-effect free.
"""

from __future__ import annotations

from ..ui_theme import UITheme

BROWSING_KEY_HINTS: tuple[tuple[str, str], ...] = (
    ("q", "quit"),
    ("↑↓", "navigate"),
    ("Enter", "open book"),
    ("a", "add folder"),
)

PICKER_KEY_HINTS: tuple[tuple[str, str], ...] = (
    ("↑↓", "move"),
    ("→/l", "enter"),
    ("←/h", "up"),
    ("Enter", "add this folder"),
    ("Esc", "cancel"),
)

CLI_EPILOG = """\
Examples:
  funkhunt                    start with an empty library
  funkhunt ~/Books            start with a specific folder
  funkhunt ~/Books ~/Papers   scan several folders

In-app controls:
  a          add folder from within the app
  Up/Down    navigate book list (j/k also work)
  Enter      open selected book
  q          quit application

Folder picker:
  Up/Down    move   Right/l enter folder   Left/h parent folder
  Enter      add the current folder   Esc cancel
"""


def key_hint_line(hints: tuple[tuple[str, str], ...], theme: UITheme) -> str:
    """Format ``(key, label)`` pairs as one styled hint row."""
    parts = [f"{theme.help_key}{key}{theme.reset}: {label}" for key, label in hints]
    return " | ".join(parts)


__all__ = [
    "BROWSING_KEY_HINTS",
    "PICKER_KEY_HINTS",
    "CLI_EPILOG",
    "key_hint_line",
]
