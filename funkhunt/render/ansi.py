"""Column arithmetic for styled terminal text.

Escape sequences occupy no columns, tabs advance to the next stop, and
East Asian wide characters take two cells. Every helper here walks text
through ``iter_cells`` so they agree on widths.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Columns taken by ``ch`` when drawn at column ``col``."""
    if ch == "\t":
        return TAB_STOP - col % TAB_STOP
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def iter_cells(text: str) -> Iterator[tuple[str, int]]:
    """Yield ``(chunk, width)`` pairs; escape sequences come back with width 0.

    Tabs are yielded already expanded to spaces.
    """
    col = 0
    pos = 0
    while pos < len(text):
        escape = ANSI_ESCAPE_RE.match(text, pos) if text[pos] == "\x1b" else None
        if escape is not None:
            yield escape.group(0), 0
            pos = escape.end()
            continue
        ch = text[pos]
        width = char_display_width(ch, col)
        yield (" " * width if ch == "\t" else ch), width
        col += width
        pos += 1


def display_width(text: str) -> int:
    return sum(width for _chunk, width in iter_cells(text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Cut ``text`` at ``max_cols`` columns, keeping escapes that precede the cut."""
    if max_cols <= 0:
        return ""
    kept: list[str] = []
    used = 0
    for chunk, width in iter_cells(text):
        if used >= max_cols or used + width > max_cols:
            break
        kept.append(chunk)
        used += width
    return "".join(kept)


def pad_ansi_line(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` columns and right-pad it with spaces."""
    clipped = clip_ansi_line(text, width)
    return clipped + " " * max(0, width - display_width(clipped))


def truncate_left(text: str, max_cols: int, marker: str = "…") -> str:
    """Keep the tail of plain ``text`` (e.g. a long path) within ``max_cols``."""
    if max_cols <= 0:
        return ""
    if display_width(text) <= max_cols:
        return text
    room = max_cols - display_width(marker)
    tail: list[str] = []
    for ch in reversed(text):
        width = char_display_width(ch, 0)
        if width > room:
            break
        tail.append(ch)
        room -= width
    return marker + "".join(reversed(tail))
