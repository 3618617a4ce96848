"""Frame rendering for the library view and the location picker.

``build_frame_lines`` is a pure function of ``AppState`` and screen size;
``render_frame`` writes the result to the terminal in one call.
"""

from __future__ import annotations

import os
import sys
import textwrap

from ..catalogue import describe
from ..state import AppState, Mode
from ..ui_theme import UITheme
from .ansi import clip_ansi_line, display_width, pad_ansi_line, truncate_left
from .help import BROWSING_KEY_HINTS, PICKER_KEY_HINTS, key_hint_line

APP_TITLE = "FunkHunt"
DIVIDER = "│"
EMPTY_CATALOGUE_TEXT = "No books found. Press 'a' to add a folder."
NO_SELECTION_TEXT = "Select a book to view details\n\nor press 'a' to add a folder"
EMPTY_PICKER_TEXT = "(empty)"


def scanned_locations_summary(scanned_locations: list[str]) -> str:
    if not scanned_locations:
        return "No folders added"
    if len(scanned_locations) == 1:
        return scanned_locations[0]
    return f"{len(scanned_locations)} folders"


def header_text(state: AppState) -> str:
    return f"{APP_TITLE} | Books: {len(state.catalogue)} | {scanned_locations_summary(state.scanned_locations)}"


def list_window_start(selected: int, total: int, rows: int) -> int:
    """Return the first visible row index so ``selected`` stays on screen."""
    if rows <= 0 or total <= rows:
        return 0
    start = selected - rows // 2
    return max(0, min(start, total - rows))


def build_status_line(left_text: str, width: int, right_text: str = "") -> str:
    """Fit ``left_text`` and a right-aligned ``right_text`` into ``width`` columns."""
    usable = max(1, width - 1)
    right_width = display_width(right_text)
    if usable <= right_width:
        return clip_ansi_line(right_text, usable)
    left_limit = max(0, usable - right_width - 1)
    left = clip_ansi_line(left_text, left_limit)
    gap = " " * (usable - display_width(left) - right_width)
    return f"{left}{gap}{right_text}"


def _wrap_details(text: str, width: int) -> list[str]:
    lines: list[str] = []
    for paragraph in text.split("\n"):
        if not paragraph:
            lines.append("")
            continue
        lines.extend(textwrap.wrap(paragraph, width=max(1, width), break_long_words=True) or [""])
    return lines


def _styled(text: str, style: str, theme: UITheme) -> str:
    if not style:
        return text
    return f"{style}{text}{theme.reset}"


def _styled_cell(text: str, style: str, width: int, theme: UITheme) -> str:
    """Clip plain ``text`` to ``width`` before styling so the reset survives, then pad."""
    return pad_ansi_line(_styled(clip_ansi_line(text, width), style, theme), width)


def _browsing_lines(state: AppState, width: int, height: int, theme: UITheme) -> list[str]:
    body_rows = max(1, height - 3)
    left_width = max(10, (width - 1) // 2)
    right_width = max(1, width - left_width - 1)
    divider = _styled(DIVIDER, theme.border, theme)

    list_rows: list[str] = []
    if not state.catalogue:
        list_rows.append(_styled_cell(EMPTY_CATALOGUE_TEXT, theme.hint, left_width, theme))
    else:
        start = list_window_start(state.selected_index, len(state.catalogue), body_rows)
        for idx in range(start, min(len(state.catalogue), start + body_rows)):
            name = state.catalogue[idx].display_name
            if idx == state.selected_index:
                list_rows.append(_styled_cell(f"> {name}", theme.list_selected, left_width, theme))
            else:
                list_rows.append(_styled_cell(f"  {name}", theme.list_item, left_width, theme))

    entry = state.selected_entry()
    details_text = describe(entry) if entry is not None else NO_SELECTION_TEXT
    detail_rows = [
        _styled(clip_ansi_line(line, right_width - 1), theme.details, theme)
        for line in _wrap_details(details_text, right_width - 1)
    ]

    lines = [
        _styled_cell(header_text(state), theme.header, width, theme),
        _styled_cell(f"Book List ({len(state.catalogue)})", theme.panel_title, left_width, theme)
        + divider
        + " "
        + _styled("Book Details", theme.panel_title, theme),
    ]
    for row in range(body_rows):
        left = list_rows[row] if row < len(list_rows) else " " * left_width
        right = detail_rows[row] if row < len(detail_rows) else ""
        lines.append(left + divider + " " + right)
    status = _styled(state.status_message, theme.status, theme) if state.status_message else ""
    lines.append(build_status_line(key_hint_line(BROWSING_KEY_HINTS, theme), width, status))
    return lines


def _picker_lines(state: AppState, width: int, height: int, theme: UITheme) -> list[str]:
    browser = state.browser
    body_rows = max(1, height - 4)
    location = truncate_left(str(browser.current_location), max(1, width - 12))

    lines = [
        _styled_cell(" FILE BROWSER ", theme.header + theme.reverse, width, theme),
        _styled_cell(f"Location: {location}", theme.picker_path, width, theme),
        _styled_cell("Directories", theme.panel_title, width, theme),
    ]
    if not browser.entries:
        lines.append(_styled(clip_ansi_line(EMPTY_PICKER_TEXT, width), theme.hint, theme))
    else:
        start = list_window_start(browser.cursor, len(browser.entries), body_rows)
        visible = browser.entries[start : start + body_rows]
        for offset, entry in enumerate(visible):
            text = f"{entry.name}/" if entry.is_directory else entry.name
            if start + offset == browser.cursor:
                lines.append(_styled_cell(f"> {text}", theme.picker_selected, width, theme))
            else:
                lines.append(_styled(clip_ansi_line(f"  {text}", width), theme.picker_dir, theme))
    del lines[height - 1 :]
    lines.extend("" for _ in range(height - 1 - len(lines)))
    lines.append(build_status_line(key_hint_line(PICKER_KEY_HINTS, theme), width))
    return lines


def build_frame_lines(state: AppState, width: int, height: int, theme: UITheme) -> list[str]:
    """Return one styled string per screen row for the active mode."""
    width = max(20, width)
    height = max(4, height)
    if state.mode is Mode.SELECTING_LOCATION:
        return _picker_lines(state, width, height, theme)
    return _browsing_lines(state, width, height, theme)


def render_frame(state: AppState, width: int, height: int, theme: UITheme) -> None:
    out: list[str] = ["\033[H\033[J"]
    lines = build_frame_lines(state, width, height, theme)
    for idx, line in enumerate(lines):
        out.append(line)
        if "\033" in line:
            out.append("\033[0m")
        if idx < len(lines) - 1:
            out.append("\r\n")
    os.write(sys.stdout.fileno(), "".join(out).encode("utf-8", errors="replace"))


__all__ = [
    "APP_TITLE",
    "DIVIDER",
    "EMPTY_CATALOGUE_TEXT",
    "EMPTY_PICKER_TEXT",
    "NO_SELECTION_TEXT",
    "build_frame_lines",
    "build_status_line",
    "header_text",
    "list_window_start",
    "render_frame",
    "scanned_locations_summary",
]
