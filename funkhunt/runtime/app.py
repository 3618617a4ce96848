"""Runtime composition layer for funkhunt.

Builds initial state, executes router actions, and starts the loop.
This is the highest-level module where scanning, launching, and drawing meet.
"""

from __future__ import annotations

import logging
import os
import sys
import termios
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import partial
from pathlib import Path

from ..browser import DirectoryBrowser
from ..catalogue import CatalogueEntry, DEFAULT_EXTENSIONS, scan_catalogue
from ..launcher import open_entry
from ..render import render_frame
from ..state import Action, AppState, RequestOpen, RequestScan
from ..terminal import TerminalController
from ..ui_theme import resolve_theme
from .loop import RuntimeLoopCallbacks, run_main_loop

logger = logging.getLogger(__name__)

STATUS_MESSAGE_SECONDS = 3.0


@dataclass(frozen=True)
class ActionDeps:
    """Collaborators that carry out router actions."""

    scan: Callable[[Path, Iterable[str] | None], list[CatalogueEntry]] = scan_catalogue
    launch: Callable[[CatalogueEntry], str | None] = open_entry
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    clock: Callable[[], float] = time.monotonic


def execute_action(state: AppState, action: Action, deps: ActionDeps) -> None:
    """Perform ``action`` and fold its outcome back into ``state``.

    Launcher failures are reported through the status line and never raised.
    """
    if isinstance(action, RequestScan):
        logger.info("scan requested for %s", action.location)
        entries = deps.scan(action.location, deps.extensions)
        before = len(state.catalogue)
        state.apply_scan_result(action.location, entries)
        added = len(state.catalogue) - before
        state.set_status(
            f"Added {added} book(s) from {action.location}",
            deps.clock() + STATUS_MESSAGE_SECONDS,
        )
        return

    if isinstance(action, RequestOpen):
        error = deps.launch(action.entry)
        if error is None:
            logger.info("opened %s", action.entry.location)
            return
        logger.warning("%s", error)
        state.set_status(error, deps.clock() + STATUS_MESSAGE_SECONDS)


def build_state(
    catalogue: list[CatalogueEntry],
    scanned_locations: Iterable[Path | str],
    browser_start: Path | None = None,
) -> AppState:
    return AppState(
        catalogue=list(catalogue),
        scanned_locations=[str(location) for location in scanned_locations],
        browser=DirectoryBrowser(browser_start),
    )


def run_app(
    catalogue: list[CatalogueEntry],
    scanned_locations: Iterable[Path | str],
    *,
    theme_name: str | None = None,
    no_color: bool = False,
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
    browser_start: Path | None = None,
) -> AppState:
    """Run the interactive library until the user quits; returns final state.

    Raises ``SystemExit`` when stdin is not a usable terminal.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    try:
        terminal = TerminalController(stdin_fd, stdout_fd)
    except termios.error as exc:
        raise SystemExit(f"funkhunt needs an interactive terminal: {exc}") from exc

    state = build_state(catalogue, scanned_locations, browser_start)
    theme = resolve_theme(theme_name, no_color=no_color or bool(os.environ.get("NO_COLOR")))
    deps = ActionDeps(scan=scan_catalogue, launch=open_entry, extensions=tuple(extensions))
    callbacks = RuntimeLoopCallbacks(
        render=lambda columns, lines: render_frame(state, columns, lines, theme),
        execute_action=partial(execute_action, state, deps=deps),
    )
    logger.info("session started with %d book(s)", len(state.catalogue))
    run_main_loop(state, terminal, stdin_fd, callbacks)
    logger.info("session ended")
    return state
