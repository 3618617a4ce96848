"""Main interactive event loop for the terminal UI.

Coordinates periodic redraws, key decoding, and mode dispatch.
This loop is intentionally wiring-heavy; effects live in injected callbacks.
"""

from __future__ import annotations

import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..input import handle_key, read_key
from ..state import Action, AppState
from ..terminal import TerminalController

POLL_TIMEOUT_MS = 100


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``.

    Keeping the loop callback-driven isolates drawing and side effects from
    the core event loop and makes behavior easier to unit test.
    """

    render: Callable[[int, int], None]
    execute_action: Callable[[Action], None]


def normalize_enter_key(key: str, skip_next_lf: bool) -> tuple[str | None, bool]:
    """Collapse CR, LF, and CRLF into one ``ENTER`` token.

    Returns ``(key_or_None, skip_next_lf)``; ``None`` means the key is the LF
    half of a CRLF pair and must be dropped.
    """
    if skip_next_lf and key == "ENTER_LF":
        return None, False
    if key == "ENTER_CR":
        return "ENTER", True
    if key == "ENTER_LF":
        return "ENTER", False
    return key, False


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    stdin_fd: int,
    callbacks: RuntimeLoopCallbacks,
    poll_timeout_ms: int = POLL_TIMEOUT_MS,
) -> None:
    """Run the interactive loop until ``state.quit_requested`` is set.

    Each iteration expires the status message, redraws when state is dirty or
    the terminal was resized, then handles at most one key.
    """
    skip_next_lf = False
    last_size: tuple[int, int] | None = None

    with terminal.raw_mode():
        while not state.quit_requested:
            term = shutil.get_terminal_size((80, 24))
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                state.dirty = True

            if state.status_message and time.monotonic() >= state.status_message_until:
                state.status_message = ""
                state.status_message_until = 0.0
                state.dirty = True

            if state.dirty:
                callbacks.render(term.columns, term.lines)
                state.dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=poll_timeout_ms)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue

            normalized, skip_next_lf = normalize_enter_key(key, skip_next_lf)
            if normalized is None:
                continue

            action = handle_key(normalized, state)
            if action is not None:
                callbacks.execute_action(action)
