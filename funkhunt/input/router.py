"""Keyboard dispatch for the browsing and location-picker modes.

``handle_key`` is the single entry point: it branches on ``state.mode`` first,
mutates state for local navigation, and returns at most one ``Action`` for
effects the controller must perform (opening a book, scanning a folder).
Keys without a binding in the active mode are ignored.
"""

from __future__ import annotations

from collections.abc import Callable

from ..state import Action, AppState, Mode, RequestOpen, RequestScan
from .key_registry import KeyComboBinding, KeyComboRegistry

QUIT_KEYS: tuple[str, ...] = ("q", "CTRL_C")
UP_KEYS: tuple[str, ...] = ("UP", "k")
DOWN_KEYS: tuple[str, ...] = ("DOWN", "j")
CONFIRM_KEYS: tuple[str, ...] = ("ENTER",)
ADD_LOCATION_KEYS: tuple[str, ...] = ("a",)
DESCEND_KEYS: tuple[str, ...] = ("RIGHT", "l")
ASCEND_KEYS: tuple[str, ...] = ("LEFT", "h")
CANCEL_KEYS: tuple[str, ...] = ("ESC", "CTRL_C")


def _browsing_registry(state: AppState) -> KeyComboRegistry[Action]:
    def open_selected() -> Action | None:
        entry = state.selected_entry()
        if entry is None:
            return None
        return RequestOpen(entry)

    registry: KeyComboRegistry[Action] = KeyComboRegistry()
    return registry.register_bindings(
        KeyComboBinding(QUIT_KEYS, state.request_quit),
        KeyComboBinding(UP_KEYS, state.move_selection_up),
        KeyComboBinding(DOWN_KEYS, state.move_selection_down),
        KeyComboBinding(CONFIRM_KEYS, open_selected),
        KeyComboBinding(ADD_LOCATION_KEYS, state.open_location_picker),
    )


def _selecting_location_registry(state: AppState) -> KeyComboRegistry[Action]:
    browser = state.browser

    def navigate(step: Callable[[], None]) -> None:
        step()
        state.dirty = True

    def confirm() -> Action:
        location = browser.current_location
        state.close_location_picker()
        return RequestScan(location)

    registry: KeyComboRegistry[Action] = KeyComboRegistry()
    return registry.register_bindings(
        KeyComboBinding(UP_KEYS, lambda: navigate(browser.move_cursor_up)),
        KeyComboBinding(DOWN_KEYS, lambda: navigate(browser.move_cursor_down)),
        KeyComboBinding(DESCEND_KEYS, lambda: navigate(browser.descend_into_selected)),
        KeyComboBinding(ASCEND_KEYS, lambda: navigate(browser.ascend)),
        KeyComboBinding(CONFIRM_KEYS, confirm),
        KeyComboBinding(CANCEL_KEYS, state.close_location_picker),
    )


_REGISTRY_FACTORIES = {
    Mode.BROWSING: _browsing_registry,
    Mode.SELECTING_LOCATION: _selecting_location_registry,
}


def handle_key(key: str, state: AppState) -> Action | None:
    """Route one key token according to the active mode.

    Returns ``None`` when the key was fully handled in state (or ignored).
    """
    registry = _REGISTRY_FACTORIES[state.mode](state)
    return registry.dispatch(key)


__all__ = [
    "ADD_LOCATION_KEYS",
    "ASCEND_KEYS",
    "CANCEL_KEYS",
    "CONFIRM_KEYS",
    "DESCEND_KEYS",
    "DOWN_KEYS",
    "QUIT_KEYS",
    "UP_KEYS",
    "handle_key",
]
