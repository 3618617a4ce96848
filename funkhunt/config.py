"""Persistent JSON config helpers.

Stores the catalogue file extensions, picker start folder, UI theme, and
log level. All access is defensive: malformed or missing config falls back
to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .catalogue import DEFAULT_EXTENSIONS

APP_NAME = "funkhunt"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

LOG_LEVEL_NAMES: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so a read-only config directory never
    interrupts the session.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_stripped_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_extensions() -> tuple[str, ...]:
    """Load catalogue extensions, e.g. ``["epub", "pdf"]``.

    Non-string items are dropped; an empty or invalid list falls back to
    the built-in default.
    """
    value = load_config().get("extensions")
    if not isinstance(value, list):
        return DEFAULT_EXTENSIONS
    extensions = tuple(
        item.strip().lstrip(".").lower()
        for item in value
        if isinstance(item, str) and item.strip().lstrip(".")
    )
    return extensions if extensions else DEFAULT_EXTENSIONS


def load_browser_start() -> Path | None:
    """Load the folder the location picker opens in, if it still exists."""
    value = _load_stripped_string("browser_start")
    if value is None:
        return None
    path = Path(value).expanduser()
    return path if path.is_dir() else None


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_stripped_string("theme")


def save_theme_name(theme_name: str) -> None:
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_log_level() -> str | None:
    value = _load_stripped_string("log_level")
    if value is None:
        return None
    upper = value.upper()
    return upper if upper in LOG_LEVEL_NAMES else None
