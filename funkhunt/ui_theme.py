"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the library view and the location picker.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    header: str
    border: str
    panel_title: str
    list_item: str
    list_selected: str
    details: str
    hint: str
    status: str
    picker_path: str
    picker_dir: str
    picker_selected: str
    help_key: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    header="\033[1;36m",
    border="\033[34m",
    panel_title="\033[1;38;5;81m",
    list_item="\033[37m",
    list_selected="\033[1;33m",
    details="\033[38;5;252m",
    hint="\033[2;38;5;250m",
    status="\033[7m",
    picker_path="\033[36m",
    picker_dir="\033[38;5;252m",
    picker_selected="\033[1;33;48;5;238m",
    help_key="\033[38;5;229m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    header="\033[1;38;5;45m",
    border="\033[38;5;31m",
    panel_title="\033[1;38;5;45m",
    list_item="\033[38;5;153m",
    list_selected="\033[1;38;5;39m",
    details="\033[38;5;252m",
    hint="\033[2;38;5;110m",
    status="\033[7;38;5;31m",
    picker_path="\033[38;5;117m",
    picker_dir="\033[38;5;153m",
    picker_selected="\033[1;38;5;39;48;5;236m",
    help_key="\033[38;5;153m",
)

PLAIN_THEME = replace(
    DEFAULT_THEME,
    name="plain",
    **{f.name: "" for f in fields(UITheme) if f.name != "name"},
)

_THEMES: dict[str, UITheme] = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME)}


def available_theme_names() -> tuple[str, ...]:
    return tuple(sorted(_THEMES))


def normalize_theme_name(name: str | None) -> str:
    """Map ``name`` onto a known palette name; unknown or empty means ``default``."""
    candidate = str(name or "").strip().lower()
    return candidate if candidate in _THEMES else DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Pick the palette to draw with; ``no_color`` always wins."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
