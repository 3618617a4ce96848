from __future__ import annotations

import unittest

from funkhunt.ui_theme import (
    DEFAULT_THEME,
    OCEAN_THEME,
    PLAIN_THEME,
    available_theme_names,
    normalize_theme_name,
    resolve_theme,
)


class UIThemeTests(unittest.TestCase):
    def test_available_names_are_sorted(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "ocean"))

    def test_unknown_or_missing_names_fall_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name(None), "default")
        self.assertEqual(normalize_theme_name("neon"), "default")
        self.assertEqual(normalize_theme_name(" OCEAN "), "ocean")

    def test_resolve_theme_honors_no_color(self) -> None:
        self.assertIs(resolve_theme("ocean"), OCEAN_THEME)
        self.assertIs(resolve_theme(None), DEFAULT_THEME)
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)

    def test_plain_theme_has_no_escape_codes(self) -> None:
        for value in vars(PLAIN_THEME).values():
            if value != PLAIN_THEME.name:
                self.assertEqual(value, "")


if __name__ == "__main__":
    unittest.main()
