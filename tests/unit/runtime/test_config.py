"""Tests for config persistence and input sanitization.

Malformed or missing config data must always fall back to defaults.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from funkhunt import config


class ConfigBehaviorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "funkhunt" / "config.json"
        patcher = mock.patch("funkhunt.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def _write(self, text: str) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(text, encoding="utf-8")

    def test_missing_file_loads_empty_config_and_defaults(self) -> None:
        self.assertEqual(config.load_config(), {})
        self.assertEqual(config.load_extensions(), ("epub",))
        self.assertIsNone(config.load_browser_start())
        self.assertIsNone(config.load_theme_name())
        self.assertIsNone(config.load_log_level())

    def test_malformed_json_falls_back_to_defaults(self) -> None:
        self._write("{not json")
        self.assertEqual(config.load_config(), {})

        self._write("[1, 2]")
        self.assertEqual(config.load_config(), {})

    def test_extensions_are_sanitized(self) -> None:
        self._write(json.dumps({"extensions": [".PDF", 3, " epub ", ""]}))
        self.assertEqual(config.load_extensions(), ("pdf", "epub"))

        self._write(json.dumps({"extensions": "epub"}))
        self.assertEqual(config.load_extensions(), ("epub",))

        self._write(json.dumps({"extensions": []}))
        self.assertEqual(config.load_extensions(), ("epub",))

    def test_browser_start_requires_existing_directory(self) -> None:
        existing = Path(self._tmp.name)
        self._write(json.dumps({"browser_start": str(existing)}))
        self.assertEqual(config.load_browser_start(), existing)

        self._write(json.dumps({"browser_start": str(existing / "missing")}))
        self.assertIsNone(config.load_browser_start())

    def test_theme_name_round_trip_keeps_other_keys(self) -> None:
        self._write(json.dumps({"extensions": ["pdf"]}))

        config.save_theme_name(" ocean ")

        self.assertEqual(config.load_theme_name(), "ocean")
        self.assertEqual(config.load_extensions(), ("pdf",))

    def test_blank_theme_name_is_not_saved(self) -> None:
        config.save_theme_name("   ")
        self.assertFalse(self.config_path.exists())

    def test_log_level_is_validated(self) -> None:
        self._write(json.dumps({"log_level": "debug"}))
        self.assertEqual(config.load_log_level(), "DEBUG")

        self._write(json.dumps({"log_level": "chatty"}))
        self.assertIsNone(config.load_log_level())

    def test_save_config_ignores_unwritable_location(self) -> None:
        blocker = Path(self._tmp.name) / "blocker"
        blocker.write_text("", encoding="utf-8")
        with mock.patch("funkhunt.config.CONFIG_PATH", blocker / "config.json"):
            config.save_config({"theme": "ocean"})


if __name__ == "__main__":
    unittest.main()
