"""Tests for application state transitions and catalogue folding."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from funkhunt.browser import DirectoryBrowser
from funkhunt.catalogue import CatalogueEntry
from funkhunt.state import AppState, Mode


def _entry(path: str) -> CatalogueEntry:
    return CatalogueEntry.from_path(Path(path))


class AppStateTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        (self.root / "shelf").mkdir()
        (self.root / "stack").mkdir()
        self.browser = DirectoryBrowser(self.root)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _state(self, catalogue: list[CatalogueEntry], scanned: list[str] | None = None, **kwargs) -> AppState:
        return AppState(catalogue=catalogue, scanned_locations=scanned or [], browser=self.browser, **kwargs)

    def test_empty_catalogue_has_no_selection(self) -> None:
        state = self._state([])

        state.move_selection_down()
        state.move_selection_up()

        self.assertEqual(state.selected_index, 0)
        self.assertIsNone(state.selected_entry())

    def test_selection_is_clamped(self) -> None:
        state = self._state([_entry("/b/a.epub"), _entry("/b/b.epub")])

        state.move_selection_up()
        self.assertEqual(state.selected_index, 0)
        for _ in range(5):
            state.move_selection_down()
        self.assertEqual(state.selected_index, 1)
        self.assertEqual(state.selected_entry(), _entry("/b/b.epub"))

    def test_initial_selected_index_is_clamped(self) -> None:
        state = self._state([_entry("/b/a.epub")], selected_index=7)
        self.assertEqual(state.selected_index, 0)

    def test_extend_appends_new_entries_and_records_location(self) -> None:
        a, b, c = _entry("/x/a.epub"), _entry("/x/b.epub"), _entry("/y/c.epub")
        state = self._state([a, b], ["/x"])
        state.move_selection_down()

        state.apply_scan_result(Path("/y"), [c])

        self.assertEqual(state.catalogue, [a, b, c])
        self.assertEqual(state.scanned_locations, ["/x", "/y"])
        self.assertEqual(state.selected_index, 1)

    def test_extend_skips_duplicates_and_known_locations(self) -> None:
        a, b = _entry("/x/a.epub"), _entry("/x/b.epub")
        state = self._state([a], ["/x"])

        state.extend_catalogue([a, b, b], "/x")

        self.assertEqual(state.catalogue, [a, b])
        self.assertEqual(state.scanned_locations, ["/x"])

    def test_replace_discards_previous_books(self) -> None:
        a, b, c = _entry("/x/a.epub"), _entry("/x/b.epub"), _entry("/y/c.epub")
        state = self._state([a, b], ["/x"])
        state.move_selection_down()

        state.replace_catalogue([c], Path("/y"))

        self.assertEqual(state.catalogue, [c])
        self.assertEqual(state.scanned_locations, ["/y"])
        self.assertEqual(state.selected_index, 0)

    def test_location_picker_round_trip(self) -> None:
        state = self._state([])
        self.browser.move_cursor_down()
        self.assertEqual(self.browser.cursor, 1)

        state.open_location_picker()
        self.assertIs(state.mode, Mode.SELECTING_LOCATION)
        self.assertEqual(state.browser.cursor, 0)

        state.close_location_picker()
        self.assertIs(state.mode, Mode.BROWSING)

    def test_request_quit_sets_flag(self) -> None:
        state = self._state([])
        state.request_quit()
        self.assertTrue(state.quit_requested)

    def test_set_status_marks_dirty(self) -> None:
        state = self._state([])
        state.dirty = False

        state.set_status("hello", 12.5)

        self.assertEqual(state.status_message, "hello")
        self.assertEqual(state.status_message_until, 12.5)
        self.assertTrue(state.dirty)


if __name__ == "__main__":
    unittest.main()
