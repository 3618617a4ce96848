"""Regression tests for raw-key decoding.

Covers ESC timing, arrow sequences, and control-key token mapping.
"""

import os
import time
import unittest

from funkhunt import input as input_mod


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read_all(self, payload: bytes, count: int) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        started = time.monotonic()
        keys = self._read_all(b"\x1b", 1)
        elapsed = time.monotonic() - started

        self.assertEqual(keys, ["ESC"])
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences_are_recognized(self) -> None:
        self.assertEqual(
            self._read_all(b"\x1b[A\x1b[B\x1bOC\x1b[D", 4),
            ["UP", "DOWN", "RIGHT", "LEFT"],
        )

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(self._read_all(b"\x1ba", 2), ["ESC", "a"])

    def test_control_keys_map_to_tokens(self) -> None:
        self.assertEqual(
            self._read_all(b"\r\n\x03\t\x7f", 5),
            ["ENTER_CR", "ENTER_LF", "CTRL_C", "TAB", "BACKSPACE"],
        )

    def test_page_keys_are_recognized(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[5~\x1b[6~", 2), ["PAGE_UP", "PAGE_DOWN"])

    def test_multibyte_character_is_decoded(self) -> None:
        self.assertEqual(self._read_all("é".encode("utf-8"), 1), ["é"])

    def test_unbound_sequences_are_consumed_whole(self) -> None:
        self.assertEqual(
            self._read_all(b"\x1b[3~\x1bOP\x1b[1;5A\x1b[2~q", 5),
            ["UNKNOWN", "UNKNOWN", "UNKNOWN", "UNKNOWN", "q"],
        )

    def test_home_and_end_in_both_forms(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[H\x1bOF", 2), ["HOME", "END"])

    def test_timeout_returns_empty_token(self) -> None:
        self.assertEqual(self._read_all(b"", 1), [""])


if __name__ == "__main__":
    unittest.main()
