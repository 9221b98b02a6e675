"""Tests for raw byte decoding into key tokens."""

from __future__ import annotations

import os
import unittest

from fuzzypick.input import reader
from fuzzypick.input.reader import read_key


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.read_fd, self.write_fd = os.pipe()
        reader._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        os.close(self.read_fd)
        os.close(self.write_fd)
        reader._PENDING_BYTES.clear()

    def _keys(self, payload: bytes, count: int) -> list[str]:
        os.write(self.write_fd, payload)
        return [read_key(self.read_fd, timeout_ms=50) for _ in range(count)]

    def test_idle_timeout_returns_empty_token(self) -> None:
        self.assertEqual(read_key(self.read_fd, timeout_ms=1), "")

    def test_control_and_text_keys(self) -> None:
        keys = self._keys(b"a\r\x7f\t\x15\x03", 6)
        self.assertEqual(keys, ["a", "ENTER", "BACKSPACE", "TAB", "CTRL_U", "CTRL_C"])

    def test_multibyte_text_is_one_key(self) -> None:
        self.assertEqual(self._keys("é日".encode("utf-8"), 2), ["é", "日"])

    def test_arrow_and_paging_sequences(self) -> None:
        keys = self._keys(b"\x1b[A\x1b[B\x1bOD\x1b[5~\x1b[6~\x1b[H", 6)
        self.assertEqual(keys, ["UP", "DOWN", "LEFT", "PAGE_UP", "PAGE_DOWN", "HOME"])

    def test_lone_escape(self) -> None:
        self.assertEqual(self._keys(b"\x1b", 1), ["ESC"])

    def test_escape_followed_by_text_keeps_text(self) -> None:
        self.assertEqual(self._keys(b"\x1bx", 2), ["ESC", "x"])


if __name__ == "__main__":
    unittest.main()
