"""Tests for tolerant decoding, control-character escaping, and highlighting."""

from __future__ import annotations

import unittest
from pathlib import Path

from lazyexplorer.syntax import colorize_source, decode_text, sanitize_terminal_text


class SyntaxTests(unittest.TestCase):
    def test_decode_text_fallback_order(self) -> None:
        self.assertEqual(decode_text("ünïcode".encode("utf-8")), "ünïcode")
        self.assertEqual(decode_text(b"\xef\xbb\xbfbom"), "bom")
        self.assertEqual(decode_text(b"caf\xe9"), "café")

    def test_sanitize_escapes_controls_but_keeps_whitespace(self) -> None:
        self.assertEqual(sanitize_terminal_text("a\tb\nc\r\n"), "a\tb\nc\r\n")
        self.assertEqual(sanitize_terminal_text("x\x7fy\x9bz"), "x\\x7fy\\x9bz")

    def test_colorize_known_and_unknown_types(self) -> None:
        source = "def f():\n    return 1\n"
        self.assertIn("\x1b[", colorize_source(source, Path("m.py")))
        self.assertEqual(colorize_source("hello", Path("file.zzqx")), "hello")

    def test_colorize_without_trailing_newline_keeps_shape(self) -> None:
        rendered = colorize_source("x = 1", Path("m.py"))
        self.assertFalse(rendered.endswith("\n"))

    def test_unknown_style_falls_back(self) -> None:
        rendered = colorize_source("x = 1\n", Path("m.py"), style="no-such-style")
        self.assertIn("\x1b[", rendered)


if __name__ == "__main__":
    unittest.main()
