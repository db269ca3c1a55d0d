"""Tests for preview classification and preview display text."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyexplorer.ansi import ANSI_ESCAPE_RE
from lazyexplorer.errors import FileUnreadable
from lazyexplorer.fs import LocalFileSystem
from lazyexplorer.preview import (
    NO_SELECTION_TEXT,
    PREVIEW_MAX_BYTES,
    Binary,
    DirectorySummary,
    PreviewError,
    Text,
    TooLarge,
    build_preview,
    preview_text,
)
from lazyexplorer.types import FileStat


class BuildPreviewTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.fs = LocalFileSystem()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_directory_reports_direct_child_count(self) -> None:
        target = self.root / "docs"
        target.mkdir()
        (target / "a.md").write_text("x", encoding="utf-8")
        (target / "b.md").write_text("x", encoding="utf-8")
        (target / "nested").mkdir()
        (target / "nested" / "deep.md").write_text("y", encoding="utf-8")

        result = build_preview(self.fs, target)

        self.assertEqual(result, DirectorySummary(path=target, item_count=3))
        self.assertEqual(preview_text(result), f"Directory: {target}\nContains 3 items")

    def test_missing_path_is_stat_error(self) -> None:
        target = self.root / "missing.txt"

        result = build_preview(self.fs, target)

        self.assertIsInstance(result, PreviewError)
        self.assertFalse(result.reading)
        self.assertTrue(preview_text(result).startswith("Error: "))

    def test_limit_sized_file_is_read(self) -> None:
        target = self.root / "limit.txt"
        target.write_bytes(b"a" * PREVIEW_MAX_BYTES)

        result = build_preview(self.fs, target)

        self.assertEqual(PREVIEW_MAX_BYTES, 102400)
        self.assertIsInstance(result, Text)
        self.assertEqual(len(result.content), PREVIEW_MAX_BYTES)

    def test_one_byte_over_limit_is_too_large_without_reading(self) -> None:
        target = self.root / "big.txt"
        target.write_bytes(b"a" * (PREVIEW_MAX_BYTES + 1))

        with mock.patch.object(self.fs, "read_file") as read_mock:
            result = build_preview(self.fs, target)

        read_mock.assert_not_called()
        self.assertEqual(result, TooLarge(path=target, size=102401))
        self.assertEqual(preview_text(result), "File is too large to preview (100.0 KB)")

    def test_control_bytes_are_binary(self) -> None:
        target = self.root / "blob.dat"
        target.write_bytes(b"abc\x00def")

        result = build_preview(self.fs, target)

        self.assertEqual(result, Binary(path=target, size=7))
        self.assertEqual(preview_text(result), f"Binary file: {target}\nSize: 7 B")

    def test_text_content_is_decoded(self) -> None:
        utf8 = self.root / "utf8.txt"
        utf8.write_bytes("héllo\n".encode("utf-8"))
        latin = self.root / "latin.txt"
        latin.write_bytes(b"caf\xe9\n")

        self.assertEqual(build_preview(self.fs, utf8), Text(path=utf8, content="héllo\n"))
        self.assertEqual(build_preview(self.fs, latin), Text(path=latin, content="café\n"))

    def test_read_failure_is_reading_error(self) -> None:
        target = Path("/virtual/file.txt")
        fake_fs = mock.Mock()
        fake_fs.stat.return_value = FileStat(is_directory=False, size=10)
        fake_fs.read_file.side_effect = FileUnreadable(target, PermissionError(13, "Permission denied"))

        result = build_preview(fake_fs, target)

        self.assertIsInstance(result, PreviewError)
        self.assertTrue(result.reading)
        self.assertEqual(preview_text(result), f"Error reading file: {target}: Permission denied")

    def test_unlistable_directory_counts_zero(self) -> None:
        target = Path("/virtual/locked")
        fake_fs = mock.Mock()
        fake_fs.stat.return_value = FileStat(is_directory=True, size=0)
        fake_fs.count_children.return_value = 0

        self.assertEqual(build_preview(fake_fs, target), DirectorySummary(path=target, item_count=0))


class PreviewTextTests(unittest.TestCase):
    def test_no_selection_placeholder(self) -> None:
        self.assertEqual(preview_text(None), NO_SELECTION_TEXT)

    def test_text_is_sanitized(self) -> None:
        result = Text(path=Path("notes.txt"), content="bell\x7fhere\n")
        self.assertEqual(preview_text(result), "bell\\x7fhere\n")

    def test_colorize_highlights_known_file_types(self) -> None:
        result = Text(path=Path("module.py"), content="value = 1\n")

        colored = preview_text(result, colorize=True)
        plain = preview_text(result, colorize=False)

        self.assertIn("\x1b[", colored)
        self.assertEqual(plain, "value = 1\n")

    def test_colorize_keeps_leading_and_trailing_blank_lines(self) -> None:
        result = Text(path=Path("module.py"), content="\n\nvalue = 1\n\n")

        colored = preview_text(result, colorize=True)

        self.assertIn("\x1b[", colored)
        self.assertEqual(ANSI_ESCAPE_RE.sub("", colored), preview_text(result, colorize=False))

    def test_colorize_leaves_unknown_file_types_plain(self) -> None:
        result = Text(path=Path("notes.zzqx"), content="plain words\n")
        self.assertEqual(preview_text(result, colorize=True), "plain words\n")


if __name__ == "__main__":
    unittest.main()
