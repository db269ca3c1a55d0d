"""Tests for the local filesystem collaborator."""

from __future__ import annotations

import tempfile
import unittest
from datetime import datetime
from pathlib import Path
from types import SimpleNamespace
from unittest import mock

from lazyexplorer.errors import FileUnreadable, PathUnreadable, WorkingDirectoryUnavailable
from lazyexplorer.fs import LocalFileSystem


def _fake_dir_entry(name: str, *, is_dir: bool = False, stat_error: Exception | None = None) -> mock.Mock:
    entry = mock.Mock()
    entry.name = name
    entry.path = f"/fake/{name}"
    entry.is_dir.return_value = is_dir
    if stat_error is not None:
        entry.stat.side_effect = stat_error
    else:
        entry.stat.return_value = SimpleNamespace(st_size=3, st_mtime=0.0)
    return entry


class LocalFileSystemTests(unittest.TestCase):
    def setUp(self) -> None:
        self.fs = LocalFileSystem()

    def test_list_children_sorts_directories_first_case_insensitively(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "b.txt").write_text("bb", encoding="utf-8")
            (root / "A.txt").write_text("a", encoding="utf-8")
            (root / "zdir").mkdir()
            (root / "Cdir").mkdir()

            entries = self.fs.list_children(root)

        self.assertEqual([entry.name for entry in entries], ["Cdir", "zdir", "A.txt", "b.txt"])
        by_name = {entry.name: entry for entry in entries}
        self.assertTrue(by_name["zdir"].is_directory)
        self.assertIsNone(by_name["zdir"].size)
        self.assertEqual(by_name["b.txt"].size, 2)
        self.assertIsInstance(by_name["b.txt"].modified_at, datetime)

    def test_list_children_of_missing_directory_raises_path_unreadable(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "gone"
            with self.assertRaises(PathUnreadable) as ctx:
                self.fs.list_children(missing)

        self.assertEqual(ctx.exception.path, missing)
        self.assertIn(str(missing), str(ctx.exception))

    def test_list_children_skips_entries_without_metadata(self) -> None:
        good = _fake_dir_entry("good.txt")
        bad = _fake_dir_entry("bad.txt", stat_error=PermissionError(13, "Permission denied"))
        scandir_result = mock.MagicMock()
        scandir_result.__enter__.return_value = [bad, good]

        with mock.patch("lazyexplorer.fs.os.scandir", return_value=scandir_result):
            entries = self.fs.list_children(Path("/fake"))

        self.assertEqual([entry.name for entry in entries], ["good.txt"])
        self.assertEqual(entries[0].size, 3)

    def test_count_children_treats_unreadable_directory_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "one").write_text("1", encoding="utf-8")
            (root / ".hidden").write_text("2", encoding="utf-8")

            self.assertEqual(self.fs.count_children(root), 2)
            self.assertEqual(self.fs.count_children(root / "missing"), 0)

    def test_stat_reports_kind_and_size(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            target = root / "data.bin"
            target.write_bytes(b"12345")

            dir_info = self.fs.stat(root)
            file_info = self.fs.stat(target)
            with self.assertRaises(PathUnreadable):
                self.fs.stat(root / "missing")

        self.assertTrue(dir_info.is_directory)
        self.assertFalse(file_info.is_directory)
        self.assertEqual(file_info.size, 5)

    def test_read_file_failure_raises_file_unreadable(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "ok.txt").write_bytes(b"payload")

            self.assertEqual(self.fs.read_file(root / "ok.txt"), b"payload")
            with self.assertRaises(FileUnreadable):
                self.fs.read_file(root / "missing.txt")

    def test_parent_and_join(self) -> None:
        self.assertEqual(self.fs.parent_of(Path("/a/b")), Path("/a"))
        self.assertEqual(self.fs.parent_of(Path("/")), Path("/"))
        self.assertEqual(self.fs.join(Path("/a"), "b"), Path("/a/b"))

    def test_working_directory_failure_is_wrapped(self) -> None:
        with mock.patch.object(Path, "cwd", side_effect=FileNotFoundError(2, "No such file or directory")):
            with self.assertRaises(WorkingDirectoryUnavailable) as ctx:
                self.fs.working_directory()

        self.assertIn("working directory unavailable", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
