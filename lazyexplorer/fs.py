"""Local filesystem collaborator used by navigation and previews.

All methods are synchronous single attempts. ``OSError`` never escapes:
failures are re-raised as :mod:`lazyexplorer.errors` types carrying the path.
"""

from __future__ import annotations

import logging
import os
from stat import S_ISDIR
from datetime import datetime
from pathlib import Path

from .errors import FileUnreadable, PathUnreadable, WorkingDirectoryUnavailable
from .types import DirectoryEntry, FileStat

logger = logging.getLogger(__name__)


def entry_sort_key(entry: DirectoryEntry) -> tuple[bool, str, str]:
    """Order directories first, then case-folded name, then raw name."""
    return (not entry.is_directory, entry.name.casefold(), entry.name)


def _mtime(stat_result: os.stat_result) -> datetime | None:
    try:
        return datetime.fromtimestamp(stat_result.st_mtime)
    except (OverflowError, OSError, ValueError):
        return None


class LocalFileSystem:
    """Filesystem access backed by ``os.scandir``/``os.stat``."""

    def list_children(self, path: Path) -> list[DirectoryEntry]:
        """Return sorted immediate children of ``path``.

        Children whose metadata cannot be read are skipped.
        """
        entries: list[DirectoryEntry] = []
        try:
            with os.scandir(path) as children:
                for child in children:
                    try:
                        is_dir = child.is_dir(follow_symlinks=False)
                        stat_result = child.stat(follow_symlinks=False)
                    except OSError as exc:
                        logger.debug("skipping %s: %s", child.path, exc)
                        continue
                    entries.append(
                        DirectoryEntry(
                            name=child.name,
                            is_directory=is_dir,
                            size=None if is_dir else int(stat_result.st_size),
                            modified_at=_mtime(stat_result),
                        )
                    )
        except OSError as exc:
            raise PathUnreadable(path, exc) from exc

        entries.sort(key=entry_sort_key)
        return entries

    def count_children(self, path: Path) -> int:
        """Count direct children of ``path``; unreadable directories count 0."""
        try:
            with os.scandir(path) as children:
                return sum(1 for _ in children)
        except OSError:
            return 0

    def stat(self, path: Path) -> FileStat:
        try:
            stat_result = os.stat(path)
        except OSError as exc:
            raise PathUnreadable(path, exc) from exc
        return FileStat(
            is_directory=S_ISDIR(stat_result.st_mode),
            size=int(stat_result.st_size),
            modified_at=_mtime(stat_result),
        )

    def read_file(self, path: Path) -> bytes:
        try:
            return Path(path).read_bytes()
        except OSError as exc:
            raise FileUnreadable(path, exc) from exc

    def parent_of(self, path: Path) -> Path:
        return Path(path).parent

    def join(self, path: Path, name: str) -> Path:
        return Path(path) / name

    def working_directory(self) -> Path:
        try:
            return Path.cwd()
        except OSError as exc:
            raise WorkingDirectoryUnavailable(".", exc) from exc


__all__ = [
    "LocalFileSystem",
    "entry_sort_key",
]
