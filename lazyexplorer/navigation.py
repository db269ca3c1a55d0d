"""Authoritative "where am I / what's here" state for the explorer.

``NavigationState`` is an explicitly owned object: the session creates one and
passes it to key handlers and the renderer. It has two conceptual modes:
``browsing`` and ``error``. Any filesystem failure during load or stat moves it
to ``error`` while keeping the previous path and entries; only the next
successful load returns it to ``browsing``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from .errors import ExplorerError
from .preview import PreviewResult, build_preview
from .types import PARENT_ENTRY, DirectoryEntry, FileStat

logger = logging.getLogger(__name__)

MODE_BROWSING = "browsing"
MODE_ERROR = "error"


class NavigationFileSystem(Protocol):
    def list_children(self, path: Path) -> list[DirectoryEntry]: ...

    def count_children(self, path: Path) -> int: ...

    def stat(self, path: Path) -> FileStat: ...

    def read_file(self, path: Path) -> bytes: ...

    def parent_of(self, path: Path) -> Path: ...

    def join(self, path: Path, name: str) -> Path: ...


@dataclass(frozen=True)
class StatusMessage:
    text: str = ""
    is_error: bool = False


@dataclass
class NavigationState:
    fs: NavigationFileSystem
    current_path: Path
    entries: list[DirectoryEntry] = field(default_factory=lambda: [PARENT_ENTRY])
    selected_index: int | None = 0
    preview: PreviewResult | None = None
    status: StatusMessage = field(default_factory=StatusMessage)

    @property
    def mode(self) -> str:
        return MODE_ERROR if self.status.is_error else MODE_BROWSING

    @property
    def selected_entry(self) -> DirectoryEntry | None:
        return self._entry_at(self.selected_index)

    def _entry_at(self, index: int | None) -> DirectoryEntry | None:
        if index is None or not 0 <= index < len(self.entries):
            return None
        return self.entries[index]

    def _fail(self, exc: ExplorerError) -> None:
        logger.warning("%s", exc)
        self.status = StatusMessage(text=str(exc), is_error=True)

    def load_directory(self, path: Path) -> bool:
        """List ``path`` and make it current.

        On failure nothing but the status changes. The ``..`` row is selected
        and the preview cleared, since the parent row has no preview target.
        """
        try:
            children = self.fs.list_children(path)
        except ExplorerError as exc:
            self._fail(exc)
            return False

        logger.debug("loaded %s (%d entries)", path, len(children))
        self.entries = [PARENT_ENTRY, *children]
        self.current_path = path
        self.selected_index = 0
        self.preview = None
        self.status = StatusMessage(text=str(path))
        return True

    def refresh(self) -> bool:
        """Reload the current directory, keeping the selected name when present."""
        previous = self.selected_entry
        if not self.load_directory(self.current_path):
            return False
        if previous is None or previous.is_parent:
            return True
        for idx, entry in enumerate(self.entries):
            if entry.name == previous.name:
                self.selection_changed(idx)
                break
        return True

    def selection_changed(self, index: int) -> None:
        """Record the highlighted row and preview it when it is a real entry."""
        entry = self._entry_at(index)
        if entry is None:
            return
        self.selected_index = index
        if entry.is_parent:
            self.preview = None
            return
        self.preview = build_preview(self.fs, self.fs.join(self.current_path, entry.name))

    def activate(self, index: int) -> None:
        """Open the entry at ``index``: enter directories, preview files."""
        entry = self._entry_at(index)
        if entry is None:
            return
        if entry.is_parent:
            self.go_up()
            return

        full_path = self.fs.join(self.current_path, entry.name)
        try:
            info = self.fs.stat(full_path)
        except ExplorerError as exc:
            self._fail(exc)
            return

        if info.is_directory:
            self.load_directory(full_path)
        else:
            self.selected_index = index
            self.preview = build_preview(self.fs, full_path)

    def go_up(self) -> bool:
        return self.load_directory(self.fs.parent_of(self.current_path))


__all__ = [
    "MODE_BROWSING",
    "MODE_ERROR",
    "NavigationFileSystem",
    "StatusMessage",
    "NavigationState",
]
