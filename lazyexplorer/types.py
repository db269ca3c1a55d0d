"""Domain datatypes for directory listings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

PARENT_NAME = ".."


@dataclass(frozen=True)
class DirectoryEntry:
    """One listed child of a directory, snapshotted at listing time."""

    name: str
    is_directory: bool
    size: int | None = None
    modified_at: datetime | None = None

    @property
    def is_parent(self) -> bool:
        return self.name == PARENT_NAME


@dataclass(frozen=True)
class FileStat:
    """Metadata observed by ``stat`` for a single path."""

    is_directory: bool
    size: int
    modified_at: datetime | None = None


PARENT_ENTRY = DirectoryEntry(name=PARENT_NAME, is_directory=True)


__all__ = [
    "PARENT_NAME",
    "PARENT_ENTRY",
    "DirectoryEntry",
    "FileStat",
]
