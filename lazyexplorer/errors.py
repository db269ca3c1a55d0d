"""Filesystem error taxonomy surfaced to the explorer.

Every error wraps the originating ``OSError`` and renders as a one-line,
human-readable message suitable for the status row.
"""

from __future__ import annotations

from pathlib import Path


class ExplorerError(Exception):
    """Base class for recoverable filesystem failures."""

    def __init__(self, path: Path | str, cause: BaseException | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(self.describe())

    def describe(self) -> str:
        if self.cause is None:
            return str(self.path)
        reason = getattr(self.cause, "strerror", None) or str(self.cause)
        return f"{self.path}: {reason}"


class PathUnreadable(ExplorerError):
    """Listing or stat of a path failed (vanished, permission denied, ...)."""


class FileUnreadable(ExplorerError):
    """Reading file content failed."""


class WorkingDirectoryUnavailable(ExplorerError):
    """The process working directory could not be resolved at startup."""

    def describe(self) -> str:
        reason = str(self.cause) if self.cause is not None else "unknown error"
        return f"working directory unavailable: {reason}"


__all__ = [
    "ExplorerError",
    "PathUnreadable",
    "FileUnreadable",
    "WorkingDirectoryUnavailable",
]
