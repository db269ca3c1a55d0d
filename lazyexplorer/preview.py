"""Classify a path into exactly one preview variant.

Resolution order (first match wins):
1. stat failure -> ``PreviewError``
2. directory -> ``DirectorySummary`` with its direct child count
3. larger than ``PREVIEW_MAX_BYTES`` -> ``TooLarge`` without reading
4. read failure -> ``PreviewError``
5. control-byte heuristic -> ``Binary``
6. otherwise -> ``Text``

The engine never writes to the filesystem.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .errors import ExplorerError
from .formatting import format_size, is_binary
from .syntax import DEFAULT_STYLE, colorize_source, decode_text, sanitize_terminal_text
from .types import FileStat

logger = logging.getLogger(__name__)

PREVIEW_MAX_BYTES = 100 * 1024
NO_SELECTION_TEXT = "Select a file to preview its contents"


class PreviewFileSystem(Protocol):
    def stat(self, path: Path) -> FileStat: ...

    def count_children(self, path: Path) -> int: ...

    def read_file(self, path: Path) -> bytes: ...


@dataclass(frozen=True)
class DirectorySummary:
    path: Path
    item_count: int


@dataclass(frozen=True)
class TooLarge:
    path: Path
    size: int


@dataclass(frozen=True)
class Binary:
    path: Path
    size: int


@dataclass(frozen=True)
class Text:
    path: Path
    content: str


@dataclass(frozen=True)
class PreviewError:
    """Stat (``reading=False``) or content-read (``reading=True``) failure."""

    path: Path
    message: str
    reading: bool = False


PreviewResult = DirectorySummary | TooLarge | Binary | Text | PreviewError


def build_preview(fs: PreviewFileSystem, path: Path) -> PreviewResult:
    """Produce the preview variant for ``path``."""
    try:
        info = fs.stat(path)
    except ExplorerError as exc:
        logger.warning("preview stat failed: %s", exc)
        return PreviewError(path=path, message=str(exc))

    if info.is_directory:
        return DirectorySummary(path=path, item_count=fs.count_children(path))

    if info.size > PREVIEW_MAX_BYTES:
        return TooLarge(path=path, size=info.size)

    try:
        content = fs.read_file(path)
    except ExplorerError as exc:
        logger.warning("preview read failed: %s", exc)
        return PreviewError(path=path, message=str(exc), reading=True)

    if is_binary(content):
        return Binary(path=path, size=info.size)
    return Text(path=path, content=decode_text(content))


def preview_text(
    result: PreviewResult | None,
    *,
    colorize: bool = False,
    style: str = DEFAULT_STYLE,
) -> str:
    """Return the display text for a preview result.

    ``None`` means nothing is selected. Text content is sanitized and, when
    ``colorize`` is set, syntax highlighted.
    """
    if result is None:
        return NO_SELECTION_TEXT
    if isinstance(result, DirectorySummary):
        return f"Directory: {result.path}\nContains {result.item_count} items"
    if isinstance(result, TooLarge):
        return f"File is too large to preview ({format_size(result.size)})"
    if isinstance(result, Binary):
        return f"Binary file: {result.path}\nSize: {format_size(result.size)}"
    if isinstance(result, PreviewError):
        if result.reading:
            return f"Error reading file: {result.message}"
        return f"Error: {result.message}"

    content = sanitize_terminal_text(result.content)
    if colorize:
        return colorize_source(content, result.path, style)
    return content


__all__ = [
    "PREVIEW_MAX_BYTES",
    "NO_SELECTION_TEXT",
    "PreviewFileSystem",
    "DirectorySummary",
    "TooLarge",
    "Binary",
    "Text",
    "PreviewError",
    "PreviewResult",
    "build_preview",
    "preview_text",
]
