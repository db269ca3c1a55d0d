"""Frame composition for the explorer screen.

Layout, top to bottom:
- header row: ``File Explorer - <path>``, centered
- body: entry table (left) and preview text (right) split by a divider,
  each headed by a pane title row
- footer row: status text plus key legend

``build_frame_lines`` is pure and returns exactly ``height`` rows;
``render_frame`` writes them to stdout in one call.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from .ansi import clip_ansi_line, display_width, pad_ansi_line
from .formatting import format_mtime, format_size
from .navigation import StatusMessage
from .types import DirectoryEntry
from .ui_theme import DEFAULT_THEME, UITheme

TABLE_TITLE = "Directory Contents"
PREVIEW_TITLE = "File Preview"
HEADER_PREFIX = "File Explorer - "
DIVIDER = "│"
SIZE_COLUMN_WIDTH = 9
MTIME_COLUMN_WIDTH = 19
MIN_NAME_COLUMN_WIDTH = 12
KEY_LEGEND: tuple[tuple[str, str], ...] = (
    ("↑/↓", "Navigate"),
    ("Enter", "Open"),
    ("Backspace", "Go Up"),
    ("r", "Refresh"),
    ("Ctrl-C", "Quit"),
)
# Header, footer, pane title.
CHROME_ROWS = 3


@dataclass
class RenderContext:
    current_path: Path
    entries: list[DirectoryEntry]
    selected_index: int | None
    table_start: int
    preview_lines: list[str]
    status: StatusMessage
    width: int
    height: int
    left_width: int
    theme: UITheme = DEFAULT_THEME


def compute_left_width(total_width: int, percent: float | None = None) -> int:
    """Default split is two equal columns unless a percentage is configured."""
    if percent is None:
        desired = (total_width - 1) // 2
    else:
        desired = int(total_width * percent / 100.0)
    return clamp_left_width(total_width, desired)


def clamp_left_width(total_width: int, desired_left: int) -> int:
    max_possible = max(1, total_width - 2)
    min_left = max(12, min(20, total_width - 12))
    max_left = min(max(min_left, total_width - 12), max_possible)
    min_left = min(min_left, max_left)
    return max(min_left, min(desired_left, max_left))


def right_pane_width(total_width: int, left_width: int) -> int:
    return max(1, total_width - left_width - len(DIVIDER))


def table_view_rows(height: int) -> int:
    """Rows available for entries below the title and column headings."""
    return max(1, height - CHROME_ROWS - 1)


def preview_view_rows(height: int) -> int:
    return max(1, height - CHROME_ROWS)


def visible_table_start(selected: int | None, start: int, rows: int, total: int) -> int:
    """Scroll ``start`` just enough to keep ``selected`` within ``rows``."""
    if selected is not None:
        if selected < start:
            start = selected
        elif selected >= start + rows:
            start = selected - rows + 1
    return max(0, min(start, max(0, total - rows)))


def table_column_widths(left_width: int) -> tuple[int, int, int]:
    """Return ``(name, size, modified)`` widths; modified is 0 when it does not fit."""
    mtime_width = MTIME_COLUMN_WIDTH
    name_width = left_width - SIZE_COLUMN_WIDTH - mtime_width - 2
    if name_width < MIN_NAME_COLUMN_WIDTH:
        mtime_width = 0
        name_width = left_width - SIZE_COLUMN_WIDTH - 1
    return max(1, name_width), SIZE_COLUMN_WIDTH, mtime_width


def _styled(style: str, text: str, theme: UITheme) -> str:
    if not style or not text:
        return text
    return f"{style}{text}{theme.reset}"


def _join_columns(name: str, size: str, mtime: str, widths: tuple[int, int, int]) -> str:
    name_width, size_width, mtime_width = widths
    cells = [pad_ansi_line(name, name_width), " ", pad_ansi_line(size, size_width)]
    if mtime_width:
        cells.extend([" ", pad_ansi_line(mtime, mtime_width)])
    return "".join(cells)


def format_table_heading(widths: tuple[int, int, int], theme: UITheme) -> str:
    return _join_columns(
        _styled(theme.column_heading, "Name", theme),
        _styled(theme.column_heading, "Size", theme),
        _styled(theme.column_heading, "Modified", theme),
        widths,
    )


def format_table_row(
    entry: DirectoryEntry,
    widths: tuple[int, int, int],
    theme: UITheme,
    *,
    selected: bool = False,
) -> str:
    """Render one entry row; directories use the directory color and ``-`` size."""
    if entry.is_parent:
        size_text = ""
    elif entry.is_directory or entry.size is None:
        size_text = "-"
    else:
        size_text = format_size(entry.size)
    mtime_text = format_mtime(entry.modified_at)

    if selected:
        plain = _join_columns(entry.name, size_text, mtime_text, widths)
        return _styled(theme.selected, plain, theme)

    name_style = theme.entry_dir if entry.is_directory else theme.entry_file
    return _join_columns(
        _styled(name_style, entry.name, theme),
        _styled(theme.entry_meta, size_text, theme),
        _styled(theme.entry_meta, mtime_text, theme),
        widths,
    )


def footer_text(status: StatusMessage, theme: UITheme) -> str:
    legend = " | ".join(
        f"{_styled(theme.footer_key, key, theme)}{theme.footer} {label}" for key, label in KEY_LEGEND
    )
    if status.is_error:
        lead = _styled(theme.footer_error, f"Error: {status.text}", theme) + theme.footer
    else:
        lead = status.text
    prefix = f"{lead} | " if lead else ""
    return f"{theme.footer}{prefix}Keys: {legend}"


def header_text(current_path: Path, width: int, theme: UITheme) -> str:
    title = clip_ansi_line(f"{HEADER_PREFIX}{current_path}", width)
    left_pad = max(0, (width - display_width(title)) // 2)
    return _styled(theme.header, pad_ansi_line(" " * left_pad + title, width), theme)


def build_frame_lines(context: RenderContext) -> list[str]:
    theme = context.theme
    width = max(1, context.width)
    height = max(CHROME_ROWS + 1, context.height)
    left_width = clamp_left_width(width, context.left_width)
    right_width = right_pane_width(width, left_width)
    widths = table_column_widths(left_width)
    divider = _styled(theme.divider, DIVIDER, theme)

    table_rows = table_view_rows(height)
    left_lines = [
        _styled(theme.pane_title, pad_ansi_line(TABLE_TITLE, left_width), theme),
        pad_ansi_line(format_table_heading(widths, theme), left_width),
    ]
    for row in range(table_rows):
        idx = context.table_start + row
        if idx >= len(context.entries):
            left_lines.append(" " * left_width)
            continue
        line = format_table_row(
            context.entries[idx],
            widths,
            theme,
            selected=idx == context.selected_index,
        )
        left_lines.append(pad_ansi_line(line, left_width))

    right_lines = [_styled(theme.pane_title, pad_ansi_line(PREVIEW_TITLE, right_width), theme)]
    for row in range(preview_view_rows(height)):
        text = context.preview_lines[row] if row < len(context.preview_lines) else ""
        right_lines.append(pad_ansi_line(text, right_width))

    lines = [header_text(context.current_path, width, theme)]
    body_rows = height - 2
    for row in range(body_rows):
        left = left_lines[row] if row < len(left_lines) else " " * left_width
        right = right_lines[row] if row < len(right_lines) else ""
        lines.append(f"{left}{divider}{right}")
    footer = pad_ansi_line(footer_text(context.status, theme), width)
    lines.append(footer)
    return lines


def render_frame(context: RenderContext) -> None:
    out = "\033[H\033[J" + "\r\n".join(build_frame_lines(context))
    os.write(sys.stdout.fileno(), out.encode("utf-8", errors="replace"))


__all__ = [
    "TABLE_TITLE",
    "PREVIEW_TITLE",
    "HEADER_PREFIX",
    "RenderContext",
    "compute_left_width",
    "clamp_left_width",
    "right_pane_width",
    "table_view_rows",
    "preview_view_rows",
    "visible_table_start",
    "table_column_widths",
    "format_table_row",
    "footer_text",
    "header_text",
    "build_frame_lines",
    "render_frame",
]
