"""ANSI-aware text measurement and line shaping.

Escape sequences never count toward width. Tabs expand to 8-column stops and
East Asian wide characters take two cells.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
RESET = "\033[0m"


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for ``ch`` printed at visual column ``col``."""
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    col = 0
    for ch in ANSI_ESCAPE_RE.sub("", text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns."""
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if col + w > max_cols:
            break
        out.append(" " * w if ch == "\t" else ch)
        col += w
        i += 1
    return "".join(out)


def pad_ansi_line(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` then right-pad with spaces to exactly ``width``."""
    clipped = clip_ansi_line(text, width)
    if "\x1b" in clipped:
        clipped += RESET
    return clipped + " " * max(0, width - display_width(clipped))


def wrap_ansi_line(text: str, width: int) -> list[str]:
    """Wrap a styled line into chunks of at most ``width`` columns.

    The last SGR sequence seen is replayed at the start of each continuation
    chunk so colors survive the break.
    """
    if width <= 0 or not text:
        return [""]

    wrapped: list[str] = []
    chunk: list[str] = []
    active_sgr = ""
    col = 0
    i = 0
    n = len(text)
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                seq = match.group(0)
                if seq.endswith("m"):
                    active_sgr = "" if seq in {RESET, "\033[m"} else seq
                chunk.append(seq)
                i = match.end()
                continue

        ch = text[i]
        w = char_display_width(ch, col)
        if col + w > width and col > 0:
            wrapped.append("".join(chunk))
            chunk = [active_sgr] if active_sgr else []
            col = 0
            w = char_display_width(ch, col)
        chunk.append(" " * w if ch == "\t" else ch)
        col += w
        i += 1

    wrapped.append("".join(chunk))
    return wrapped


def build_screen_lines(text: str, width: int) -> list[str]:
    """Split ``text`` into wrapped screen lines without line terminators."""
    lines = text.splitlines()
    if not lines:
        return [""]
    out: list[str] = []
    for line in lines:
        out.extend(wrap_ansi_line(line, width))
    return out


__all__ = [
    "ANSI_ESCAPE_RE",
    "RESET",
    "char_display_width",
    "display_width",
    "clip_ansi_line",
    "pad_ansi_line",
    "wrap_ansi_line",
    "build_screen_lines",
]
