"""Text decoding, terminal sanitizing, and syntax highlighting for previews.

Decoding is tolerant: UTF-8 with BOM handling, else latin-1. Control characters that
would move the cursor or ring the bell are escaped before display.
"""

from __future__ import annotations

import re
from pathlib import Path

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")

_FORMATTERS: dict[str, Terminal256Formatter] = {}
_INVALID_STYLES: set[str] = set()


def decode_text(data: bytes) -> str:
    """Decode ``data`` as UTF-8 (dropping a leading BOM), else latin-1."""
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control characters (C0 except tab/LF/CR, DEL, C1)."""
    if _CONTROL_RE.search(source) is None:
        return source
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", source)


def _formatter_for_style(style: str) -> Terminal256Formatter:
    if style in _INVALID_STYLES:
        style = DEFAULT_STYLE
    formatter = _FORMATTERS.get(style)
    if formatter is not None:
        return formatter
    try:
        get_style_by_name(style)
    except ClassNotFound:
        _INVALID_STYLES.add(style)
        style = DEFAULT_STYLE
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = Terminal256Formatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def colorize_source(source: str, path: Path, style: str = DEFAULT_STYLE) -> str:
    """Highlight ``source`` using the lexer registered for ``path``'s name.

    Returns ``source`` unchanged when no lexer matches the file name.
    """
    try:
        lexer = get_lexer_for_filename(path.name, source, stripnl=False)
    except ClassNotFound:
        return source
    rendered = highlight(source, lexer, _formatter_for_style(style))
    # pygments always terminates output with a newline.
    if not source.endswith("\n") and rendered.endswith("\n"):
        rendered = rendered[:-1]
    return rendered


__all__ = [
    "DEFAULT_STYLE",
    "decode_text",
    "sanitize_terminal_text",
    "colorize_source",
]
