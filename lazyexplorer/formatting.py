"""Display formatting for sizes and timestamps, plus binary-content detection."""

from __future__ import annotations

from datetime import datetime

SIZE_UNIT = 1024
SIZE_UNIT_LETTERS = "KMGTPE"
MTIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Control bytes that still count as text.
_TEXT_CONTROL_BYTES = frozenset(b"\t\n\r")


def format_size(size: int) -> str:
    """Render a byte count as ``"500 B"``, ``"1.0 KB"``, ``"1.5 MB"``, ...

    Bytes are printed as integers; larger units use one decimal and the first
    unit whose quotient stays below 1024.
    """
    if size < SIZE_UNIT:
        return f"{size} B"
    divisor = SIZE_UNIT
    exponent = 0
    quotient = size // SIZE_UNIT
    while quotient >= SIZE_UNIT and exponent < len(SIZE_UNIT_LETTERS) - 1:
        divisor *= SIZE_UNIT
        exponent += 1
        quotient //= SIZE_UNIT
    return f"{size / divisor:.1f} {SIZE_UNIT_LETTERS[exponent]}B"


def format_mtime(modified_at: datetime | None) -> str:
    if modified_at is None:
        return ""
    return modified_at.strftime(MTIME_FORMAT)


def is_binary(data: bytes) -> bool:
    """Return whether ``data`` holds NUL or non-whitespace C0 control bytes."""
    for byte in data:
        if byte < 0x20 and byte not in _TEXT_CONTROL_BYTES:
            return True
    return False


__all__ = [
    "MTIME_FORMAT",
    "format_size",
    "format_mtime",
    "is_binary",
]
