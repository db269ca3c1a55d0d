"""Key dispatch for the explorer.

Global keys (quit, go up, refresh) are checked first and short-circuit
widget-scoped handling. Remaining keys act on the entry table: movement keys
fire ``selection_changed`` and open keys fire ``activate``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .navigation import NavigationState

QUIT_KEYS = frozenset({"CTRL_C", "q"})
GO_UP_KEYS = frozenset({"BACKSPACE", "LEFT", "h"})
REFRESH_KEYS = frozenset({"r", "CTRL_R"})
ACTIVATE_KEYS = frozenset({"ENTER", "RIGHT", "l"})


@dataclass(frozen=True)
class KeyOutcome:
    handled: bool
    quit: bool = False


IGNORED = KeyOutcome(handled=False)


def handle_global_key(key: str, nav: NavigationState) -> KeyOutcome | None:
    """Return an outcome when ``key`` is a global shortcut, else ``None``."""
    if key in QUIT_KEYS:
        return KeyOutcome(handled=True, quit=True)
    if key in GO_UP_KEYS:
        nav.go_up()
        return KeyOutcome(handled=True)
    if key in REFRESH_KEYS:
        nav.refresh()
        return KeyOutcome(handled=True)
    return None


def target_index(key: str, current: int | None, total: int, page_rows: int) -> int | None:
    """Map a movement key to the new selected index, or ``None`` if not a movement key."""
    if total <= 0:
        return None
    idx = current if current is not None else 0
    page = max(1, page_rows)
    if key in {"UP", "k"}:
        idx -= 1
    elif key in {"DOWN", "j"}:
        idx += 1
    elif key == "PAGE_UP":
        idx -= page
    elif key == "PAGE_DOWN":
        idx += page
    elif key in {"HOME", "g"}:
        idx = 0
    elif key in {"END", "G"}:
        idx = total - 1
    else:
        return None
    return max(0, min(idx, total - 1))


def handle_table_key(key: str, nav: NavigationState, page_rows: int) -> KeyOutcome:
    if key in ACTIVATE_KEYS:
        if nav.selected_index is None:
            return IGNORED
        nav.activate(nav.selected_index)
        return KeyOutcome(handled=True)

    new_index = target_index(key, nav.selected_index, len(nav.entries), page_rows)
    if new_index is None:
        return IGNORED
    if new_index != nav.selected_index:
        nav.selection_changed(new_index)
    return KeyOutcome(handled=True)


def handle_key(key: str, nav: NavigationState, *, page_rows: int = 10) -> KeyOutcome:
    if not key:
        return IGNORED
    outcome = handle_global_key(key, nav)
    if outcome is not None:
        return outcome
    return handle_table_key(key, nav, page_rows)


__all__ = [
    "QUIT_KEYS",
    "GO_UP_KEYS",
    "REFRESH_KEYS",
    "ACTIVATE_KEYS",
    "KeyOutcome",
    "handle_global_key",
    "handle_table_key",
    "target_index",
    "handle_key",
]
