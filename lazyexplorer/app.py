"""Explorer session bootstrap and the interactive main loop.

The session owns the single ``NavigationState`` for the process lifetime and
caches the wrapped preview text per pane width. The loop polls input with a
short timeout so terminal resizes repaint without a key press.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
import termios
from dataclasses import dataclass, field
from pathlib import Path

from .ansi import build_screen_lines
from .errors import WorkingDirectoryUnavailable
from .fs import LocalFileSystem
from .input import read_key
from .key_handlers import handle_key
from .navigation import NavigationFileSystem, NavigationState
from .preview import PreviewResult, preview_text
from .render import (
    RenderContext,
    compute_left_width,
    render_frame,
    right_pane_width,
    table_view_rows,
    visible_table_start,
)
from .syntax import DEFAULT_STYLE
from .terminal import TerminalController
from .ui_theme import DEFAULT_THEME, UITheme

logger = logging.getLogger(__name__)

INPUT_POLL_MS = 200
FALLBACK_PATH = Path(".")


def resolve_start_path(fs: LocalFileSystem) -> Path:
    """Return the working directory, or ``.`` when it cannot be resolved."""
    try:
        return fs.working_directory()
    except WorkingDirectoryUnavailable as exc:
        logger.warning("%s; falling back to %s", exc, FALLBACK_PATH)
        return FALLBACK_PATH


def create_navigation_state(fs: NavigationFileSystem, start_path: Path) -> NavigationState:
    nav = NavigationState(fs=fs, current_path=start_path)
    nav.load_directory(start_path)
    return nav


@dataclass
class ExplorerSession:
    nav: NavigationState
    theme: UITheme = DEFAULT_THEME
    style: str = DEFAULT_STYLE
    colorize: bool = True
    left_pane_percent: float | None = None
    table_start: int = 0
    dirty: bool = True
    _preview_source: PreviewResult | None = field(default=None, repr=False)
    _preview_width: int = field(default=-1, repr=False)
    _preview_lines: list[str] = field(default_factory=list, repr=False)

    def preview_lines(self, width: int) -> list[str]:
        """Wrapped preview text for ``width``, rebuilt only when the preview or width changes."""
        preview = self.nav.preview
        if self._preview_width == width and self._preview_source is preview and self._preview_lines:
            return self._preview_lines
        text = preview_text(preview, colorize=self.colorize, style=self.style)
        self._preview_lines = build_screen_lines(text, width)
        self._preview_source = preview
        self._preview_width = width
        return self._preview_lines

    def build_context(self, width: int, height: int) -> RenderContext:
        left_width = compute_left_width(width, self.left_pane_percent)
        self.table_start = visible_table_start(
            self.nav.selected_index,
            self.table_start,
            table_view_rows(height),
            len(self.nav.entries),
        )
        return RenderContext(
            current_path=self.nav.current_path,
            entries=self.nav.entries,
            selected_index=self.nav.selected_index,
            table_start=self.table_start,
            preview_lines=self.preview_lines(right_pane_width(width, left_width)),
            status=self.nav.status,
            width=width,
            height=height,
            left_width=left_width,
            theme=self.theme,
        )

    def handle_key(self, key: str, height: int) -> bool:
        """Dispatch ``key``; returns ``False`` when the session should end."""
        outcome = handle_key(key, self.nav, page_rows=table_view_rows(height))
        if outcome.handled:
            self.dirty = True
        return not outcome.quit


def run_main_loop(session: ExplorerSession, terminal: TerminalController, stdin_fd: int) -> None:
    last_size: tuple[int, int] | None = None
    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                session.dirty = True
            if session.dirty:
                render_frame(session.build_context(term.columns, term.lines))
                session.dirty = False

            key = read_key(stdin_fd, timeout_ms=INPUT_POLL_MS)
            if not key:
                continue
            if not session.handle_key(key, term.lines):
                logger.debug("quit requested")
                return


def run_explorer(
    theme: UITheme = DEFAULT_THEME,
    style: str = DEFAULT_STYLE,
    no_color: bool = False,
    left_pane_percent: float | None = None,
) -> None:
    """Start the explorer in the working directory and block until quit.

    Raises ``SystemExit`` when the terminal cannot be initialized.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not os.isatty(stdin_fd) or not os.isatty(stdout_fd):
        raise SystemExit("lazyexplorer needs an interactive terminal")
    try:
        terminal = TerminalController(stdin_fd, stdout_fd)
    except termios.error as exc:
        raise SystemExit(f"cannot initialize terminal: {exc}") from exc

    fs = LocalFileSystem()
    nav = create_navigation_state(fs, resolve_start_path(fs))
    session = ExplorerSession(
        nav=nav,
        theme=theme,
        style=style,
        colorize=not no_color,
        left_pane_percent=left_pane_percent,
    )
    logger.info("starting in %s", nav.current_path)
    run_main_loop(session, terminal, stdin_fd)


__all__ = [
    "INPUT_POLL_MS",
    "FALLBACK_PATH",
    "ExplorerSession",
    "resolve_start_path",
    "create_navigation_state",
    "run_main_loop",
    "run_explorer",
]
