"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the explorer chrome (header, table, footer).
Syntax highlighting style for previews is a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the renderer."""

    name: str
    reset: str
    header: str
    pane_title: str
    column_heading: str
    divider: str
    selected: str
    entry_dir: str
    entry_file: str
    entry_meta: str
    footer: str
    footer_key: str
    footer_error: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    header="\033[1;97;44m",
    pane_title="\033[1;38;5;42m",
    column_heading="\033[1m",
    divider="\033[2m",
    selected="\033[1;97;42m",
    entry_dir="\033[34m",
    entry_file="\033[37m",
    entry_meta="\033[38;5;250m",
    footer="\033[37;100m",
    footer_key="\033[33;100m",
    footer_error="\033[31;100m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    header="\033[1;38;5;195;48;5;24m",
    pane_title="\033[1;38;5;45m",
    column_heading="\033[1;38;5;153m",
    divider="\033[2;38;5;31m",
    selected="\033[1;38;5;231;48;5;31m",
    entry_dir="\033[1;38;5;45m",
    entry_file="\033[38;5;252m",
    entry_meta="\033[38;5;73m",
    footer="\033[38;5;153;48;5;236m",
    footer_key="\033[38;5;215;48;5;236m",
    footer_error="\033[38;5;203;48;5;236m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    header="",
    pane_title="",
    column_heading="",
    divider="",
    selected="\033[7m",
    entry_dir="",
    entry_file="",
    entry_meta="",
    footer="",
    footer_key="",
    footer_error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
