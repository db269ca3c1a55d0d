"""Read-only JSON preferences.

Loads presentation preferences from ``config.json`` in the platform config
directory. Nothing is ever written back. All access is defensive: a missing,
unreadable, or malformed file, or an invalid value, falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .syntax import DEFAULT_STYLE

APP_NAME = "lazyexplorer"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class ExplorerConfig:
    theme: str | None = None
    style: str = DEFAULT_STYLE
    no_color: bool = False
    left_pane_percent: float | None = None
    log_level: int = logging.INFO


def load_config_data() -> dict[str, object]:
    """Return the top-level JSON object, or an empty dict on any failure."""
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _string(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _percent(value: object) -> float | None:
    """Accept numbers in the open interval (0, 100)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value <= 0 or value >= 100:
        return None
    return float(value)


def _log_level(value: object) -> int:
    name = _string(value)
    if name is None or name.upper() not in _LOG_LEVELS:
        return logging.INFO
    return logging.getLevelName(name.upper())


def load_config() -> ExplorerConfig:
    data = load_config_data()
    no_color = data.get("no_color")
    return ExplorerConfig(
        theme=_string(data.get("theme")),
        style=_string(data.get("style")) or DEFAULT_STYLE,
        no_color=no_color if isinstance(no_color, bool) else False,
        left_pane_percent=_percent(data.get("left_pane_percent")),
        log_level=_log_level(data.get("log_level")),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "ExplorerConfig",
    "load_config_data",
    "load_config",
]
