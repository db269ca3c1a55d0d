"""File logging for the explorer.

The terminal belongs to the UI while the explorer runs, so records go only to
a rotating log file under the platform log directory.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOGGER_NAME = "lazyexplorer"
DEFAULT_LOG_FILE = Path(user_log_dir(APP_NAME, appauthor=False)) / f"{APP_NAME}.log"
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3


def setup_logging(log_file: Path | None = DEFAULT_LOG_FILE, level: int = logging.INFO) -> logging.Logger:
    """Configure the package logger; installs a ``NullHandler`` if the file is unusable."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        except OSError:
            logger.addHandler(logging.NullHandler())
            return logger
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        logger.addHandler(handler)
        return logger

    logger.addHandler(logging.NullHandler())
    return logger


__all__ = [
    "LOGGER_NAME",
    "DEFAULT_LOG_FILE",
    "setup_logging",
]
