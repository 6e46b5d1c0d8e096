"""Application-wide logger writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "countdown_cli"
_LOG_FILE = "countdown.log"
_LEVEL_ENV = "COUNTDOWN_LOG_LEVEL"
_DEFAULT_LEVEL = logging.INFO
_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 2

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    """Path of the active log file."""
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def _level_from_env() -> int:
    name = os.environ.get(_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else _DEFAULT_LEVEL
    return level if isinstance(level, int) else _DEFAULT_LEVEL


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call.

    Records go to a rotating file only; the terminal belongs to the
    full-screen display. Module loggers under ``countdown_cli.`` propagate
    here. The level comes from ``COUNTDOWN_LOG_LEVEL`` (default INFO).
    """
    global _logger
    if _logger is not None:
        return _logger

    path = log_file_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(_level_from_env())
    if not logger.handlers:
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger
