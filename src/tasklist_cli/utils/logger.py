"""Application-wide logger writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "tasklist_cli"
_LOG_FILE = "tasklist.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    """Location of the active log file."""
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def get_logger(level: str | None = None) -> logging.Logger:
    """Return the application logger, attaching the file handler on first call.

    Module loggers (``logging.getLogger(__name__)``) live under the
    ``tasklist_cli`` namespace and end up in the same file.

    Args:
        level: ``debug``, ``info``, ``warning`` or ``error``. Applied on
            every call that passes it; the logger starts at ``debug``.
    """
    global _logger
    if _logger is None:
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
        logger.setLevel(logging.DEBUG)
        if not logger.handlers:
            logger.addHandler(handler)
        logger.propagate = False
        _logger = logger

    if level is not None:
        _logger.setLevel(level.upper())
    return _logger
