"""Application-wide logger writing to platformdirs user_log_dir.

The terminal belongs to the timer screen, so nothing is logged to it.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "pomodoro-tui"
_LOGGER_NAME = "pomodoro_tui"
_LOG_FILE = "pomodoro.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def get_logger(level: str | None = None) -> logging.Logger:
    """Return the singleton application logger, initialising it on first call.

    Module loggers under ``pomodoro_tui.*`` propagate into it. A *level*
    given on any call is applied to the logger.
    """
    global _logger
    if _logger is not None:
        if level:
            _logger.setLevel(level.upper())
        return _logger

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel((level or "INFO").upper())
    logger.propagate = False
    if any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    ):
        _logger = logger
        return _logger

    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
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

    logger.addHandler(handler)

    _logger = logger
    return _logger
