"""Application logger that writes to stderr and to a daily rotated file."""

from __future__ import annotations

import logging
import sys
import threading
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

DEFAULT_APP_NAME = "subkit"
LOG_FORMAT = "[%(levelname)s]: %(asctime)s - %(message)s"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def new_log_helper(
    app_name: str,
    level: int = logging.DEBUG,
    max_age_days: int = 7,
    log_root: str | Path | None = None,
) -> logging.Logger:
    """Configure and return the logger named ``app_name``.

    Records go to stderr and to ``<log_root>/<app_name>.log``, which is rotated
    once a day; only the last ``max_age_days`` rotated files are kept.
    ``log_root`` defaults to a ``Logs`` folder in the working directory.
    """
    root = Path(log_root) if log_root is not None else Path.cwd() / "Logs"
    root.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(app_name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, TIMESTAMP_FORMAT)

    file_handler = TimedRotatingFileHandler(
        root / f"{app_name}.log",
        when="D",
        interval=1,
        backupCount=max_age_days,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)

    logger.addHandler(stream_handler)
    logger.addHandler(file_handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger() -> logging.Logger:
    """Return the shared package logger, configuring it on first use."""
    global _logger
    with _logger_lock:
        if _logger is None:
            _logger = new_log_helper(DEFAULT_APP_NAME, logging.DEBUG, 7)
        return _logger