"""Diagnostic logging setup.

The terminal belongs to the TUI while it runs, so records go to a rotating
file under the platform log directory instead of stderr.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "funkhunt"
LOG_FILENAME = "funkhunt.log"
DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME
DEFAULT_LOG_LEVEL = "WARNING"
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_TAG_ATTR = "_funkhunt_handler"


def _tag_handler(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def _remove_our_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG_ATTR, False):
            logger.removeHandler(handler)
            handler.close()


def configure_logging(level: str | None = None, log_file: Path | None = None) -> logging.Logger:
    """Attach a rotating file handler to the package logger.

    Calling again replaces the previous handler, so level changes take effect.
    When the log file cannot be opened a ``NullHandler`` is installed and the
    session continues without diagnostics.
    """
    package_logger = logging.getLogger(APP_NAME)
    level_name = (level or DEFAULT_LOG_LEVEL).upper()
    package_logger.setLevel(getattr(logging, level_name, logging.WARNING))
    package_logger.propagate = False
    _remove_our_handlers(package_logger)

    target = log_file if log_file is not None else DEFAULT_LOG_PATH
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = RotatingFileHandler(
            target,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    except OSError:
        handler = logging.NullHandler()

    package_logger.addHandler(_tag_handler(handler))
    return package_logger


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_LOG_PATH",
    "configure_logging",
]
