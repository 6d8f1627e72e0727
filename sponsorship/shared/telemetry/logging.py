"""Logging configuration for the application."""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from sponsorship.core.config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise settings.log_level.
    Output goes to stdout and, when settings.log_file is set, to a daily
    rotated file keeping settings.log_retention_days backups.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.getLevelName(
        settings.log_level.upper()
    )
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {settings.log_level!r}")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings.log_file:
        path = Path(settings.log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            TimedRotatingFileHandler(
                path,
                when="midnight",
                backupCount=settings.log_retention_days,
                encoding="utf-8",
            )
        )
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
