"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Build console and rotating-file handlers for the ``sharefs`` logger.
Why: Separate handler formatting from setup so configuration stays concise.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import ShareEventRichHandler

LOGGER_NAME: Final[str] = "sharefs"

_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 5


def _console_handler(console: Console | None, level: int) -> logging.Handler:
    handler = ShareEventRichHandler(console=console or Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = Path(log_file).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        target,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    *,
    console: Console | None = None,
) -> logging.Logger:
    """Replace the handlers of the ``sharefs`` logger.

    Args:
        log_file: Rotating log file to add. ``None`` keeps output on the console only.
        console_level: Level for the rich console handler.
        file_level: Level for the file handler.
        console: Console to render to. Defaults to stderr.

    Returns:
        logging.Logger: The reconfigured package logger.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(console, console_level))
    if log_file is not None:
        logger.addHandler(_file_handler(log_file, file_level))

    return logger


# Console only until a caller opts into a log file (see application.factory).
logger: Final[logging.Logger] = setup_logger()


__all__ = ["LOGGER_NAME", "setup_logger", "logger"]
