"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Build the ``remixer`` logger from a Rich console handler and an optional run log.
Why: Let the CLI attach a per-run log file once the log directory is known.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import LOG_PREFIX, RemixerRichHandler

LOGGER_NAME: Final[str] = "remixer"
FILE_LOG_FORMAT: Final[str] = f"%(asctime)s - {LOG_PREFIX} - %(levelname)s - %(message)s"
MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
LOG_BACKUPS: Final[int] = 5


def _console_handler(console: Console | None, level: int) -> logging.Handler:
    handler = RemixerRichHandler(console=console or Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = log_file.expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        target, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """(Re)configure the package logger.

    Handlers from a previous call are closed first, so calling this again
    with a new ``log_file`` moves file output to that file.

    Args:
        log_file: Plain-text log destination. Console only when None.
        console_level: Minimum level rendered on the console.
        file_level: Minimum level written to ``log_file``.
        console: Rich console to render to; stderr when omitted.

    Returns:
        logging.Logger: The ``remixer`` logger.
    """

    configured = logging.getLogger(LOGGER_NAME)
    configured.setLevel(logging.DEBUG)
    while configured.handlers:
        stale = configured.handlers.pop()
        stale.close()

    configured.addHandler(_console_handler(console, console_level))
    if log_file is not None:
        configured.addHandler(_file_handler(Path(log_file), file_level))
    return configured


logger: Final[logging.Logger] = setup_logger()


__all__ = ["LOGGER_NAME", "logger", "setup_logger"]
