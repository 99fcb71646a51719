"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helper and Rich handler.
Why: Provide a single canonical import path.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import LOG_PREFIX, RemixerRichHandler

__all__ = [
    "LOGGER_NAME",
    "LOG_PREFIX",
    "RemixerRichHandler",
    "logger",
    "setup_logger",
]
