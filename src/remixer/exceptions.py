"""Summary: Exception hierarchy shared across RE-MIXER layers.
Why: Let the CLI tell read failures, config problems and I/O errors apart."""

from __future__ import annotations

from pathlib import Path


class RemixerError(Exception):
    """Base class for errors raised by RE-MIXER."""


class ConfigError(RemixerError):
    """Raised when configuration values cannot be used."""


class MetadataReadError(RemixerError):
    """Raised when an audio file's metadata cannot be decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read metadata from {path}: {reason}")
        self.path: Path = path
        self.reason: str = reason


__all__ = ["ConfigError", "MetadataReadError", "RemixerError"]
