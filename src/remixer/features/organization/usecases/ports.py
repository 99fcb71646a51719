"""Ports for organization use cases.

Where: features/organization/usecases.
What: Protocols describing the file lister, metadata reader and filesystem the organizer drives.
Why: Keep the organizer free of I/O so tests can inject in-memory fakes.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol, runtime_checkable

from remixer.shared.raw_metadata import RawMetadata


@runtime_checkable
class FileListerPort(Protocol):
    """Port producing the audio files to organize."""

    def list_files(self, root: Path, extensions: Iterable[str]) -> list[Path]:
        """Return files under ``root`` with a matching extension, in processing order."""
        ...


@runtime_checkable
class MetadataReaderPort(Protocol):
    """Port decoding the embedded tags of one file."""

    def read(self, file_path: Path) -> RawMetadata:
        """Return the file's metadata or raise ``MetadataReadError``."""
        ...


@runtime_checkable
class FilesystemPort(Protocol):
    """Port for directory creation and byte copies."""

    def ensure_directory(self, directory: Path) -> bool:
        """Create ``directory`` and its parents if absent; True when created."""
        ...

    def copy_file(self, source: Path, destination: Path) -> Path:
        """Copy ``source`` byte-for-byte to ``destination``."""
        ...


__all__ = ["FileListerPort", "FilesystemPort", "MetadataReaderPort"]
