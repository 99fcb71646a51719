"""src/remixer/features/organization/adapters/filesystem_adapter.py
What: Adapter implementing the lister and filesystem ports on top of platform helpers.
Why: Keep filesystem I/O in adapters while use cases target abstractions."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from remixer.features.organization.usecases.ports import FileListerPort, FilesystemPort
from remixer.platform.filesystem import copy_file, ensure_directory, list_files


class LocalFilesystemAdapter(FileListerPort, FilesystemPort):
    """Adapter delegating to the shared platform filesystem module."""

    def list_files(self, root: Path, extensions: Iterable[str]) -> list[Path]:
        return list_files(root, extensions)

    def ensure_directory(self, directory: Path) -> bool:
        return ensure_directory(directory)

    def copy_file(self, source: Path, destination: Path) -> Path:
        return copy_file(source, destination)


__all__ = ["LocalFilesystemAdapter"]
