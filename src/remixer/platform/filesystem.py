"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import shutil
from collections.abc import Iterable
from pathlib import Path


def ensure_directory(directory: Path) -> bool:
    """Ensure ``directory`` exists as a folder.

    Returns True when the directory had to be created. Creation tolerates the
    directory appearing concurrently between the check and the ``mkdir``.
    """

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return False

    directory.mkdir(parents=True, exist_ok=True)
    return True


def copy_file(source: Path, destination: Path) -> Path:
    """Copy the bytes of ``source`` to ``destination``, replacing any existing file."""

    return Path(shutil.copyfile(source, destination))


def list_files(root: Path, extensions: Iterable[str]) -> list[Path]:
    """Recursively list files under ``root`` whose suffix is in ``extensions``.

    Extensions are matched case-insensitively, with or without a leading dot.
    The result is sorted so repeated runs see files in the same order.
    """

    wanted = {"." + ext.lower().lstrip(".") for ext in extensions}
    return sorted(
        path for path in root.rglob("*") if path.is_file() and path.suffix.lower() in wanted
    )


__all__ = ["copy_file", "ensure_directory", "list_files"]
