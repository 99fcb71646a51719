"""Application service for organizing a music library.

This layer centralizes construction of the organizer and its adapters so the
CLI (and tests) can run a whole pass from a ``Config`` in one call.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, final

from remixer.config.config import Config
from remixer.exceptions import ConfigError
from remixer.features.metadata.usecases.extraction import MetadataExtractor
from remixer.features.organization.adapters import LocalFilesystemAdapter
from remixer.features.organization.usecases import (
    FileListerPort,
    FilesystemPort,
    MetadataReaderPort,
    Organizer,
    RunStats,
)
from remixer.platform.logging import logger
from remixer.shared.profile import OrganizerProfile


@dataclass(frozen=True)
class OrganizeRequest:
    """Input parameters for one organizing pass.

    Attributes:
        input_dir: Root scanned recursively for audio files.
        output_dir: Root of the organized Artist/Album tree.
        quarantine_dir: Receives files whose tags are insufficient (strict profile).
        extensions: Accepted file extensions without the leading dot.
        profile: Organizing rules to apply.
    """

    input_dir: Path
    output_dir: Path
    quarantine_dir: Path | None
    extensions: tuple[str, ...]
    profile: OrganizerProfile

    @classmethod
    def from_config(cls, config: Config) -> "OrganizeRequest":
        profile = config.organizer_profile
        return cls(
            input_dir=config.input_dir,
            output_dir=config.output_dir,
            quarantine_dir=config.quarantine_dir if profile.quarantine_enabled else None,
            extensions=config.extensions,
            profile=profile,
        )


@final
class OrganizeLibraryService:
    """Application service that lists files and runs the organizer over them."""

    def __init__(
        self,
        *,
        lister_factory: Callable[[], FileListerPort] | None = None,
        reader_factory: Callable[[], MetadataReaderPort] | None = None,
        filesystem_factory: Callable[[], FilesystemPort] | None = None,
    ) -> None:
        """Create a service with overridable infrastructure factories."""

        self._lister_factory: Callable[[], FileListerPort] = (
            lister_factory or LocalFilesystemAdapter
        )
        self._reader_factory: Callable[[], MetadataReaderPort] = (
            reader_factory or MetadataExtractor
        )
        self._filesystem_factory: Callable[[], FilesystemPort] = (
            filesystem_factory or LocalFilesystemAdapter
        )

    def build_organizer(self, request: OrganizeRequest) -> Organizer:
        """Build an ``Organizer`` configured for ``request``."""

        return Organizer(
            output_dir=request.output_dir,
            quarantine_dir=request.quarantine_dir,
            profile=request.profile,
            reader=self._reader_factory(),
            filesystem=self._filesystem_factory(),
        )

    def run(self, request: OrganizeRequest) -> RunStats:
        """Scan ``request.input_dir`` and organize every matching file.

        Raises:
            ConfigError: If the input directory does not exist.
            OSError: If a copy or directory creation fails mid-run.
        """
        if not request.input_dir.is_dir():
            raise ConfigError(f"Input directory does not exist: {request.input_dir}")

        extensions = ",".join(request.extensions)
        logger.info(
            "Recursively scanning for %s files found within input path %s",
            extensions,
            request.input_dir,
        )
        files = self._lister_factory().list_files(request.input_dir, request.extensions)
        logger.info(
            "Found %d audio files (%s) to process within %s",
            len(files),
            extensions,
            request.input_dir,
        )

        organizer = self.build_organizer(request)
        stats = organizer.run(files, source_root=request.input_dir)

        logger.info("Processed files: %d", stats.processed)
        logger.info("Automatically organized files: %d", stats.organized)
        logger.info("Files needing manual intervention: %d", stats.needing_intervention)
        logger.info(
            "Metadata tag types encountered (multiples can occur): %s",
            dict(sorted(stats.tag_formats.items())),
        )
        return stats


__all__ = ["OrganizeLibraryService", "OrganizeRequest"]
