"""Summary: Sequential organizer copying tagged files into the library tree.
Why: Drive validation, sanitization and path composition for every listed file."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

from remixer.exceptions import MetadataReadError
from remixer.features.metadata.domain.validator import (
    MetadataValidator,
    MissingMetadata,
    NoTagsPresent,
    ValidMetadata,
)
from remixer.features.path.domain.sanitizer import Sanitizer
from remixer.features.path.usecases.path_composer import destination_for, sanitize_fields
from remixer.platform.logging import logger
from remixer.shared.events import ProcessingEvent
from remixer.shared.profile import STRICT, OrganizerProfile

from .ports import FilesystemPort, MetadataReaderPort
from .processing_types import FileOutcome, FileState, RejectionReason, RunStats


class Organizer:
    """Organize audio files one at a time according to an ``OrganizerProfile``.

    Per file: read metadata, validate, then either sanitize, compose the
    destination, ensure its directory and copy (succeeded), or reject. Rejected
    files without tags or with missing fields are copied to the quarantine
    directory under their original name when the profile enables it. Files
    whose metadata cannot be read are logged and left where they are.
    Filesystem errors while ensuring directories or copying propagate.
    """

    def __init__(
        self,
        *,
        output_dir: Path,
        reader: MetadataReaderPort,
        filesystem: FilesystemPort,
        profile: OrganizerProfile = STRICT,
        quarantine_dir: Path | None = None,
    ) -> None:
        if profile.quarantine_enabled and quarantine_dir is None:
            raise ValueError(f"Profile {profile.name!r} requires a quarantine directory")

        self.output_dir: Path = output_dir
        self.quarantine_dir: Path | None = quarantine_dir
        self.profile: OrganizerProfile = profile
        self.reader: MetadataReaderPort = reader
        self.filesystem: FilesystemPort = filesystem
        self.validator: MetadataValidator = MetadataValidator(profile)
        self.sanitizer: Sanitizer = Sanitizer.for_profile(profile)

    def _log(
        self,
        level: int,
        event: ProcessingEvent,
        message: str,
        *message_args: object,
        **context: object,
    ) -> None:
        extra: dict[str, object] = {"processing_event": event}
        extra.update({key: value for key, value in context.items() if value is not None})
        logger.log(level, message, *message_args, extra=extra)

    def run(self, files: Sequence[Path], *, source_root: Path | None = None) -> RunStats:
        """Process ``files`` in order and return the run statistics."""

        stats = RunStats()
        self._log(
            logging.INFO,
            ProcessingEvent.RUN_START,
            "Organizing %d file(s) [profile=%s, output=%s]",
            len(files),
            self.profile.name,
            self.output_dir,
            total_files=len(files),
            profile=self.profile.name,
        )
        for outcome in self.iter_outcomes(files, source_root=source_root):
            stats.record(outcome)

        self._log(
            logging.INFO,
            ProcessingEvent.RUN_COMPLETE,
            "Run complete [processed=%d, organized=%d, needing_intervention=%d]",
            stats.processed,
            stats.organized,
            stats.needing_intervention,
            **stats.summary_extra(),
        )
        return stats

    def iter_outcomes(
        self, files: Sequence[Path], *, source_root: Path | None = None
    ) -> Iterator[FileOutcome]:
        """Yield one outcome per file; each file completes before the next starts."""

        total = len(files)
        for index, file_path in enumerate(files, start=1):
            yield self.process_file(
                file_path, sequence=index, total=total, source_root=source_root
            )

    def process_file(
        self,
        file_path: Path,
        *,
        sequence: int | None = None,
        total: int | None = None,
        source_root: Path | None = None,
    ) -> FileOutcome:
        """Organize a single file.

        Raises:
            OSError: If creating the destination directory or copying fails.
        """
        context: dict[str, object] = {
            "sequence": sequence,
            "total_files": total,
            "source_path": file_path,
            "source_base_path": source_root,
        }
        self._log(
            logging.INFO,
            ProcessingEvent.FILE_START,
            "Processing %s",
            file_path,
            **context,
        )

        try:
            raw = self.reader.read(file_path)
        except MetadataReadError as exc:
            self._log(
                logging.ERROR,
                ProcessingEvent.FILE_READ_ERROR,
                "Error occurred while parsing audio file %s! %s",
                file_path,
                exc.reason,
                reason=exc.reason,
                **context,
            )
            return FileOutcome(
                source_path=file_path,
                state=FileState.REJECTED,
                reason=RejectionReason.READ_ERROR,
                error_message=exc.reason,
            )

        result = self.validator.validate(raw)

        if isinstance(result, NoTagsPresent):
            logger.warning("No metadata tags %s", file_path)
            return self._reject(
                file_path,
                RejectionReason.NO_TAGS,
                tag_formats=raw.tag_formats,
                context=context,
            )

        if isinstance(result, MissingMetadata):
            return self._reject(
                file_path,
                RejectionReason.MISSING_FIELDS,
                tag_formats=raw.tag_formats,
                missing=result.missing,
                warnings=result.warnings,
                context=context,
            )

        return self._organize(file_path, result, tag_formats=raw.tag_formats, context=context)

    def _organize(
        self,
        file_path: Path,
        metadata: ValidMetadata,
        *,
        tag_formats: frozenset[str],
        context: dict[str, object],
    ) -> FileOutcome:
        fields = sanitize_fields(metadata, sanitizer=self.sanitizer, profile=self.profile)
        target = destination_for(file_path, self.output_dir, fields)

        if self.filesystem.ensure_directory(target.parent):
            self._log(
                logging.INFO,
                ProcessingEvent.DIRECTORY_CREATE,
                "Artist/Album path %s did not exist. Created it",
                target.parent,
                target_path=target.parent,
                target_base_path=self.output_dir,
            )
        _ = self.filesystem.copy_file(file_path, target)

        self._log(
            logging.INFO,
            ProcessingEvent.FILE_ORGANIZED,
            "%s >>> %s",
            file_path,
            target,
            target_path=target,
            target_base_path=self.output_dir,
            **context,
        )
        return FileOutcome(
            source_path=file_path,
            state=FileState.SUCCEEDED,
            target_path=target,
            tag_formats=tag_formats,
            warnings=metadata.warnings,
        )

    def _reject(
        self,
        file_path: Path,
        reason: RejectionReason,
        *,
        tag_formats: frozenset[str],
        context: dict[str, object],
        missing: tuple[str, ...] = (),
        warnings: tuple[str, ...] = (),
    ) -> FileOutcome:
        detail = f"missing {', '.join(missing)}" if missing else "no tags"
        quarantine_path: Path | None = None

        if self.profile.quarantine_enabled and self.quarantine_dir is not None:
            _ = self.filesystem.ensure_directory(self.quarantine_dir)
            quarantine_path = self.quarantine_dir / file_path.name
            _ = self.filesystem.copy_file(file_path, quarantine_path)
            self._log(
                logging.WARNING,
                ProcessingEvent.FILE_QUARANTINED,
                "%s >>> %s (%s)",
                file_path,
                quarantine_path,
                detail,
                target_path=quarantine_path,
                target_base_path=self.quarantine_dir,
                reason=detail,
                **context,
            )
        else:
            self._log(
                logging.WARNING,
                ProcessingEvent.FILE_SKIPPED,
                "Skipping %s (%s)",
                file_path,
                detail,
                reason=detail,
                **context,
            )

        return FileOutcome(
            source_path=file_path,
            state=FileState.REJECTED,
            reason=reason,
            quarantine_path=quarantine_path,
            tag_formats=tag_formats,
            missing_fields=missing,
            warnings=warnings,
        )


__all__ = ["Organizer"]
