# Where: remixer.shared.events
# What: Structured event identifiers attached to organizer log records.
# Why: Let the console handler style events without parsing message text.

from enum import StrEnum


class ProcessingEvent(StrEnum):
    """Event identifiers passed as ``extra={"processing_event": ...}``."""

    RUN_START = "run.start"
    RUN_COMPLETE = "run.complete"
    FILE_START = "file.start"
    FILE_ORGANIZED = "file.organized"
    FILE_QUARANTINED = "file.quarantined"
    FILE_SKIPPED = "file.skipped"
    FILE_READ_ERROR = "file.read_error"
    FIELD_MISSING = "field.missing"
    DIRECTORY_CREATE = "directory.create"


__all__ = ["ProcessingEvent"]
