"""Summary: Organization use cases.
Why: Expose the organizer, its ports and result types from one module."""

from .organizer import Organizer
from .ports import FileListerPort, FilesystemPort, MetadataReaderPort
from .processing_types import (
    NO_TAGS_BUCKET,
    FileOutcome,
    FileState,
    RejectionReason,
    RunStats,
)

__all__ = [
    "FileListerPort",
    "FileOutcome",
    "FileState",
    "FilesystemPort",
    "MetadataReaderPort",
    "NO_TAGS_BUCKET",
    "Organizer",
    "RejectionReason",
    "RunStats",
]
