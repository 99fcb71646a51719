"""Summary: Organization feature: the sequential organizer and its adapters.
Why: Give the application service and tests one import path."""

from .adapters import LocalFilesystemAdapter
from .usecases import (
    NO_TAGS_BUCKET,
    FileOutcome,
    FileState,
    Organizer,
    RejectionReason,
    RunStats,
)

__all__ = [
    "FileOutcome",
    "FileState",
    "LocalFilesystemAdapter",
    "NO_TAGS_BUCKET",
    "Organizer",
    "RejectionReason",
    "RunStats",
]
