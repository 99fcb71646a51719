"""src/remixer/features/organization/usecases/processing_types.py
Where: Organization feature usecases layer.
What: Per-file outcomes and the run statistics folded from them.
Why: Keep the organizer lean and its counters an explicit value rather than global state.
"""

from __future__ import annotations

import time
from collections import Counter
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any, Final

NO_TAGS_BUCKET: Final[str] = "None"


class FileState(StrEnum):
    """Terminal states of the per-file state machine."""

    SUCCEEDED = "succeeded"
    REJECTED = "rejected"


class RejectionReason(StrEnum):
    """Why a file was not organized."""

    READ_ERROR = "read_error"
    NO_TAGS = "no_tags"
    MISSING_FIELDS = "missing_fields"


@dataclass(frozen=True, slots=True)
class FileOutcome:
    """Result of processing one audio file."""

    source_path: Path
    state: FileState
    reason: RejectionReason | None = None
    target_path: Path | None = None
    quarantine_path: Path | None = None
    tag_formats: frozenset[str] = frozenset()
    missing_fields: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    error_message: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.state is FileState.SUCCEEDED

    @property
    def quarantined(self) -> bool:
        return self.quarantine_path is not None


@dataclass(slots=True)
class RunStats:
    """Counters for one organizing pass.

    ``processed == organized + needing_intervention`` holds after every
    ``record`` call. ``tag_formats`` counts each tag format once per readable
    file, with files carrying no tags at all counted under ``"None"``.
    """

    processed: int = 0
    organized: int = 0
    needing_intervention: int = 0
    quarantined: int = 0
    skipped: int = 0
    read_errors: int = 0
    tag_formats: Counter[str] = field(default_factory=lambda: Counter({NO_TAGS_BUCKET: 0}))
    start_time: float = field(default_factory=time.perf_counter)

    def record(self, outcome: FileOutcome) -> None:
        """Fold one file outcome into the counters."""

        self.processed += 1
        if outcome.succeeded:
            self.organized += 1
        else:
            self.needing_intervention += 1
            if outcome.quarantined:
                self.quarantined += 1
            elif outcome.reason is RejectionReason.READ_ERROR:
                self.read_errors += 1
            else:
                self.skipped += 1

        if outcome.reason is RejectionReason.NO_TAGS:
            self.tag_formats[NO_TAGS_BUCKET] += 1
        elif outcome.reason is not RejectionReason.READ_ERROR:
            for tag_format in sorted(outcome.tag_formats):
                self.tag_formats[tag_format] += 1

    def duration_seconds(self) -> float:
        """Return the elapsed time since the run started."""

        return time.perf_counter() - self.start_time

    def summary_extra(self) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        return {
            "processed": self.processed,
            "organized": self.organized,
            "needing_intervention": self.needing_intervention,
            "quarantined": self.quarantined,
            "skipped": self.skipped,
            "read_errors": self.read_errors,
            "duration_seconds": round(self.duration_seconds(), 4),
        }


__all__ = [
    "FileOutcome",
    "FileState",
    "NO_TAGS_BUCKET",
    "RejectionReason",
    "RunStats",
]
