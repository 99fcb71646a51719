"""Summary: Decide whether a raw metadata record can name and place its file.
Why: Report every missing field by name so untagged files can be fixed by hand."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from remixer.platform.logging import logger
from remixer.shared.events import ProcessingEvent
from remixer.shared.profile import STRICT, OrganizerProfile
from remixer.shared.raw_metadata import RawMetadata


ARTIST: Final[str] = "Artist"
ALBUM: Final[str] = "Album"
ALBUM_ARTIST: Final[str] = "Album Artist"
TITLE: Final[str] = "Title"
PICTURE: Final[str] = "Picture"
TRACK_NUMBER: Final[str] = "Track number"
TRACK_TOTAL: Final[str] = "Track number out of"


@dataclass(frozen=True, slots=True)
class ValidMetadata:
    """All required fields are present."""

    artist: str
    album: str
    album_artist: str | None
    title: str
    track_number: int
    track_total: int
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class MissingMetadata:
    """One or more required fields are absent."""

    missing: tuple[str, ...]
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class NoTagsPresent:
    """The file carries no embedded tag format at all."""


ValidationResult = ValidMetadata | MissingMetadata | NoTagsPresent


class MetadataValidator:
    """Check a RawMetadata record against the profile's required fields."""

    def __init__(self, profile: OrganizerProfile = STRICT) -> None:
        self.profile: OrganizerProfile = profile

    def validate(self, raw: RawMetadata) -> ValidationResult:
        """Validate ``raw``.

        Records without any tag format short-circuit to ``NoTagsPresent``.
        Otherwise every field is checked and each absent one is logged, so a
        record missing several fields reports all of them.

        Args:
            raw: Metadata as returned by the reader.

        Returns:
            ValidationResult: ``ValidMetadata`` when artist, album, title,
            track number and track count are all present, ``MissingMetadata``
            listing the absent required fields otherwise.
        """
        if not raw.has_tags:
            return NoTagsPresent()

        missing: list[str] = []
        warnings: list[str] = []

        def require(name: str, value: object) -> None:
            if not self._is_present(name, value):
                missing.append(name)

        def advise(name: str, value: object) -> None:
            if not self._is_present(name, value):
                warnings.append(name)

        require(ARTIST, raw.artist)
        require(ALBUM, raw.album)
        if self.profile.checks_optional_fields:
            advise(ALBUM_ARTIST, raw.album_artist)
        require(TITLE, raw.title)
        if self.profile.checks_optional_fields:
            advise(PICTURE, raw.has_artwork)
        require(TRACK_NUMBER, raw.track.number)
        require(TRACK_TOTAL, raw.track.total)

        if missing:
            return MissingMetadata(missing=tuple(missing), warnings=tuple(warnings))

        assert raw.artist and raw.album and raw.title
        assert raw.track.number is not None and raw.track.total is not None
        return ValidMetadata(
            artist=raw.artist,
            album=raw.album,
            album_artist=raw.album_artist or None,
            title=raw.title,
            track_number=raw.track.number,
            track_total=raw.track.total,
            warnings=tuple(warnings),
        )

    @staticmethod
    def _is_present(name: str, value: object) -> bool:
        if value:
            return True
        logger.warning(
            "%s metadata missing",
            name,
            extra={
                "processing_event": ProcessingEvent.FIELD_MISSING,
                "field_name": name,
            },
        )
        return False


def validate(raw: RawMetadata, profile: OrganizerProfile = STRICT) -> ValidationResult:
    """Validate ``raw`` with a one-off validator for ``profile``."""

    return MetadataValidator(profile).validate(raw)


__all__ = [
    "ALBUM",
    "ALBUM_ARTIST",
    "ARTIST",
    "MetadataValidator",
    "MissingMetadata",
    "NoTagsPresent",
    "PICTURE",
    "TITLE",
    "TRACK_NUMBER",
    "TRACK_TOTAL",
    "ValidMetadata",
    "ValidationResult",
    "validate",
]
