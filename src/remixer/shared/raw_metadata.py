# Where: remixer.shared.raw_metadata
# What: RawMetadata record produced by metadata readers for one audio file.
# Why: Give the validator and organizer a reader-independent view of embedded tags.

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class TrackPosition:
    """Track number and track count as read from the tags."""

    number: int | None = None
    total: int | None = None


@dataclass(frozen=True, slots=True)
class RawMetadata:
    """Metadata for a single audio file, every field optional."""

    artist: str | None = None
    album: str | None = None
    album_artist: str | None = None
    title: str | None = None
    track: TrackPosition = field(default_factory=TrackPosition)
    has_artwork: bool = False
    tag_formats: frozenset[str] = frozenset()

    @property
    def has_tags(self) -> bool:
        """Whether any tag format was found in the file."""

        return bool(self.tag_formats)


__all__ = ["RawMetadata", "TrackPosition"]
