"""Summary: Turn validated metadata into a sanitized destination path.
Why: Make the Artist/Album/Track - Title layout deterministic for equal tags."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from remixer.features.metadata.domain.validator import ValidMetadata
from remixer.features.path.domain.sanitizer import Sanitizer
from remixer.features.path.domain.track_formatter import format_track
from remixer.shared.profile import OrganizerProfile


@dataclass(frozen=True, slots=True)
class SanitizedFields:
    """Path-safe fragments derived from a valid metadata record."""

    grouping: str
    artist: str
    album: str
    album_artist: str | None
    title: str
    track: str


def sanitize_fields(
    metadata: ValidMetadata,
    *,
    sanitizer: Sanitizer,
    profile: OrganizerProfile,
) -> SanitizedFields:
    """Sanitize each field and pick the grouping folder for ``profile``.

    Grouping folder: with the album-artist rule enabled, the album artist, or
    the album title when no album artist is tagged (never the track artist).
    Otherwise always the track artist.
    """

    artist = sanitizer.sanitize(metadata.artist)
    album = sanitizer.sanitize(metadata.album)
    title = sanitizer.sanitize(metadata.title)
    track = format_track(metadata.track_number, metadata.track_total)

    if profile.group_by_album_artist_with_album_fallback:
        album_artist = (
            sanitizer.sanitize(metadata.album_artist) if metadata.album_artist else album
        )
        grouping = album_artist
    else:
        album_artist = None
        grouping = artist

    return SanitizedFields(
        grouping=grouping,
        artist=artist,
        album=album,
        album_artist=album_artist,
        title=title,
        track=track,
    )


def compose_directory(output_root: Path, grouping: str, album: str) -> Path:
    """Return the album directory ``output_root/grouping/album``."""

    return output_root / grouping / album


def compose_file_name(track: str, title: str, extension: str) -> str:
    """Return ``"{track} - {title}{extension}"``."""

    return f"{track} - {title}{extension}"


def compose_path(
    output_root: Path,
    grouping: str,
    album: str,
    track: str,
    title: str,
    extension: str,
) -> Path:
    """Compose the destination file path for a track."""

    return compose_directory(output_root, grouping, album) / compose_file_name(
        track, title, extension
    )


def destination_for(
    source: Path,
    output_root: Path,
    fields: SanitizedFields,
) -> Path:
    """Compose the destination for ``source``, keeping its original extension."""

    return compose_path(
        output_root, fields.grouping, fields.album, fields.track, fields.title, source.suffix
    )


__all__ = [
    "SanitizedFields",
    "compose_directory",
    "compose_file_name",
    "compose_path",
    "destination_for",
    "sanitize_fields",
]
