"""Format-specific metadata extractors.

Where: src/remixer/features/metadata/usecases/extraction/format_extractors.py
What: Concrete metadata extractors for supported audio formats.
Why: Separate format logic from the facade to simplify future maintenance and extensions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, cast

from mutagen import FileType
from mutagen.apev2 import APENoHeaderError, APEv2
from mutagen.flac import FLAC
from mutagen.id3 import ID3
from mutagen.mp3 import MP3
from mutagen.mp4 import MP4
from mutagen.oggopus import OggOpus
from mutagen.oggvorbis import OggVorbis

from ._base_extractors import BaseAudioExtractor, BaseTagExtractor
from ._tag_utils import has_id3v1_trailer, parse_tuple_numbers

__all__ = [
    "FlacExtractor",
    "M4aExtractor",
    "Mp3Extractor",
    "OggVorbisExtractor",
    "OpusExtractor",
]

VORBIS_TAG_MAPPING: dict[str, str] = {
    "title": "title",
    "artist": "artist",
    "album_artist": "albumartist",
    "album": "album",
    "track": "tracknumber",
}
VORBIS_TRACK_TOTAL_KEYS: tuple[str, ...] = ("tracktotal", "totaltracks")


class Mp3Extractor(BaseAudioExtractor):
    """Extractor for MP3 files reading raw ID3 frames."""

    FILE_CLASS: ClassVar[type[FileType] | None] = MP3
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "TIT2",
        "artist": "TPE1",
        "album_artist": "TPE2",
        "album": "TALB",
        "track": "TRCK",
    }

    def _get_tag_value(self, tags: ID3, key: str) -> str | None:
        frame: object = tags.get(key)
        if frame is None:
            return None
        text: object = getattr(frame, "text", None)
        if isinstance(text, (list, tuple)):
            return str(text[0]) if text else None
        return str(text) if text is not None else None

    def _tag_formats(self, audio: FileType, file_path: Path) -> frozenset[str]:
        formats: set[str] = set()
        tags = cast(ID3 | None, audio.tags)
        if tags is not None and tags.version[0] == 2:
            formats.add(f"ID3v2.{tags.version[1]}")
        if has_id3v1_trailer(file_path):
            formats.add("ID3v1")
        try:
            _ = APEv2(file_path)
            formats.add("APEv2")
        except APENoHeaderError:
            pass
        return frozenset(formats)

    def _has_artwork(self, audio: FileType) -> bool:
        tags = cast(ID3 | None, audio.tags)
        return tags is not None and bool(tags.getall("APIC"))


class M4aExtractor(BaseAudioExtractor):
    """Extractor for M4A/AAC files using MP4 atoms."""

    FILE_CLASS: ClassVar[type[FileType] | None] = MP4
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "\xa9nam",
        "artist": "\xa9ART",
        "album_artist": "aART",
        "album": "\xa9alb",
        "track": "trkn",
    }

    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        if key == "trkn":
            value = cast(list[tuple[int, int]] | None, tags.get(key))
            if not value:
                return None
            num, total = parse_tuple_numbers(data=value)
            return f"{num or ''}/{total or ''}"
        return BaseTagExtractor.get_str_tag(tags, key)

    def _tag_formats(self, audio: FileType, file_path: Path) -> frozenset[str]:
        return frozenset({"iTunes"}) if audio.tags else frozenset()

    def _has_artwork(self, audio: FileType) -> bool:
        return bool(audio.tags and audio.tags.get("covr"))


class _VorbisCommentExtractor(BaseAudioExtractor):
    """Shared behaviour for formats carrying a Vorbis comment block."""

    TAG_MAPPING: ClassVar[dict[str, str]] = VORBIS_TAG_MAPPING
    TRACK_TOTAL_KEYS: ClassVar[tuple[str, ...]] = VORBIS_TRACK_TOTAL_KEYS

    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        return BaseTagExtractor.get_str_tag(tags, key)

    def _tag_formats(self, audio: FileType, file_path: Path) -> frozenset[str]:
        return frozenset({"vorbis"}) if audio.tags else frozenset()

    def _has_artwork(self, audio: FileType) -> bool:
        return bool(audio.tags and audio.tags.get("metadata_block_picture"))


class FlacExtractor(_VorbisCommentExtractor):
    """Extractor for FLAC files."""

    FILE_CLASS: ClassVar[type[FileType] | None] = FLAC

    def _tag_formats(self, audio: FileType, file_path: Path) -> frozenset[str]:
        formats = set(super()._tag_formats(audio, file_path))
        if has_id3v1_trailer(file_path):
            formats.add("ID3v1")
        return frozenset(formats)

    def _has_artwork(self, audio: FileType) -> bool:
        # Cover art normally lives in PICTURE blocks, not in the comments.
        return bool(cast(FLAC, audio).pictures) or super()._has_artwork(audio)


class OggVorbisExtractor(_VorbisCommentExtractor):
    """Extractor for Ogg Vorbis (.ogg) files."""

    FILE_CLASS: ClassVar[type[FileType] | None] = OggVorbis


class OpusExtractor(_VorbisCommentExtractor):
    """Extractor for Opus (.opus) files."""

    FILE_CLASS: ClassVar[type[FileType] | None] = OggOpus
