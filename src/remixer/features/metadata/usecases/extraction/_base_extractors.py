"""Shared base classes for metadata extractors.

Where: src/remixer/features/metadata/usecases/extraction/_base_extractors.py
What: Abstract base classes that encapsulate shared tag handling logic.
Why: Let each format extractor declare only its tag keys, tag formats and artwork check.
"""

from __future__ import annotations

import abc
from pathlib import Path
from typing import Any, ClassVar, cast

from typing_extensions import override

from mutagen import FileType, MutagenError

from remixer.exceptions import MetadataReadError
from remixer.platform.logging import logger
from remixer.shared.raw_metadata import RawMetadata, TrackPosition

from ._tag_utils import parse_int, parse_slash_separated, safe_get_first

__all__ = [
    "AudioFormatExtractor",
    "BaseAudioExtractor",
    "BaseTagExtractor",
]


class AudioFormatExtractor(abc.ABC):
    """Abstract base class for audio metadata extractors."""

    @abc.abstractmethod
    def extract_metadata(self, file_path: Path) -> RawMetadata:
        """Extract metadata from an audio file."""
        raise NotImplementedError


class BaseTagExtractor:
    """Provides common helper methods for tag extraction."""

    @staticmethod
    def get_str_tag(tags: Any, key: str, default: str | None = None) -> str | None:
        """Extract the first string value for a key from a tag collection."""
        value: object = tags.get(key)
        if isinstance(value, list):
            return safe_get_first(data=cast(list[str], value), default=default or "") or default
        if isinstance(value, str):
            return value
        return default


class BaseAudioExtractor(AudioFormatExtractor, abc.ABC):
    """Base class for mutagen-backed extractors.

    Subclasses set ``FILE_CLASS`` to a mutagen file type and ``TAG_MAPPING``
    to the format's keys for title, artist, album artist, album and track.
    ``TRACK_TOTAL_KEYS`` lists separate track-count keys consulted when the
    track value carries no ``/total`` part.
    """

    FILE_CLASS: ClassVar[type[FileType] | None] = None
    FILE_INIT_PARAMS: ClassVar[dict[str, Any]] = {}

    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": "",
        "artist": "",
        "album_artist": "",
        "album": "",
        "track": "",
    }
    TRACK_TOTAL_KEYS: ClassVar[tuple[str, ...]] = ()

    @property
    def format_name(self) -> str:
        return self.__class__.__name__.replace("Extractor", "")

    def _open_file(self, file_path: Path) -> FileType:
        """Open the audio file with the configured mutagen class."""
        if self.FILE_CLASS is None:
            raise NotImplementedError("FILE_CLASS must be defined in subclass")

        try:
            return self.FILE_CLASS(file_path, **self.FILE_INIT_PARAMS)
        except MutagenError as exc:
            raise MetadataReadError(file_path, f"{self.format_name}: {exc}") from exc
        except OSError as exc:
            raise MetadataReadError(file_path, str(exc)) from exc

    @abc.abstractmethod
    def _get_tag_value(self, tags: Any, key: str) -> str | None:
        """Get a single tag value as text."""
        raise NotImplementedError

    @abc.abstractmethod
    def _tag_formats(self, audio: FileType, file_path: Path) -> frozenset[str]:
        """Name the tag formats present in the file."""
        raise NotImplementedError

    @abc.abstractmethod
    def _has_artwork(self, audio: FileType) -> bool:
        """Return whether embedded cover art is present."""
        raise NotImplementedError

    def _track_position(self, tags: Any) -> TrackPosition:
        track_str: str = self._get_tag_value(tags, self.TAG_MAPPING["track"]) or ""
        number, total = parse_slash_separated(value=track_str)
        for key in self.TRACK_TOTAL_KEYS:
            if total is not None:
                break
            total = parse_int(self._get_tag_value(tags, key))
        return TrackPosition(number=number, total=total)

    def _read_tags(self, audio: FileType, file_path: Path) -> RawMetadata:
        tags: Any = audio.tags
        tag_formats = self._tag_formats(audio, file_path)
        logger.debug("Opened %s with tag formats %s", file_path, sorted(tag_formats))

        if tags is None:
            return RawMetadata(tag_formats=tag_formats)

        return RawMetadata(
            artist=self._get_tag_value(tags, self.TAG_MAPPING["artist"]),
            album=self._get_tag_value(tags, self.TAG_MAPPING["album"]),
            album_artist=self._get_tag_value(tags, self.TAG_MAPPING["album_artist"]),
            title=self._get_tag_value(tags, self.TAG_MAPPING["title"]),
            track=self._track_position(tags),
            has_artwork=self._has_artwork(audio),
            tag_formats=tag_formats,
        )

    @override
    def extract_metadata(self, file_path: Path) -> RawMetadata:
        """Extract metadata from an audio file.

        Raises:
            MetadataReadError: If mutagen cannot parse the file, it cannot be
                read, or a tag value cannot be interpreted.
        """
        audio = self._open_file(file_path)
        try:
            metadata = self._read_tags(audio, file_path)
        except (ValueError, MutagenError, OSError) as exc:
            raise MetadataReadError(file_path, f"{self.format_name}: {exc}") from exc
        logger.debug("Extracted metadata: %s", metadata)
        return metadata
