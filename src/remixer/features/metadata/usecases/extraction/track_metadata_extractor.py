"""Audio file metadata extraction functionality.

Where: src/remixer/features/metadata/usecases/extraction/track_metadata_extractor.py
What: Provide the MetadataExtractor facade routing files to format extractors.
Why: Offer the organizer a single reader that fails uniformly with MetadataReadError.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from remixer.exceptions import MetadataReadError
from remixer.shared.raw_metadata import RawMetadata

from ._base_extractors import AudioFormatExtractor
from .format_extractors import (
    FlacExtractor,
    M4aExtractor,
    Mp3Extractor,
    OggVorbisExtractor,
    OpusExtractor,
)

__all__ = ["MetadataExtractor"]


class MetadataExtractor:
    """Facade selecting the extractor for a file by its extension."""

    _format_map: ClassVar[dict[str, AudioFormatExtractor]] = {
        ".mp3": Mp3Extractor(),
        ".m4a": M4aExtractor(),
        ".mp4": M4aExtractor(),
        ".flac": FlacExtractor(),
        ".ogg": OggVorbisExtractor(),
        ".opus": OpusExtractor(),
    }
    SUPPORTED_FORMATS: ClassVar[frozenset[str]] = frozenset(_format_map)

    def read(self, file_path: Path) -> RawMetadata:
        """Read the embedded metadata of ``file_path``.

        Args:
            file_path: Path to the audio file.

        Returns:
            RawMetadata: Extracted metadata; ``tag_formats`` is empty when the
            file carries no tags at all.

        Raises:
            MetadataReadError: If the format is unsupported or decoding fails.
        """
        extractor = self._format_map.get(file_path.suffix.lower())
        if extractor is None:
            raise MetadataReadError(file_path, f"Unsupported file format: {file_path.suffix}")
        return extractor.extract_metadata(file_path)
