"""Summary: Metadata use cases.
Why: Expose the mutagen-backed reader behind one import path."""

from .extraction import MetadataExtractor

__all__ = ["MetadataExtractor"]
