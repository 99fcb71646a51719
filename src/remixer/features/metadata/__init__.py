"""Summary: Metadata feature package: reading and validating embedded tags.
Why: Provide a concise import surface for the organizer."""

from .domain import (
    MetadataValidator,
    MissingMetadata,
    NoTagsPresent,
    ValidMetadata,
    ValidationResult,
    validate,
)
from .usecases import MetadataExtractor

__all__ = [
    "MetadataExtractor",
    "MetadataValidator",
    "MissingMetadata",
    "NoTagsPresent",
    "ValidMetadata",
    "ValidationResult",
    "validate",
]
