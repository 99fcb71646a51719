"""Summary: Metadata validation rules.
Why: Keep the decision about a record's sufficiency independent of any reader."""

from .validator import (
    MetadataValidator,
    MissingMetadata,
    NoTagsPresent,
    ValidMetadata,
    ValidationResult,
    validate,
)

__all__ = [
    "MetadataValidator",
    "MissingMetadata",
    "NoTagsPresent",
    "ValidMetadata",
    "ValidationResult",
    "validate",
]
