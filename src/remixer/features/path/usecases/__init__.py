"""Summary: Destination path use cases.
Why: Offer one import path for composing organized file locations."""

from .path_composer import (
    SanitizedFields,
    compose_directory,
    compose_file_name,
    compose_path,
    destination_for,
    sanitize_fields,
)

__all__ = [
    "SanitizedFields",
    "compose_directory",
    "compose_file_name",
    "compose_path",
    "destination_for",
    "sanitize_fields",
]
