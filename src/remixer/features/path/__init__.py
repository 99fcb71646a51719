"""Summary: Path feature package exposing naming rules and path composition.
Why: Keep path decisions in one place for the organizer and tests."""

from .domain import Sanitizer, format_track, sanitize
from .usecases import SanitizedFields, compose_path, destination_for, sanitize_fields

__all__ = [
    "SanitizedFields",
    "Sanitizer",
    "compose_path",
    "destination_for",
    "format_track",
    "sanitize",
    "sanitize_fields",
]
