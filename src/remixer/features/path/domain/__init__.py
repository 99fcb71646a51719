"""Summary: Pure naming rules for destination paths.
Why: Keep sanitization and track padding free of filesystem access."""

from .sanitizer import Sanitizer, sanitize
from .track_formatter import format_track

__all__ = ["Sanitizer", "format_track", "sanitize"]
