# Where: remixer.shared.__init__
# What: Provide a concise import surface for shared dataclasses.
# Why: Encourage consistent reuse across features.

"""Shared cross-cutting value objects exposed at the package level."""

from .events import ProcessingEvent
from .profile import LENIENT, PROFILES, STRICT, OrganizerProfile
from .raw_metadata import RawMetadata, TrackPosition

__all__ = [
    "LENIENT",
    "PROFILES",
    "STRICT",
    "OrganizerProfile",
    "ProcessingEvent",
    "RawMetadata",
    "TrackPosition",
]
