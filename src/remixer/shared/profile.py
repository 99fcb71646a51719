# Where: remixer.shared.profile
# What: OrganizerProfile switches selecting the strict or lenient organizing rules.
# Why: One organizer parameterized by value instead of two near-duplicate variants.

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class OrganizerProfile:
    """Behaviour switches chosen once at startup."""

    name: str
    quarantine_enabled: bool
    group_by_album_artist_with_album_fallback: bool
    extra_sanitizer_rules: bool

    @property
    def checks_optional_fields(self) -> bool:
        """Whether album artist and artwork absence is reported."""

        return self.quarantine_enabled


STRICT: Final[OrganizerProfile] = OrganizerProfile(
    name="strict",
    quarantine_enabled=True,
    group_by_album_artist_with_album_fallback=True,
    extra_sanitizer_rules=True,
)

LENIENT: Final[OrganizerProfile] = OrganizerProfile(
    name="lenient",
    quarantine_enabled=False,
    group_by_album_artist_with_album_fallback=False,
    extra_sanitizer_rules=False,
)

PROFILES: Final[dict[str, OrganizerProfile]] = {
    STRICT.name: STRICT,
    LENIENT.name: LENIENT,
}


__all__ = ["LENIENT", "PROFILES", "STRICT", "OrganizerProfile"]
