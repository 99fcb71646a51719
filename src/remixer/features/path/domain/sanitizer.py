"""Summary: Map tag text to path segments that are safe on common filesystems.
Why: Keep separators and reserved characters out of generated folder and file names."""

from __future__ import annotations

from typing import ClassVar, Final, final

from remixer.shared.profile import OrganizerProfile

# Ordered (match, replacement) pairs. Longer patterns come before the single
# characters they contain; no replacement glyph is itself a match pattern.
SEMICOLON_RULES: Final[tuple[tuple[str, str], ...]] = (
    ("; ", "﹔"),  # ﹔ small semicolon
    (";", "﹔"),
)
BASE_RULES: Final[tuple[tuple[str, str], ...]] = (
    (": ", "："),  # ： fullwidth colon
    (":", "﹕"),  # ﹕ small colon
    ("/", "∕"),  # ∕ division slash
    ("...", "…"),  # … ellipsis
)


@final
class Sanitizer:
    """Apply an ordered literal substitution table to text fragments."""

    STRICT_RULES: ClassVar[tuple[tuple[str, str], ...]] = SEMICOLON_RULES + BASE_RULES
    LENIENT_RULES: ClassVar[tuple[tuple[str, str], ...]] = BASE_RULES

    def __init__(self, rules: tuple[tuple[str, str], ...] = STRICT_RULES) -> None:
        self.rules: tuple[tuple[str, str], ...] = rules

    @classmethod
    def for_profile(cls, profile: OrganizerProfile) -> "Sanitizer":
        """Build the sanitizer matching ``profile``'s rule set."""

        return cls(cls.STRICT_RULES if profile.extra_sanitizer_rules else cls.LENIENT_RULES)

    def sanitize(self, text: str) -> str:
        """Replace every occurrence of each pattern, in table order.

        Args:
            text: Any text fragment, typically a tag value.

        Returns:
            str: The fragment with separators and reserved characters swapped
            for visual lookalikes. Other characters, parentheses included, are
            left as they are.
        """
        for match, replacement in self.rules:
            text = text.replace(match, replacement)
        return text


_STRICT: Final[Sanitizer] = Sanitizer()


def sanitize(text: str) -> str:
    """Sanitize ``text`` with the strict rule table."""

    return _STRICT.sanitize(text)


__all__ = ["BASE_RULES", "SEMICOLON_RULES", "Sanitizer", "sanitize"]
