"""Summary: Zero-pad track numbers to the width of the album's track count.
Why: Make "03 - Title" sort correctly next to "12 - Title" in file listings."""

from __future__ import annotations


def format_track(number: int | str | None, total: int | str | None) -> str:
    """Pad ``number`` with leading zeros to the digit length of ``total``.

    A number with more digits than ``total`` is returned unchanged rather
    than truncated.

    Raises:
        ValueError: If either value is missing or ``total`` renders empty.
    """

    if number is None:
        raise ValueError("Track number is required")
    if total is None:
        raise ValueError("Track count is required")

    width = len(str(total))
    if width == 0:
        raise ValueError("Track count must not be empty")
    return str(number).rjust(width, "0")


__all__ = ["format_track"]
