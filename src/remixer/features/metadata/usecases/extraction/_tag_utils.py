"""Tag utility helpers.

Where: src/remixer/features/metadata/usecases/extraction/_tag_utils.py
What: Pure helper routines for parsing tag values and probing tag blocks.
Why: Keep format extractors small and the parsing rules testable in isolation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

__all__ = [
    "ID3V1_BLOCK_SIZE",
    "has_id3v1_trailer",
    "parse_int",
    "parse_slash_separated",
    "parse_tuple_numbers",
    "safe_get_first",
]

ID3V1_BLOCK_SIZE: Final[int] = 128


def safe_get_first(data: list[str] | None, default: str = "") -> str:
    """Safely get the first element from a list or return the default."""
    return data[0] if data else default


def parse_int(value: str | None) -> int | None:
    """Parse a non-negative decimal integer, ignoring surrounding whitespace.

    Digit-like characters that are not decimal digits (superscripts, circled
    numbers) yield None.
    """
    text = value.strip() if value else ""
    if not (text.isascii() and text.isdecimal()):
        return None
    return int(text)


def parse_slash_separated(value: str) -> tuple[int | None, int | None]:
    """Parse a string in 'number/total' format.

    Returns a tuple (number, total); either side is None when it does not
    convert.
    """
    parts: list[str] = value.split(sep="/") if value else []
    num: int | None = parse_int(parts[0]) if parts else None
    total: int | None = parse_int(parts[1]) if len(parts) > 1 else None
    return num, total


def parse_tuple_numbers(data: list[tuple[int, int]] | None) -> tuple[int | None, int | None]:
    """Parse a list of numeric tuples and return the first tuple with zeros converted to None."""
    if data:
        first: tuple[int, int] = data[0]
        num: int | None = first[0] if first[0] != 0 else None
        total: int | None = first[1] if first[1] != 0 else None
        return num, total
    return None, None


def has_id3v1_trailer(file_path: Path) -> bool:
    """Return whether the file ends with a 128-byte ID3v1 ``TAG`` block."""
    with open(file_path, "rb") as handle:
        _ = handle.seek(0, 2)
        if handle.tell() < ID3V1_BLOCK_SIZE:
            return False
        _ = handle.seek(-ID3V1_BLOCK_SIZE, 2)
        return handle.read(3) == b"TAG"
