"""Shared pytest fixtures for RE-MIXER tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import pytest
from mutagen.flac import FLAC, Picture
from mutagen.id3 import APIC, ID3, TALB, TIT2, TPE1, TPE2, TRCK

from remixer.shared.raw_metadata import RawMetadata, TrackPosition


def _make_raw(
    *,
    artist: str | None = "Sigur Rós",
    album: str | None = "Ágætis byrjun",
    album_artist: str | None = "Sigur Rós",
    title: str | None = "Svefn-g-englar",
    number: int | None = 1,
    total: int | None = 10,
    has_artwork: bool = True,
    tag_formats: Iterable[str] = ("ID3v2.3",),
) -> RawMetadata:
    return RawMetadata(
        artist=artist,
        album=album,
        album_artist=album_artist,
        title=title,
        track=TrackPosition(number=number, total=total),
        has_artwork=has_artwork,
        tag_formats=frozenset(tag_formats),
    )


class FakeReader:
    """Metadata reader returning canned records keyed by file name."""

    def __init__(self, records: dict[str, RawMetadata | Exception]) -> None:
        self.records: dict[str, RawMetadata | Exception] = records
        self.calls: list[Path] = []

    def read(self, file_path: Path) -> RawMetadata:
        self.calls.append(file_path)
        record = self.records[file_path.name]
        if isinstance(record, Exception):
            raise record
        return record


@pytest.fixture
def make_raw() -> Callable[..., RawMetadata]:
    """Factory for ``RawMetadata`` records with fully tagged defaults."""

    return _make_raw


@pytest.fixture
def fake_reader() -> Callable[[dict[str, Any]], FakeReader]:
    """Factory for readers serving canned metadata or raising canned errors."""

    return FakeReader


@pytest.fixture
def portable_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Provide a temporary repository root for portable path detection."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import remixer.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    return tmp_path


@pytest.fixture
def library(tmp_path: Path) -> dict[str, Path]:
    """Create an input folder with sibling output and quarantine locations."""

    dirs = {
        "input": tmp_path / "in",
        "output": tmp_path / "out",
        "quarantine": tmp_path / "quarantine",
    }
    dirs["input"].mkdir()
    return dirs


# MPEG-1 Layer III, 128 kbit/s, 44.1 kHz, no padding: 417-byte frames.
_MPEG_FRAME = b"\xff\xfb\x90\x64" + b"\x00" * 413
_ID3_FRAMES = {"title": TIT2, "artist": TPE1, "album_artist": TPE2, "album": TALB, "track": TRCK}


def _write_mp3(path: Path, *, artwork: bool = False, **fields: str) -> Path:
    _ = path.write_bytes(_MPEG_FRAME * 32)
    tags = ID3()
    for name, value in fields.items():
        tags.add(_ID3_FRAMES[name](encoding=3, text=[value]))
    if artwork:
        tags.add(APIC(encoding=3, mime="image/jpeg", type=3, desc="cover", data=b"\xff\xd8"))
    tags.save(path)
    return path


def _write_flac(path: Path, *, artwork: bool = False, **comments: str) -> Path:
    # STREAMINFO: 4096-sample blocks, 44.1 kHz, stereo, 16 bit, unknown length.
    packed = (44100 << 44) | (1 << 41) | (15 << 36)
    streaminfo = b"\x10\x00\x10\x00" + b"\x00" * 6 + packed.to_bytes(8, "big") + b"\x00" * 16
    _ = path.write_bytes(b"fLaC" + b"\x80" + len(streaminfo).to_bytes(3, "big") + streaminfo)
    audio = FLAC(path)
    audio.add_tags()
    for key, value in comments.items():
        audio[key] = value
    if artwork:
        picture = Picture()
        picture.type = 3
        picture.mime = "image/jpeg"
        picture.data = b"\xff\xd8"
        audio.add_picture(picture)
    audio.save()
    return path


@pytest.fixture
def write_mp3() -> Callable[..., Path]:
    """Write a short silent MP3 with the given ID3v2 fields.

    Keyword names are ``title``, ``artist``, ``album_artist``, ``album`` and
    ``track``; ``artwork=True`` embeds a front cover.
    """

    return _write_mp3


@pytest.fixture
def write_flac() -> Callable[..., Path]:
    """Write a header-only FLAC file carrying the given Vorbis comments."""

    return _write_flac
