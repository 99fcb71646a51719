"""
Summary: Tests for the sequential organizer across strict and lenient profiles.
Why: Pin copy destinations, quarantine handling and the run counters.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from pytest_mock import MockerFixture

from remixer.exceptions import MetadataReadError
from remixer.features.metadata.usecases.extraction import MetadataExtractor
from remixer.features.organization.adapters import LocalFilesystemAdapter
from remixer.features.organization.usecases import (
    FileState,
    Organizer,
    RejectionReason,
)
from remixer.shared.profile import LENIENT, STRICT
from remixer.shared.raw_metadata import RawMetadata


def _touch(directory: Path, name: str, content: bytes = b"audio") -> Path:
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_bytes(content)
    return path


def _tree(root: Path) -> set[str]:
    if not root.exists():
        return set()
    return {str(p.relative_to(root)) for p in root.rglob("*") if p.is_file()}


@pytest.fixture
def strict_organizer(
    library: dict[str, Path], fake_reader: Callable[[dict[str, Any]], Any]
) -> Callable[[dict[str, Any]], Organizer]:
    def _build(records: dict[str, Any]) -> Organizer:
        return Organizer(
            output_dir=library["output"],
            quarantine_dir=library["quarantine"],
            profile=STRICT,
            reader=fake_reader(records),
            filesystem=LocalFilesystemAdapter(),
        )

    return _build


@pytest.fixture
def lenient_organizer(
    library: dict[str, Path], fake_reader: Callable[[dict[str, Any]], Any]
) -> Callable[[dict[str, Any]], Organizer]:
    def _build(records: dict[str, Any]) -> Organizer:
        return Organizer(
            output_dir=library["output"],
            profile=LENIENT,
            reader=fake_reader(records),
            filesystem=LocalFilesystemAdapter(),
        )

    return _build


class TestStrictRun:
    """Strict profile end to end on a temporary library."""

    def test_tagged_file_is_copied_into_album_folder(
        self,
        library: dict[str, Path],
        strict_organizer: Callable[[dict[str, Any]], Organizer],
        make_raw: Callable[..., RawMetadata],
    ) -> None:
        source = _touch(library["input"], "a.mp3", b"bytes")
        organizer = strict_organizer(
            {"a.mp3": make_raw(artist="X", album="Y", album_artist=None, title="T", number=3, total=12)}
        )

        stats = organizer.run([source])

        target = library["output"] / "Y" / "Y" / "03 - T.mp3"
        assert target.read_bytes() == b"bytes"
        assert source.exists()
        assert (stats.processed, stats.organized, stats.needing_intervention) == (1, 1, 0)
        assert stats.tag_formats["ID3v2.3"] == 1

    def test_parenthesized_names_are_kept(
        self,
        library: dict[str, Path],
        strict_organizer: Callable[[dict[str, Any]], Organizer],
        make_raw: Callable[..., RawMetadata],
    ) -> None:
        source = _touch(library["input"], "01.mp3")
        organizer = strict_organizer(
            {"01.mp3": make_raw(album="()", album_artist=None, total=8)}
        )

        _ = organizer.run([source])

        assert _tree(library["output"]) == {"()/()/1 - Svefn-g-englar.mp3"}

    def test_missing_fields_are_quarantined_under_original_name(
        self,
        library: dict[str, Path],
        strict_organizer: Callable[[dict[str, Any]], Organizer],
        make_raw: Callable[..., RawMetadata],
    ) -> None:
        source = _touch(library["input"], "sub/song.mp3", b"untagged")
        organizer = strict_organizer({"song.mp3": make_raw(album=None)})

        stats = organizer.run([source])

        assert (library["quarantine"] / "song.mp3").read_bytes() == b"untagged"
        assert _tree(library["output"]) == set()
        assert (stats.processed, stats.organized, stats.needing_intervention) == (1, 0, 1)
        assert stats.quarantined == 1

    def test_no_tags_goes_to_none_bucket(
        self,
        library: dict[str, Path],
        strict_organizer: Callable[[dict[str, Any]], Organizer],
    ) -> None:
        source = _touch(library["input"], "bare.m4a")
        organizer = strict_organizer({"bare.m4a": RawMetadata()})

        outcome = organizer.process_file(source)
        stats = organizer.run([source])

        assert outcome.reason is RejectionReason.NO_TAGS
        assert outcome.quarantine_path == library["quarantine"] / "bare.m4a"
        assert stats.tag_formats["None"] == 1

    def test_read_error_is_neither_copied_nor_counted_as_tagged(
        self,
        library: dict[str, Path],
        strict_organizer: Callable[[dict[str, Any]], Organizer],
        make_raw: Callable[..., RawMetadata],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Unreadable files stay in place but still count as processed."""
        broken = _touch(library["input"], "broken.mp3")
        good = _touch(library["input"], "good.mp3")
        organizer = strict_organizer(
            {
                "broken.mp3": MetadataReadError(broken, "can't sync to MPEG frame"),
                "good.mp3": make_raw(),
            }
        )
        caplog.set_level(logging.ERROR, logger="remixer")

        stats = organizer.run([broken, good])

        assert not library["quarantine"].exists()
        assert stats.processed == 2
        assert stats.organized == 1
        assert stats.needing_intervention == 1
        assert stats.read_errors == 1
        assert stats.quarantined == 0
        assert stats.tag_formats == {"None": 0, "ID3v2.3": 1}
        assert any(
            "Error occurred while parsing audio file" in record.getMessage()
            for record in caplog.records
        )

    def test_counters_hold_for_mixed_run(
        self,
        library: dict[str, Path],
        strict_organizer: Callable[[dict[str, Any]], Organizer],
        make_raw: Callable[..., RawMetadata],
    ) -> None:
        names = ["a.mp3", "b.mp3", "c.mp3", "d.m4a"]
        files = [_touch(library["input"], name) for name in names]
        organizer = strict_organizer(
            {
                "a.mp3": make_raw(title="A"),
                "b.mp3": make_raw(title=None),
                "c.mp3": MetadataReadError(files[2], "bad"),
                "d.m4a": make_raw(title="D", tag_formats=("iTunes",)),
            }
        )

        stats = organizer.run(files)

        assert stats.processed == len(files)
        assert stats.processed == stats.organized + stats.needing_intervention
        assert (stats.organized, stats.quarantined, stats.read_errors) == (2, 1, 1)

    def test_same_destination_is_overwritten(
        self,
        library: dict[str, Path],
        strict_organizer: Callable[[dict[str, Any]], Organizer],
        make_raw: Callable[..., RawMetadata],
    ) -> None:
        """Two files composing the same path leave the later one in place."""
        first = _touch(library["input"], "first.mp3", b"first")
        second = _touch(library["input"], "second.mp3", b"second")
        raw = make_raw()
        organizer = strict_organizer({"first.mp3": raw, "second.mp3": raw})

        stats = organizer.run([first, second])

        assert stats.organized == 2
        (target,) = [p for p in library["output"].rglob("*.mp3")]
        assert target.read_bytes() == b"second"


class TestLenientRun:
    """Lenient profile never writes a quarantine folder."""

    def test_rejections_are_skipped(
        self,
        library: dict[str, Path],
        lenient_organizer: Callable[[dict[str, Any]], Organizer],
        make_raw: Callable[..., RawMetadata],
    ) -> None:
        missing = _touch(library["input"], "missing.mp3")
        bare = _touch(library["input"], "bare.mp3")
        organizer = lenient_organizer({"missing.mp3": make_raw(artist=None), "bare.mp3": RawMetadata()})

        stats = organizer.run([missing, bare])

        assert not library["quarantine"].exists()
        assert _tree(library["output"]) == set()
        assert (stats.skipped, stats.quarantined, stats.needing_intervention) == (2, 0, 2)

    def test_groups_by_artist_and_keeps_semicolons(
        self,
        library: dict[str, Path],
        lenient_organizer: Callable[[dict[str, Any]], Organizer],
        make_raw: Callable[..., RawMetadata],
    ) -> None:
        source = _touch(library["input"], "a.m4a")
        organizer = lenient_organizer(
            {"a.m4a": make_raw(artist="A; B", album_artist="Z", album="Y", title="T", number=2, total=5)}
        )

        outcome = organizer.process_file(source)

        assert outcome.state is FileState.SUCCEEDED
        assert outcome.target_path == library["output"] / "A; B" / "Y" / "2 - T.m4a"


def test_strict_profile_requires_quarantine_dir(
    library: dict[str, Path], fake_reader: Callable[[dict[str, Any]], Any]
) -> None:
    with pytest.raises(ValueError, match="quarantine"):
        _ = Organizer(
            output_dir=library["output"],
            reader=fake_reader({}),
            filesystem=LocalFilesystemAdapter(),
        )


def test_copy_failure_propagates(
    library: dict[str, Path],
    fake_reader: Callable[[dict[str, Any]], Any],
    make_raw: Callable[..., RawMetadata],
    mocker: MockerFixture,
) -> None:
    """Filesystem errors abort the run instead of being counted."""
    filesystem = mocker.Mock()
    filesystem.ensure_directory.return_value = False
    filesystem.copy_file.side_effect = PermissionError("read-only")
    organizer = Organizer(
        output_dir=library["output"],
        quarantine_dir=library["quarantine"],
        reader=fake_reader({"a.mp3": make_raw()}),
        filesystem=filesystem,
    )

    with pytest.raises(PermissionError):
        _ = organizer.run([library["input"] / "a.mp3"])


def test_directory_creation_is_logged_once(
    library: dict[str, Path],
    strict_organizer: Callable[[dict[str, Any]], Organizer],
    make_raw: Callable[..., RawMetadata],
    caplog: pytest.LogCaptureFixture,
) -> None:
    files = [_touch(library["input"], name) for name in ("a.mp3", "b.mp3")]
    organizer = strict_organizer(
        {"a.mp3": make_raw(title="A", number=1), "b.mp3": make_raw(title="B", number=2)}
    )
    caplog.set_level(logging.INFO, logger="remixer")

    _ = organizer.run(files)

    created = [r for r in caplog.records if getattr(r, "processing_event", None) == "directory.create"]
    organized = [r for r in caplog.records if getattr(r, "processing_event", None) == "file.organized"]
    assert len(created) == 1
    assert len(organized) == 2
    assert ">>>" in organized[0].getMessage()


def test_malformed_track_tag_does_not_stop_the_run(
    library: dict[str, Path], write_mp3: Callable[..., Path]
) -> None:
    """A file whose track number cannot be parsed is quarantined; the next file still lands."""
    common = {"artist": "Sigur Rós", "album": "Ágætis byrjun", "album_artist": "Sigur Rós"}
    bad = write_mp3(library["input"] / "bad.mp3", title="Bad", track="²/8", **common)
    good = write_mp3(library["input"] / "good.mp3", title="Good", track="1/8", **common)
    organizer = Organizer(
        output_dir=library["output"],
        quarantine_dir=library["quarantine"],
        reader=MetadataExtractor(),
        filesystem=LocalFilesystemAdapter(),
    )

    stats = organizer.run([bad, good])

    assert (stats.processed, stats.organized, stats.quarantined) == (2, 1, 1)
    assert (library["quarantine"] / "bad.mp3").exists()
    assert (library["output"] / "Sigur Rós" / "Ágætis byrjun" / "1 - Good.mp3").exists()
    assert stats.tag_formats["ID3v2.4"] == 2
