"""Tests for CLI functionality."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from remixer.exceptions import ConfigError
from remixer.features.organization.usecases import RunStats
from remixer.ui.cli.cli import CommandProcessor


@pytest.fixture
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point configuration and logs at a temporary folder."""

    monkeypatch.setenv("REMIXER_CONFIG", str(tmp_path / "config.toml"))
    monkeypatch.setenv("REMIXER_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("REMIXER_INPUT_DIR", str(tmp_path / "in"))
    monkeypatch.setenv("REMIXER_OUTPUT_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("REMIXER_QUARANTINE_DIR", str(tmp_path / "q"))
    return tmp_path


def test_successful_run_prints_summary(cli_env: Path, mocker: MockerFixture) -> None:
    """A completed run exits 0, writes a log file and renders the summary."""
    service = mocker.Mock()
    service.run.return_value = RunStats(processed=1, organized=1)
    output = StringIO()

    code = CommandProcessor.process_command(service=service, console=Console(file=output))

    assert code == 0
    request = service.run.call_args.args[0]
    assert request.input_dir == cli_env / "in"
    assert "Automatically organized files: 1" in output.getvalue()
    assert list((cli_env / "logs").glob("*.log"))


def test_missing_input_dir_is_a_config_error(cli_env: Path) -> None:
    _ = cli_env
    assert CommandProcessor.process_command(console=Console(file=StringIO())) == 2


def test_invalid_profile_exits_2(cli_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _ = cli_env
    monkeypatch.setenv("REMIXER_PROFILE", "bogus")
    assert CommandProcessor.process_command() == 2


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (PermissionError("read-only"), 1),
        (KeyboardInterrupt(), 130),
        (ConfigError("bad"), 2),
    ],
)
def test_errors_map_to_exit_codes(
    cli_env: Path, mocker: MockerFixture, error: BaseException, expected: int
) -> None:
    _ = cli_env
    service = mocker.Mock()
    service.run.side_effect = error

    assert CommandProcessor.process_command(service=service) == expected


def test_wrongly_typed_config_value_exits_2(cli_env: Path) -> None:
    _ = (cli_env / "config.toml").write_text("profile = 1\n", encoding="utf-8")
    assert CommandProcessor.process_command() == 2
