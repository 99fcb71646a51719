"""Shared path utilities for configuration, log and library locations.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/config.toml`` unless
  overridden by ``REMIXER_CONFIG``.
- Logs: repository-root ``<repo_root>/logs`` unless overridden by
  ``REMIXER_LOG_DIR``; one timestamped file per run.
- Library folders default to the locations the tool was first written
  against (``~/Plex/Music`` in, ``~/Downloads/output`` out, ``~/Plex/?`` for
  quarantine).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Final


ENV_CONFIG_FILE: Final[str] = "REMIXER_CONFIG"
ENV_LOG_DIR: Final[str] = "REMIXER_LOG_DIR"
REPO_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Pick the first of: ``explicit_path``, a non-blank ``env_var`` value, the default.

    The chosen path is returned user-expanded and absolute.
    """

    environ = os.environ if env is None else env
    from_env = environ.get(env_var, "").strip() if env_var else ""
    if explicit_path is not None:
        chosen = Path(explicit_path)
    elif from_env:
        chosen = Path(from_env)
    else:
        chosen = default_factory()
    return chosen.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the nearest ancestor holding one of ``REPO_MARKERS``.

    Falls back to the current working directory when none is found.
    """
    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in REPO_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_CONFIG_FILE,
        default_factory=lambda: _detect_repo_root() / "config" / "config.toml",
    )


def default_log_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the directory that receives per-run log files."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_LOG_DIR,
        default_factory=lambda: _detect_repo_root() / "logs",
    )


def default_input_dir() -> Path:
    return Path.home() / "Plex" / "Music"


def default_quarantine_dir() -> Path:
    return Path.home() / "Plex" / "?"


def default_output_dir() -> Path:
    return Path.home() / "Downloads" / "output"


def run_log_file(log_dir: Path, now: datetime | None = None) -> Path:
    """Return the log file for a run started at ``now`` (UTC ISO timestamp name)."""

    moment = now or datetime.now(timezone.utc)
    stamp = moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return log_dir / f"{stamp}.log"


__all__ = [
    "ENV_CONFIG_FILE",
    "ENV_LOG_DIR",
    "default_config_path",
    "default_input_dir",
    "default_log_dir",
    "default_output_dir",
    "default_quarantine_dir",
    "resolve_overridable_path",
    "run_log_file",
]
