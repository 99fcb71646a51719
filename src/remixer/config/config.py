"""Configuration management for RE-MIXER.

Values are layered: built-in defaults, then the TOML config file, then
``REMIXER_*`` environment variables. There are no command line flags.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Final

from remixer.config.paths import (
    default_config_path,
    default_input_dir,
    default_log_dir,
    default_output_dir,
    default_quarantine_dir,
)
from remixer.exceptions import ConfigError
from remixer.platform.logging import logger
from remixer.shared.profile import PROFILES, OrganizerProfile

DEFAULT_EXTENSIONS: Final[tuple[str, ...]] = ("mp3", "m4a")

# Environment variable -> Config field
ENV_OVERRIDES: Final[dict[str, str]] = {
    "REMIXER_INPUT_DIR": "input_dir",
    "REMIXER_OUTPUT_DIR": "output_dir",
    "REMIXER_QUARANTINE_DIR": "quarantine_dir",
    "REMIXER_EXTENSIONS": "extensions",
    "REMIXER_PROFILE": "profile",
    "REMIXER_LOG_DIR": "log_dir",
}


def _path_field(default_factory: Any) -> Any:
    """Create a dataclass field flagged for ``Path`` conversion."""

    return field(default_factory=default_factory, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    input_dir: Path = _path_field(default_input_dir)
    output_dir: Path = _path_field(default_output_dir)
    quarantine_dir: Path = _path_field(default_quarantine_dir)
    log_dir: Path = _path_field(default_log_dir)
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    profile: str = "strict"

    def __post_init__(self) -> None:
        """Normalise paths, extensions and the profile name."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if not isinstance(value, (str, Path)):
                raise ConfigError(
                    f"{f.name} must be a path string, got {type(value).__name__}"
                )
            if isinstance(value, str):
                if not value.strip():
                    raise ConfigError(f"{f.name} must not be empty")
                value = Path(value)
            setattr(self, f.name, value.expanduser())

        raw_extensions: Any = self.extensions
        if isinstance(raw_extensions, str):
            raw_extensions = raw_extensions.split(",")
        if not isinstance(raw_extensions, (list, tuple)) or not all(
            isinstance(ext, str) for ext in raw_extensions
        ):
            raise ConfigError("extensions must be a string or a list of strings")
        extensions = tuple(
            ext.strip().lower().lstrip(".") for ext in raw_extensions if ext.strip()
        )
        if not extensions:
            raise ConfigError("At least one file extension must be configured")
        self.extensions = extensions

        if not isinstance(self.profile, str):
            raise ConfigError(f"profile must be a string, got {type(self.profile).__name__}")
        self.profile = self.profile.strip().lower()
        if self.profile not in PROFILES:
            raise ConfigError(
                f"Unknown profile {self.profile!r}; expected one of {sorted(PROFILES)}"
            )

    @property
    def organizer_profile(self) -> OrganizerProfile:
        """Resolve the configured profile name."""

        return PROFILES[self.profile]

    @classmethod
    def load(
        cls,
        config_file: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> "Config":
        """Load configuration from the TOML file and environment.

        Args:
            config_file: TOML file to read; defaults to ``default_config_path()``.
            env: Environment mapping; defaults to ``os.environ``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file cannot be parsed or holds invalid values.
        """
        environ = env if env is not None else os.environ
        target = config_file or default_config_path(environ)

        values: dict[str, Any] = {}
        if target.exists():
            try:
                with open(target, "rb") as handle:
                    values = tomllib.load(handle)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"Invalid TOML in {target}: {exc}") from exc
            logger.info("Configuration loaded from %s", target)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys in {target}: {', '.join(unknown)}")

        config = cls(**values)
        overrides = {
            name: environ[var]
            for var, name in ENV_OVERRIDES.items()
            if environ.get(var, "").strip()
        }
        if overrides:
            logger.debug("Environment overrides: %s", sorted(overrides))
            config = replace(config, **overrides)
        return config


__all__ = ["Config", "DEFAULT_EXTENSIONS", "ENV_OVERRIDES"]
