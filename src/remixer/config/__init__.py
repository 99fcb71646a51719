"""Configuration loading and path defaults."""

from .config import Config, DEFAULT_EXTENSIONS

__all__ = ["Config", "DEFAULT_EXTENSIONS"]
