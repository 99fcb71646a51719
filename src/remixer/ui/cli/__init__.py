"""Command line interface for RE-MIXER."""

from .cli import main

__all__ = ["main"]
