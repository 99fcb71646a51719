"""Display helpers for the CLI."""

from .summary import render_run_summary

__all__ = ["render_run_summary"]
