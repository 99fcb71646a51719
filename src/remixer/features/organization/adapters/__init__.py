"""Concrete adapters for the organization ports."""

from .filesystem_adapter import LocalFilesystemAdapter

__all__ = ["LocalFilesystemAdapter"]
