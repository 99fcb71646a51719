"""Application services."""

from .organize_service import OrganizeLibraryService, OrganizeRequest

__all__ = ["OrganizeLibraryService", "OrganizeRequest"]
