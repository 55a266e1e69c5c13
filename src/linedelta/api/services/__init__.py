"""Service layer for the linedelta API."""

from .diff import DiffFileService

__all__ = ["DiffFileService"]
