"""
Shared exceptions for ide-recent-projects.

None of these cross a provider boundary: providers catch them and contribute
an empty list instead.

Exception Hierarchy:
    RecentProjectsError (base)
    └── StorageError (storage file problems)
        └── StorageReadError (file exists but cannot be read or decoded)
"""

from __future__ import annotations


class RecentProjectsError(Exception):
    """Base exception for all ide-recent-projects errors."""


class StorageError(RecentProjectsError):
    """Base exception for storage file problems."""


class StorageReadError(StorageError):
    """Raised when a located storage file cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f'Failed to read storage file {path}: {reason}')
