"""
Application exception hierarchy.

All application exceptions inherit from AppError so callers can catch
broadly or narrowly as needed. Each exception carries structured context
for logging.
"""

from __future__ import annotations


class AppError(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str,
        *,
        details: dict | None = None,
    ) -> None:
        self.details = details or {}
        super().__init__(message)


class StorageError(AppError):
    """The database rejected or could not serve a repository call."""

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        alien_id: int | None = None,
        **kwargs,
    ) -> None:
        self.operation = operation
        self.alien_id = alien_id
        super().__init__(message, **kwargs)
