from __future__ import annotations

from fastapi import status


class EsantiyeError(Exception):
    """Base error; rendered to clients as ``{"error": message}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(EsantiyeError):
    """A mandatory field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST


class DatabaseError(EsantiyeError):
    """Driver-level failure: connection loss, constraint violation, bad SQL."""


class NotInitializedError(DatabaseError):
    """The data access layer was used before its schema was ready."""


class ApiError(EsantiyeError):
    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code
