"""
Domain errors raised by the service layer.

Each error carries the HTTP status code the API answers with; the
application registers a single exception handler for ``TodoApiError``.
"""

from __future__ import annotations


class TodoApiError(Exception):
    """Base class for errors raised by the services."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(TodoApiError):
    """The requested user or todo does not exist."""

    status_code = 404


class ValidationError(TodoApiError):
    """The request references data that does not satisfy a domain rule."""

    status_code = 400


class ConflictError(TodoApiError):
    """The request would break a uniqueness constraint (user email)."""

    status_code = 409
