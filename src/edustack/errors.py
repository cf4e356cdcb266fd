"""Application error taxonomy.

Every error carries a human readable ``message`` and, where one field is to
blame, the wire name of that ``field``. Route handlers raise these and the
handlers installed by :func:`edustack.main.create_app` render them as
``{"message": ..., "field": ...}`` with the matching status code.
"""
from __future__ import annotations

from fastapi import status


class EduStackError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.field:
            body["field"] = self.field
        return body


class ValidationError(EduStackError):
    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateError(EduStackError):
    # Same status as a validation failure; a duplicate is bad input.
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(EduStackError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Not authenticated", field: str | None = None):
        super().__init__(message, field)


class NotFoundError(EduStackError):
    status_code = status.HTTP_404_NOT_FOUND


__all__ = [
    "EduStackError",
    "ValidationError",
    "DuplicateError",
    "AuthenticationError",
    "NotFoundError",
]
