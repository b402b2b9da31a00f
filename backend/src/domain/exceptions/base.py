"""
DomainError - Base of the closed messaging error taxonomy.

Every failure a use case can surface is one of four kinds, each with a fixed
HTTP status hint. Callers dispatch on ``error.kind``, never on message text.
"""

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    AUTHORIZATION = "AUTHORIZATION"
    DATABASE_ERROR = "DATABASE_ERROR"

    @property
    def status_code(self) -> int:
        return _STATUS_HINTS[self]


_STATUS_HINTS = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.AUTHORIZATION: 403,
    ErrorKind.DATABASE_ERROR: 500,
}


class DomainError(Exception):
    """Base exception for typed messaging errors."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return self.kind.status_code
