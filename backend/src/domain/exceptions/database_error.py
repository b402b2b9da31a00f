"""
DatabaseError - Raised when persistence fails for a reason the domain does not model.
Maps to: HTTP 500 Internal Server Error

The message is always generic; the underlying cause is logged, never exposed.
"""

from src.domain.exceptions.base import DomainError, ErrorKind


class DatabaseError(DomainError):
    kind = ErrorKind.DATABASE_ERROR
