"""
EntityNotFoundError - Raised when a referenced message does not exist.
Maps to: HTTP 404 Not Found
"""

from src.domain.exceptions.base import DomainError, ErrorKind


class EntityNotFoundError(DomainError):
    """Exception raised when a requested entity is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)
