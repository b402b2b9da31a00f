"""
DomainValidationError - Raised when input breaks a message invariant.
Maps to: HTTP 400 Bad Request
"""

from src.domain.exceptions.base import DomainError, ErrorKind


class DomainValidationError(DomainError):
    """Exception raised for domain validation errors."""

    kind = ErrorKind.VALIDATION
