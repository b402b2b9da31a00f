"""
AccessDeniedError - Raised when the caller may not act on a message.
Maps to: HTTP 403 Forbidden
"""

from src.domain.exceptions.base import DomainError, ErrorKind


class AccessDeniedError(DomainError):
    """Raised when user lacks permission for the requested mutation"""

    kind = ErrorKind.AUTHORIZATION

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
