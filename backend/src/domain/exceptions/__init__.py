"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and caught by the
presentation layer, which maps ``kind.status_code`` to the HTTP response.
"""

from src.domain.exceptions.base import DomainError, ErrorKind
from src.domain.exceptions.entity_not_found import EntityNotFoundError
from src.domain.exceptions.access_denied import AccessDeniedError
from src.domain.exceptions.validation_error import DomainValidationError
from src.domain.exceptions.database_error import DatabaseError

__all__ = [
    "DomainError",
    "ErrorKind",
    "EntityNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
    "DatabaseError",
]
