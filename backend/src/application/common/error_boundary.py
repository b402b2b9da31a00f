"""
Use-case error boundary.

Typed domain errors pass through unchanged. Anything else escaping a
repository is logged with its traceback and replaced by a DatabaseError that
carries only the operation's generic message.

Usage:
    with use_case_boundary("send_message", "Failed to send message"):
        ...
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from src.domain.exceptions import DatabaseError, DomainError, ErrorKind
from src.observability.metrics import increment_messaging_operation

logger = logging.getLogger(__name__)

OUTCOME_SUCCESS = "success"


@contextmanager
def use_case_boundary(operation: str, failure_message: str) -> Iterator[None]:
    try:
        yield
    except DomainError as e:
        increment_messaging_operation(operation, e.kind.value.lower())
        raise
    except Exception as e:
        logger.exception(f"[{operation}] Unexpected persistence failure: {e}")
        increment_messaging_operation(
            operation, ErrorKind.DATABASE_ERROR.value.lower()
        )
        raise DatabaseError(failure_message) from e
    else:
        increment_messaging_operation(operation, OUTCOME_SUCCESS)
