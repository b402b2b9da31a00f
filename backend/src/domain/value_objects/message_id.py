"""
MessageId Value Object - Positive integer wrapper for message identity.
"""

from __future__ import annotations
from dataclasses import dataclass

from src.domain.exceptions.validation_error import DomainValidationError


@dataclass(frozen=True)
class MessageId:
    value: int  # message_id, assigned by the database

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Message ID must be an integer")
        if self.value <= 0:
            raise ValueError("Message ID must be positive")

    @classmethod
    def parse(cls, raw: str) -> MessageId:
        """Parse a path segment such as ``"42"``; anything else is a validation error."""
        digits = raw.strip() if isinstance(raw, str) else ""
        # Plain ASCII digits only: int() would also take "+5", "1_000" and non-ASCII numerals
        if not (digits.isascii() and digits.isdigit()):
            raise DomainValidationError("Invalid message ID")
        try:
            return cls(int(digits))
        except ValueError as e:
            raise DomainValidationError("Invalid message ID") from e

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
