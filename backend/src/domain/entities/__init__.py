"""
ENTITIES - Business objects with identity

Pure Python dataclasses (no ORM, no Pydantic).
"""

from src.domain.entities.message import (
    Message,
    MessageEntity,
    MessageParticipant,
    MessageValidationResult,
    MessageWithParticipants,
    NewMessage,
)

__all__ = [
    "Message",
    "MessageEntity",
    "MessageParticipant",
    "MessageValidationResult",
    "MessageWithParticipants",
    "NewMessage",
]
