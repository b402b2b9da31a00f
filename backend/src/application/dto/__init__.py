"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- message.py → MessageDTO, MessageWithParticipantsDTO, ParticipantDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from src.application.dto.message import (
    MessageDTO,
    MessageWithParticipantsDTO,
    ParticipantDTO,
)

__all__ = [
    "MessageDTO",
    "MessageWithParticipantsDTO",
    "ParticipantDTO",
]
