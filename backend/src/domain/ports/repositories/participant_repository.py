"""
Participant Repository Port - Read-only directory of users who can receive messages.
Implementations:
    src/infrastructure/persistence/prisma_participant_repository.py
    src/infrastructure/persistence/in_memory_message_repository.py
"""

from abc import ABC, abstractmethod

from src.domain.entities.message import MessageParticipant


class ParticipantRepository(ABC):
    @abstractmethod
    async def list_excluding(self, user_id: str) -> list[MessageParticipant]:
        """All users except ``user_id``, ordered by name."""
        ...
