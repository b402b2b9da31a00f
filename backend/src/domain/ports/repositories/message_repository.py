"""
Message Repository Port - Interface for message persistence.
Implementations:
    src/infrastructure/persistence/prisma_message_repository.py
    src/infrastructure/persistence/in_memory_message_repository.py

Contract shared by every implementation:
- Reads return newest first by creation time, with participants attached.
- find_by_id returns None (not an error) when nothing matches.
- mark_as_read / delete on a missing row raise EntityNotFoundError.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.message import Message, MessageWithParticipants, NewMessage


class MessageRepository(ABC):
    @abstractmethod
    async def create(self, data: NewMessage) -> MessageWithParticipants: ...

    @abstractmethod
    async def find_by_receiver_id(
        self, user_id: str
    ) -> list[MessageWithParticipants]: ...

    @abstractmethod
    async def find_by_sender_id(self, user_id: str) -> list[MessageWithParticipants]: ...

    @abstractmethod
    async def find_by_id(self, message_id: int) -> Optional[MessageWithParticipants]: ...

    @abstractmethod
    async def mark_as_read(self, message_id: int, user_id: str) -> Message: ...

    @abstractmethod
    async def delete(self, message_id: int, user_id: str) -> None: ...
