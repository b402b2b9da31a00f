"""
In-memory repositories.

Satisfy the same contracts as the Prisma repositories without a database.
Used by the test suite and selectable at runtime with PERSISTENCE_BACKEND=memory.

Both repositories read one shared ``users`` mapping (user id -> user name),
which plays the role of the User table: sending to an id that is not in it
fails the way a foreign-key violation does in PostgreSQL.
"""

import logging
from datetime import datetime, timezone
from itertools import count
from typing import Optional

from src.domain.entities.message import (
    Message,
    MessageParticipant,
    MessageWithParticipants,
    NewMessage,
)
from src.domain.exceptions import DomainValidationError, EntityNotFoundError
from src.domain.ports.repositories import MessageRepository, ParticipantRepository

logger = logging.getLogger(__name__)

DELETED_USER_NAME = "Deleted user"


class InMemoryMessageRepository(MessageRepository):
    def __init__(self, users: Optional[dict[str, str]] = None):
        self.users = users if users is not None else {}
        self._messages: dict[int, Message] = {}
        self._ids = count(1)

    def _participant(self, user_id: str) -> MessageParticipant:
        # The directory is shared and may lose a user whose messages remain
        user_name = self.users.get(user_id, DELETED_USER_NAME)
        return MessageParticipant(id=user_id, user_name=user_name)

    def _with_participants(self, message: Message) -> MessageWithParticipants:
        return MessageWithParticipants(
            id=message.id,
            subject=message.subject,
            body=message.body,
            sender_id=message.sender_id,
            receiver_id=message.receiver_id,
            is_read=message.is_read,
            created_at=message.created_at,
            sender=self._participant(message.sender_id),
            receiver=self._participant(message.receiver_id),
        )

    def _newest_first(self, messages) -> list[MessageWithParticipants]:
        ordered = sorted(messages, key=lambda m: (m.created_at, m.id), reverse=True)
        return [self._with_participants(m) for m in ordered]

    async def create(self, data: NewMessage) -> MessageWithParticipants:
        if data.sender_id not in self.users or data.receiver_id not in self.users:
            raise DomainValidationError("Related user does not exist")

        message = Message(
            id=next(self._ids),
            subject=data.subject,
            body=data.body,
            sender_id=data.sender_id,
            receiver_id=data.receiver_id,
            created_at=datetime.now(timezone.utc),
        )
        self._messages[message.id] = message
        return self._with_participants(message)

    async def find_by_receiver_id(self, user_id: str) -> list[MessageWithParticipants]:
        return self._newest_first(
            m for m in self._messages.values() if m.receiver_id == user_id
        )

    async def find_by_sender_id(self, user_id: str) -> list[MessageWithParticipants]:
        return self._newest_first(
            m for m in self._messages.values() if m.sender_id == user_id
        )

    async def find_by_id(self, message_id: int) -> Optional[MessageWithParticipants]:
        message = self._messages.get(message_id)
        return self._with_participants(message) if message else None

    async def mark_as_read(self, message_id: int, user_id: str) -> Message:
        message = self._messages.get(message_id)
        if message is None:
            raise EntityNotFoundError("Message not found")

        message = message.mark_read()
        self._messages[message_id] = message
        return message

    async def delete(self, message_id: int, user_id: str) -> None:
        if self._messages.pop(message_id, None) is None:
            raise EntityNotFoundError("Message not found")
        logger.debug(f"[delete] Message {message_id} deleted by {user_id}")


class InMemoryParticipantRepository(ParticipantRepository):
    def __init__(self, users: dict[str, str]):
        self._users = users

    async def list_excluding(self, user_id: str) -> list[MessageParticipant]:
        others = [
            MessageParticipant(id=uid, user_name=name)
            for uid, name in self._users.items()
            if uid != user_id
        ]
        return sorted(others, key=lambda p: p.user_name)
