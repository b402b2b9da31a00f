"""
Prisma Message Repository Implementation.

- Implements MessageRepository port from domain layer
- Uses the injected Prisma client (never a module-level instance)
- Maps between Prisma models and domain entities
- Translates Prisma data errors into the domain error taxonomy

Prisma Message Model (from prisma/schema.prisma):
    model Message {
        id          Int      @id @default(autoincrement())
        subject     String   @db.VarChar(200)
        body        String
        sender_id   String
        receiver_id String
        is_read     Boolean  @default(false)
        created_at  DateTime @default(now())
        sender      User     @relation("SentMessages", ...)
        receiver    User     @relation("ReceivedMessages", ...)
    }

Mapping:
- Prisma: sender / receiver (User) ←→ Domain: MessageParticipant(id, user_name)
- Other fields map directly
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from prisma.errors import (
    ForeignKeyViolationError,
    RecordNotFoundError,
    UniqueViolationError,
)

from src.domain.entities.message import (
    Message,
    MessageParticipant,
    MessageWithParticipants,
    NewMessage,
)
from src.domain.exceptions import DomainValidationError, EntityNotFoundError
from src.domain.ports.repositories.message_repository import MessageRepository

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import Message as PrismaMessage, User as PrismaUser

logger = logging.getLogger(__name__)

# prisma-client-py has no per-relation field selection, so the full User row is
# loaded; _to_participant keeps only id and user_name and drops the rest.
PARTICIPANTS = {"sender": True, "receiver": True}
NEWEST_FIRST = {"created_at": "desc"}


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    @staticmethod
    def _to_participant(user: PrismaUser) -> MessageParticipant:
        return MessageParticipant(id=user.id, user_name=user.user_name)

    def _to_message(self, record: PrismaMessage) -> Message:
        return Message(
            id=record.id,
            subject=record.subject,
            body=record.body,
            sender_id=record.sender_id,
            receiver_id=record.receiver_id,
            is_read=record.is_read,
            created_at=record.created_at,
        )

    def _to_entity(self, record: PrismaMessage) -> MessageWithParticipants:
        """
        Map Prisma record (loaded with sender and receiver) to domain entity.
        """
        return MessageWithParticipants(
            id=record.id,
            subject=record.subject,
            body=record.body,
            sender_id=record.sender_id,
            receiver_id=record.receiver_id,
            is_read=record.is_read,
            created_at=record.created_at,
            sender=self._to_participant(record.sender),
            receiver=self._to_participant(record.receiver),
        )

    async def create(self, data: NewMessage) -> MessageWithParticipants:
        try:
            record = await self._prisma.message.create(
                data={
                    "subject": data.subject,
                    "body": data.body,
                    "sender_id": data.sender_id,
                    "receiver_id": data.receiver_id,
                },
                include=PARTICIPANTS,
            )
        except ForeignKeyViolationError as e:
            logger.info(f"[create] Unknown participant in {data}: {e}")
            raise DomainValidationError("Related user does not exist") from e
        except UniqueViolationError as e:
            raise DomainValidationError("Duplicate data constraint violation") from e
        return self._to_entity(record)

    async def find_by_receiver_id(self, user_id: str) -> list[MessageWithParticipants]:
        records = await self._prisma.message.find_many(
            where={"receiver_id": user_id},
            include=PARTICIPANTS,
            order=NEWEST_FIRST,
        )
        return [self._to_entity(record) for record in records]

    async def find_by_sender_id(self, user_id: str) -> list[MessageWithParticipants]:
        records = await self._prisma.message.find_many(
            where={"sender_id": user_id},
            include=PARTICIPANTS,
            order=NEWEST_FIRST,
        )
        return [self._to_entity(record) for record in records]

    async def find_by_id(self, message_id: int) -> Optional[MessageWithParticipants]:
        record = await self._prisma.message.find_unique(
            where={"id": message_id},
            include=PARTICIPANTS,
        )
        return self._to_entity(record) if record else None

    async def mark_as_read(self, message_id: int, user_id: str) -> Message:
        """
        Flip is_read for a message.

        Prisma returns None (or raises RecordNotFoundError) when the row was
        deleted after the use case fetched it.
        """
        try:
            record = await self._prisma.message.update(
                where={"id": message_id},
                data={"is_read": True},
            )
        except RecordNotFoundError as e:
            raise EntityNotFoundError("Message not found") from e
        if record is None:
            raise EntityNotFoundError("Message not found")

        logger.info(f"[mark_as_read] Message {message_id} read by {user_id}")
        return self._to_message(record)

    async def delete(self, message_id: int, user_id: str) -> None:
        try:
            record = await self._prisma.message.delete(where={"id": message_id})
        except RecordNotFoundError as e:
            raise EntityNotFoundError("Message not found") from e
        if record is None:
            raise EntityNotFoundError("Message not found")

        logger.info(f"[delete] Message {message_id} deleted by {user_id}")
