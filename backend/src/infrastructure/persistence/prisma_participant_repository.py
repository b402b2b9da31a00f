"""
Prisma Participant Repository Implementation.

Reads the User table for the recipient picker. Only id and user_name leave
this module; credentials stored on the row are never mapped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.domain.entities.message import MessageParticipant
from src.domain.ports.repositories.participant_repository import (
    ParticipantRepository,
)

if TYPE_CHECKING:
    from prisma import Prisma


class PrismaParticipantRepository(ParticipantRepository):
    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def list_excluding(self, user_id: str) -> list[MessageParticipant]:
        records = await self._prisma.user.find_many(
            where={"NOT": {"id": user_id}},
            order={"user_name": "asc"},
        )
        return [
            MessageParticipant(id=record.id, user_name=record.user_name)
            for record in records
        ]
