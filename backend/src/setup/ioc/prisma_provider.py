"""
Prisma persistence provider.

- Prisma client is APP-scoped: connected once, disconnected when the
  container closes
- Repositories are REQUEST-scoped and share the client
"""

import logging
from typing import AsyncIterator

from dishka import Provider, Scope, provide
from prisma import Prisma

from src.config.settings import Config
from src.domain.ports.repositories import MessageRepository, ParticipantRepository
from src.infrastructure.persistence import (
    PrismaMessageRepository,
    PrismaParticipantRepository,
)

logger = logging.getLogger(__name__)


class PrismaProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterator[Prisma]:
        if Config.DATABASE_URL:
            prisma = Prisma(datasource={"url": Config.DATABASE_URL})
        else:
            prisma = Prisma()
        await prisma.connect()
        logger.info("Prisma client connected")
        yield prisma
        await prisma.disconnect()
        logger.info("Prisma client disconnected")

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        """
        Return type is ABSTRACT (MessageRepository), implementation is
        CONCRETE (PrismaMessageRepository).
        """
        return PrismaMessageRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_participant_repository(self, prisma: Prisma) -> ParticipantRepository:
        return PrismaParticipantRepository(prisma)
