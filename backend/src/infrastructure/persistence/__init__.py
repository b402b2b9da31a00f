"""
Persistence Layer - Database implementations.

Contains Prisma and in-memory repository implementations for domain ports.
"""

from src.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)
from src.infrastructure.persistence.prisma_participant_repository import (
    PrismaParticipantRepository,
)
from src.infrastructure.persistence.in_memory_message_repository import (
    InMemoryMessageRepository,
    InMemoryParticipantRepository,
)

__all__ = [
    "PrismaMessageRepository",
    "PrismaParticipantRepository",
    "InMemoryMessageRepository",
    "InMemoryParticipantRepository",
]
