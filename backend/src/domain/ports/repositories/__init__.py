"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (Prisma, in-memory, etc.)

Infrastructure layer provides implementations.
"""

from src.domain.ports.repositories.message_repository import MessageRepository
from src.domain.ports.repositories.participant_repository import (
    ParticipantRepository,
)

__all__ = [
    "MessageRepository",
    "ParticipantRepository",
]
