"""
Dishka DI Container Setup.

- Registers all dependencies (repositories, handlers)
- Maps abstract repository ports to concrete implementations
- Manages lifecycle (APP = singleton, REQUEST = per-request)

Providers:
- MessagingProvider: command/query handlers, independent of storage
- PrismaProvider: Prisma client + Prisma repositories (setup/ioc/prisma_provider.py)
- InMemoryPersistenceProvider: in-memory repositories sharing one user directory

Flow:
  Container → provides → PrismaMessageRepository → to → SendMessageHandler
                                    ↓
                            uses MessageRepository interface
"""

from typing import Mapping, Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from src.application.commands.messages import (
    DeleteMessageHandler,
    MarkMessageAsReadHandler,
    SendMessageHandler,
)
from src.application.queries.messages import (
    GetInboxMessagesHandler,
    GetSentMessagesHandler,
)
from src.application.queries.users import ListRecipientsHandler
from src.config.settings import Config, get_config
from src.domain.ports.repositories import MessageRepository, ParticipantRepository
from src.infrastructure.persistence import (
    InMemoryMessageRepository,
    InMemoryParticipantRepository,
)


class MessagingProvider(Provider):
    """
    Handler provider.

    Each handler asks for the abstract repository; whichever persistence
    provider is registered alongside decides the implementation.
    """

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(
        self, message_repository: MessageRepository
    ) -> SendMessageHandler:
        return SendMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_inbox_messages_handler(
        self, message_repository: MessageRepository
    ) -> GetInboxMessagesHandler:
        return GetInboxMessagesHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_sent_messages_handler(
        self, message_repository: MessageRepository
    ) -> GetSentMessagesHandler:
        return GetSentMessagesHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_mark_message_as_read_handler(
        self, message_repository: MessageRepository
    ) -> MarkMessageAsReadHandler:
        return MarkMessageAsReadHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_message_handler(
        self, message_repository: MessageRepository
    ) -> DeleteMessageHandler:
        return DeleteMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_recipients_handler(
        self, participant_repository: ParticipantRepository
    ) -> ListRecipientsHandler:
        return ListRecipientsHandler(participant_repository)


class InMemoryPersistenceProvider(Provider):
    """
    In-memory repositories, APP-scoped so state survives across requests.

    Args:
        users: initial user directory (user id -> user name)
    """

    def __init__(self, users: Optional[Mapping[str, str]] = None):
        super().__init__()
        self._users = dict(users or {})

    @provide(scope=Scope.APP)
    def get_message_repository(self) -> MessageRepository:
        return InMemoryMessageRepository(users=self._users)

    @provide(scope=Scope.APP)
    def get_participant_repository(self) -> ParticipantRepository:
        return InMemoryParticipantRepository(users=self._users)


def parse_user_directory(raw: str) -> dict[str, str]:
    """Parse "u1:alice,u2:bob" into {"u1": "alice", "u2": "bob"}."""
    users = {}
    for entry in raw.split(","):
        if not entry.strip():
            continue
        user_id, sep, user_name = entry.partition(":")
        if not sep or not user_id.strip() or not user_name.strip():
            raise ValueError(f"Invalid MEMORY_USERS entry: {entry!r}")
        users[user_id.strip()] = user_name.strip()
    return users


def create_persistence_provider(
    backend: Optional[str] = None, settings: Optional[type[Config]] = None
) -> Provider:
    """
    Pick the persistence provider.

    Settings default to get_config(), so APP_ENV=testing selects the memory
    backend unless ``backend`` is given explicitly.
    """
    settings = settings or get_config()
    backend = (backend or settings.PERSISTENCE_BACKEND).lower()
    if backend == "memory":
        return InMemoryPersistenceProvider(parse_user_directory(settings.MEMORY_USERS))
    if backend == "prisma":
        # Imported lazily: the Prisma client only exists after `prisma generate`
        from src.setup.ioc.prisma_provider import PrismaProvider

        return PrismaProvider()
    raise ValueError(f"Unknown PERSISTENCE_BACKEND: {backend}")


def create_container(*providers: Provider) -> AsyncContainer:
    """
    Create and configure the DI container.

    With no arguments the persistence provider is chosen from get_config().
    Call this ONCE per app.
    """
    if not providers:
        providers = (create_persistence_provider(),)
    return make_async_container(MessagingProvider(), *providers)
