"""Get Sent Messages Query."""

from dataclasses import dataclass

from src.application.common.error_boundary import use_case_boundary
from src.application.common.interfaces import Query, QueryHandler
from src.domain.entities.message import MessageWithParticipants
from src.domain.exceptions import DomainValidationError
from src.domain.ports.repositories import MessageRepository


@dataclass(frozen=True)
class GetSentMessagesQuery(Query[list[MessageWithParticipants]]):
    user_id: str


class GetSentMessagesHandler(QueryHandler[list[MessageWithParticipants]]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(
        self, query: GetSentMessagesQuery
    ) -> list[MessageWithParticipants]:
        with use_case_boundary("get_sent", "Failed to fetch sent messages"):
            if not query.user_id or not query.user_id.strip():
                raise DomainValidationError("User ID is required")
            return await self._message_repository.find_by_sender_id(query.user_id)
