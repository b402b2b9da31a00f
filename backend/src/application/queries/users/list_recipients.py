"""List Recipients Query - users the caller can address a message to."""

from dataclasses import dataclass

from src.application.common.error_boundary import use_case_boundary
from src.application.common.interfaces import Query, QueryHandler
from src.domain.entities.message import MessageParticipant
from src.domain.exceptions import DomainValidationError
from src.domain.ports.repositories import ParticipantRepository


@dataclass(frozen=True)
class ListRecipientsQuery(Query[list[MessageParticipant]]):
    user_id: str


class ListRecipientsHandler(QueryHandler[list[MessageParticipant]]):
    def __init__(self, participant_repository: ParticipantRepository):
        self._participant_repository = participant_repository

    async def execute(self, query: ListRecipientsQuery) -> list[MessageParticipant]:
        with use_case_boundary("list_recipients", "Failed to fetch recipients"):
            if not query.user_id or not query.user_id.strip():
                raise DomainValidationError("User ID is required")
            return await self._participant_repository.list_excluding(query.user_id)
