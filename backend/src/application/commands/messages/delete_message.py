"""Delete Message Command."""

from dataclasses import dataclass

from src.application.common.error_boundary import use_case_boundary
from src.application.common.interfaces import Command, CommandHandler
from src.domain.entities.message import MessageEntity
from src.domain.exceptions import AccessDeniedError, EntityNotFoundError
from src.domain.ports.repositories import MessageRepository
from src.domain.value_objects.message_id import MessageId


@dataclass(frozen=True)
class DeleteMessageCommand(Command[None]):
    message_id: MessageId
    user_id: str


class DeleteMessageHandler(CommandHandler[None]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: DeleteMessageCommand) -> None:
        message_id = command.message_id.value

        with use_case_boundary("delete_message", "Failed to delete message"):
            message = await self._message_repository.find_by_id(message_id)
            if message is None:
                raise EntityNotFoundError("Message not found")

            if not MessageEntity.can_delete(message, command.user_id):
                raise AccessDeniedError(
                    "You can only delete messages you sent or received"
                )

            await self._message_repository.delete(message_id, command.user_id)
