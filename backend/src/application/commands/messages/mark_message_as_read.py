"""Mark Message As Read Command.

Existence is checked before permission, and permission before the write, so
callers can tell a missing message (404) from a forbidden one (403).
"""

from dataclasses import dataclass

from src.application.common.error_boundary import use_case_boundary
from src.application.common.interfaces import Command, CommandHandler
from src.domain.entities.message import Message, MessageEntity
from src.domain.exceptions import AccessDeniedError, EntityNotFoundError
from src.domain.ports.repositories import MessageRepository
from src.domain.value_objects.message_id import MessageId


@dataclass(frozen=True)
class MarkMessageAsReadCommand(Command[Message]):
    message_id: MessageId
    user_id: str


class MarkMessageAsReadHandler(CommandHandler[Message]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: MarkMessageAsReadCommand) -> Message:
        message_id = command.message_id.value

        with use_case_boundary("mark_as_read", "Failed to mark message as read"):
            message = await self._message_repository.find_by_id(message_id)
            if message is None:
                raise EntityNotFoundError("Message not found")

            if not MessageEntity.can_mark_as_read(message, command.user_id):
                raise AccessDeniedError(
                    "You can only mark messages you received as read"
                )

            # Already read: nothing to write.
            if message.is_read:
                return message.to_message()

            return await self._message_repository.mark_as_read(
                message_id, command.user_id
            )
