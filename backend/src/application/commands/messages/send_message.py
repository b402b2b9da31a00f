"""Send Message Command."""

import logging
from dataclasses import dataclass
from typing import Optional

from src.application.common.error_boundary import use_case_boundary
from src.application.common.interfaces import Command, CommandHandler
from src.domain.entities.message import (
    MessageEntity,
    MessageWithParticipants,
    NewMessage,
)
from src.domain.exceptions import DomainValidationError
from src.domain.ports.repositories import MessageRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendMessageCommand(Command[MessageWithParticipants]):
    subject: Optional[str]
    body: Optional[str]
    sender_id: Optional[str]
    receiver_id: Optional[str]


class SendMessageHandler(CommandHandler[MessageWithParticipants]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: SendMessageCommand) -> MessageWithParticipants:
        with use_case_boundary("send_message", "Failed to send message"):
            data = NewMessage(
                subject=command.subject,
                body=command.body,
                sender_id=command.sender_id,
                receiver_id=command.receiver_id,
            )

            validation = MessageEntity.validate(data)
            if not validation.is_valid:
                raise DomainValidationError(", ".join(validation.errors))

            message = await self._message_repository.create(data)
            logger.info(
                f"[send_message] Message {message.id} sent from "
                f"{message.sender_id} to {message.receiver_id}"
            )
            return message
