"""Message DTOs for API responses."""

from datetime import datetime
from pydantic import BaseModel

from src.domain.entities.message import (
    Message,
    MessageParticipant,
    MessageWithParticipants,
)


class ParticipantDTO(BaseModel):
    id: str
    user_name: str

    @classmethod
    def from_entity(cls, participant: MessageParticipant) -> "ParticipantDTO":
        return cls(id=participant.id, user_name=participant.user_name)


class MessageDTO(BaseModel):
    """DTO for message data returned to frontend."""

    id: int
    subject: str
    body: str
    sender_id: str
    receiver_id: str
    is_read: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            id=message.id,
            subject=message.subject,
            body=message.body,
            sender_id=message.sender_id,
            receiver_id=message.receiver_id,
            is_read=message.is_read,
            created_at=message.created_at,
        )


class MessageWithParticipantsDTO(MessageDTO):
    sender: ParticipantDTO
    receiver: ParticipantDTO

    @classmethod
    def from_entity(
        cls, message: MessageWithParticipants
    ) -> "MessageWithParticipantsDTO":
        return cls(
            id=message.id,
            subject=message.subject,
            body=message.body,
            sender_id=message.sender_id,
            receiver_id=message.receiver_id,
            is_read=message.is_read,
            created_at=message.created_at,
            sender=ParticipantDTO.from_entity(message.sender),
            receiver=ParticipantDTO.from_entity(message.receiver),
        )
