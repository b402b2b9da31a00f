"""
Message Entity - One directed communication between two users.

Message rules live on MessageEntity as pure functions: validation of a new
message and the two ownership checks (who may mark as read, who may delete).
Nothing here performs I/O.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class MessageParticipant:
    """Display info for one side of a message."""

    id: str
    user_name: str


@dataclass(frozen=True)
class Message:
    id: int
    subject: str
    body: str
    sender_id: str
    receiver_id: str
    created_at: datetime
    is_read: bool = False

    def mark_read(self) -> Message:
        """The only read-state transition: unread -> read."""
        if self.is_read:
            return self
        return replace(self, is_read=True)

    def to_message(self) -> Message:
        return Message(
            id=self.id,
            subject=self.subject,
            body=self.body,
            sender_id=self.sender_id,
            receiver_id=self.receiver_id,
            created_at=self.created_at,
            is_read=self.is_read,
        )


@dataclass(frozen=True, kw_only=True)
class MessageWithParticipants(Message):
    """Message enriched with sender/receiver display info, produced on every read."""

    sender: MessageParticipant
    receiver: MessageParticipant


@dataclass(frozen=True)
class NewMessage:
    """Candidate payload for the send operation."""

    subject: Optional[str]
    body: Optional[str]
    sender_id: Optional[str]
    receiver_id: Optional[str]


@dataclass(frozen=True)
class MessageValidationResult:
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


class MessageEntity:
    MAX_SUBJECT_LENGTH = 200
    MAX_BODY_LENGTH = 10000

    @classmethod
    def validate(cls, data: NewMessage) -> MessageValidationResult:
        """
        Check a candidate message against every rule and report all violations.

        Length limits apply to the untrimmed text and only when the field is
        present, so a blank field yields "required" rather than both errors.
        """
        errors: list[str] = []

        if _is_blank(data.subject):
            errors.append("Subject is required")
        elif len(data.subject) > cls.MAX_SUBJECT_LENGTH:
            errors.append(
                f"Subject must be at most {cls.MAX_SUBJECT_LENGTH} characters"
            )

        if _is_blank(data.body):
            errors.append("Body is required")
        elif len(data.body) > cls.MAX_BODY_LENGTH:
            errors.append(f"Body must be at most {cls.MAX_BODY_LENGTH} characters")

        if _is_blank(data.sender_id):
            errors.append("Sender ID is required")

        if _is_blank(data.receiver_id):
            errors.append("Receiver ID is required")

        if (
            not _is_blank(data.sender_id)
            and not _is_blank(data.receiver_id)
            and data.sender_id == data.receiver_id
        ):
            errors.append("Cannot send a message to yourself")

        return MessageValidationResult(errors=errors)

    @staticmethod
    def can_mark_as_read(message: Message, user_id: str) -> bool:
        return message.receiver_id == user_id

    @staticmethod
    def can_delete(message: Message, user_id: str) -> bool:
        return user_id in (message.sender_id, message.receiver_id)
