"""Message commands."""

from .send_message import SendMessageCommand, SendMessageHandler
from .mark_message_as_read import MarkMessageAsReadCommand, MarkMessageAsReadHandler
from .delete_message import DeleteMessageCommand, DeleteMessageHandler

__all__ = [
    "SendMessageCommand",
    "SendMessageHandler",
    "MarkMessageAsReadCommand",
    "MarkMessageAsReadHandler",
    "DeleteMessageCommand",
    "DeleteMessageHandler",
]
