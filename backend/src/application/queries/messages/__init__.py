"""Message queries."""

from .get_inbox_messages import GetInboxMessagesQuery, GetInboxMessagesHandler
from .get_sent_messages import GetSentMessagesQuery, GetSentMessagesHandler

__all__ = [
    "GetInboxMessagesQuery",
    "GetInboxMessagesHandler",
    "GetSentMessagesQuery",
    "GetSentMessagesHandler",
]
