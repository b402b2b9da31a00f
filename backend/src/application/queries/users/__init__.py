"""User directory queries."""

from .list_recipients import ListRecipientsQuery, ListRecipientsHandler

__all__ = [
    "ListRecipientsQuery",
    "ListRecipientsHandler",
]
