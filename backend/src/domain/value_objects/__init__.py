"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
"""

from src.domain.value_objects.user_id import UserId
from src.domain.value_objects.message_id import MessageId

__all__ = [
    "UserId",
    "MessageId",
]
