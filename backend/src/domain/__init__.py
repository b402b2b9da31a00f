"""
DOMAIN LAYER - The Heart of the Messaging Service

This layer contains:
- Entities: Message and the MessageEntity rules (validation, permissions)
- Value Objects: Immutable types (MessageId, UserId)
- Ports: Interfaces that infrastructure implements
- Exceptions: The typed error taxonomy

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
"""
