"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS): send, mark as read, delete
- queries/   → Read operations (CQRS): inbox, sent, recipients
- dto/       → Data Transfer Objects
- common/    → Shared interfaces and the use-case error boundary

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities and repositories
"""
