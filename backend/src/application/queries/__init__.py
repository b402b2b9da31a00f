"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- messages/ → get_inbox_messages, get_sent_messages
- users/    → list_recipients
"""
