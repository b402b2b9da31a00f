import os
import sys
from datetime import datetime, timezone

import pytest

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

from fastapi.testclient import TestClient
from jwt_generation import generate_jwt_token
from src.config.settings import Config
from src.domain.entities.message import MessageParticipant, MessageWithParticipants
from src.fastapi_app import create_fastapi_app
from src.infrastructure.persistence import (
    InMemoryMessageRepository,
    InMemoryParticipantRepository,
)
from src.setup.ioc.container import InMemoryPersistenceProvider, create_container

TEST_SECRET = "test-secret-for-the-messaging-service-0123456789"

USERS = {
    "u1": "alice",
    "u2": "bob",
    "u3": "carol",
}


@pytest.fixture(autouse=True)
def auth_config(monkeypatch):
    monkeypatch.setattr(Config, "SERVICE_AUTH_SECRET", TEST_SECRET)
    monkeypatch.setattr(Config, "SERVICE_AUTH_ISSUER", "messaging-tests")
    monkeypatch.setattr(Config, "SERVICE_AUTH_AUDIENCE", "messaging-api")


@pytest.fixture()
def users():
    return dict(USERS)


@pytest.fixture()
def message_repository(users):
    return InMemoryMessageRepository(users=users)


@pytest.fixture()
def participant_repository(users):
    return InMemoryParticipantRepository(users=users)


@pytest.fixture()
def app():
    """Create a FastAPI app backed by in-memory repositories for each test."""
    container = create_container(InMemoryPersistenceProvider(USERS))
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def auth_headers():
    """Factory for Authorization headers carrying a valid JWT for ``user_id``."""

    def _headers(user_id: str = "u1") -> dict:
        return {"Authorization": f"Bearer {generate_jwt_token(user_id)}"}

    return _headers


def make_message(
    id: int = 1,
    sender_id: str = "u1",
    receiver_id: str = "u2",
    is_read: bool = False,
    subject: str = "Hi",
    body: str = "Hello",
) -> MessageWithParticipants:
    return MessageWithParticipants(
        id=id,
        subject=subject,
        body=body,
        sender_id=sender_id,
        receiver_id=receiver_id,
        is_read=is_read,
        created_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        sender=MessageParticipant(id=sender_id, user_name=USERS.get(sender_id, "?")),
        receiver=MessageParticipant(
            id=receiver_id, user_name=USERS.get(receiver_id, "?")
        ),
    )
