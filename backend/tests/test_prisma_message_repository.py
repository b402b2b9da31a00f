from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from prisma.errors import ForeignKeyViolationError, RecordNotFoundError

from src.domain.entities.message import Message, MessageWithParticipants, NewMessage
from src.domain.exceptions import DomainValidationError, EntityNotFoundError
from src.infrastructure.persistence import (
    PrismaMessageRepository,
    PrismaParticipantRepository,
)

pytestmark = pytest.mark.asyncio

CREATED_AT = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _user(id: str, user_name: str):
    return SimpleNamespace(id=id, user_name=user_name, password="hash")


def _record(id=1, is_read=False, with_participants=True):
    record = SimpleNamespace(
        id=id,
        subject="Hi",
        body="Hello",
        sender_id="u1",
        receiver_id="u2",
        is_read=is_read,
        created_at=CREATED_AT,
        sender=None,
        receiver=None,
    )
    if with_participants:
        record.sender = _user("u1", "alice")
        record.receiver = _user("u2", "bob")
    return record


def _prisma_error(cls):
    # Bypass the Prisma-specific __init__ payload; only the type matters here
    return cls.__new__(cls)


@pytest.fixture()
def prisma():
    client = MagicMock()
    client.message.create = AsyncMock()
    client.message.find_many = AsyncMock()
    client.message.find_unique = AsyncMock()
    client.message.update = AsyncMock()
    client.message.delete = AsyncMock()
    client.user.find_many = AsyncMock()
    return client


async def test_create_includes_participants(prisma):
    prisma.message.create.return_value = _record()
    repo = PrismaMessageRepository(prisma)

    message = await repo.create(
        NewMessage(subject="Hi", body="Hello", sender_id="u1", receiver_id="u2")
    )

    prisma.message.create.assert_awaited_once_with(
        data={"subject": "Hi", "body": "Hello", "sender_id": "u1", "receiver_id": "u2"},
        include={"sender": True, "receiver": True},
    )
    assert isinstance(message, MessageWithParticipants)
    assert message.sender.user_name == "alice"
    assert message.receiver.id == "u2"
    assert not hasattr(message.sender, "password")


async def test_create_foreign_key_violation_is_validation_error(prisma):
    prisma.message.create.side_effect = _prisma_error(ForeignKeyViolationError)
    repo = PrismaMessageRepository(prisma)

    with pytest.raises(DomainValidationError, match="Related user does not exist"):
        await repo.create(
            NewMessage(subject="Hi", body="Hello", sender_id="u1", receiver_id="u9")
        )


async def test_inbox_query_orders_newest_first(prisma):
    prisma.message.find_many.return_value = [_record(id=2), _record(id=1)]
    repo = PrismaMessageRepository(prisma)

    messages = await repo.find_by_receiver_id("u2")

    prisma.message.find_many.assert_awaited_once_with(
        where={"receiver_id": "u2"},
        include={"sender": True, "receiver": True},
        order={"created_at": "desc"},
    )
    assert [m.id for m in messages] == [2, 1]


async def test_sent_query_filters_by_sender(prisma):
    prisma.message.find_many.return_value = []
    repo = PrismaMessageRepository(prisma)

    assert await repo.find_by_sender_id("u1") == []
    assert prisma.message.find_many.await_args.kwargs["where"] == {"sender_id": "u1"}


async def test_find_by_id_absent_returns_none(prisma):
    prisma.message.find_unique.return_value = None
    repo = PrismaMessageRepository(prisma)

    assert await repo.find_by_id(42) is None


async def test_mark_as_read_returns_plain_message(prisma):
    prisma.message.update.return_value = _record(is_read=True, with_participants=False)
    repo = PrismaMessageRepository(prisma)

    message = await repo.mark_as_read(1, "u2")

    prisma.message.update.assert_awaited_once_with(
        where={"id": 1}, data={"is_read": True}
    )
    assert type(message) is Message
    assert message.is_read


@pytest.mark.parametrize("outcome", ["none", "raises"])
async def test_mark_as_read_on_vanished_row_is_not_found(prisma, outcome):
    if outcome == "none":
        prisma.message.update.return_value = None
    else:
        prisma.message.update.side_effect = _prisma_error(RecordNotFoundError)
    repo = PrismaMessageRepository(prisma)

    with pytest.raises(EntityNotFoundError):
        await repo.mark_as_read(1, "u2")


@pytest.mark.parametrize("outcome", ["none", "raises"])
async def test_delete_on_vanished_row_is_not_found(prisma, outcome):
    if outcome == "none":
        prisma.message.delete.return_value = None
    else:
        prisma.message.delete.side_effect = _prisma_error(RecordNotFoundError)
    repo = PrismaMessageRepository(prisma)

    with pytest.raises(EntityNotFoundError):
        await repo.delete(1, "u1")


async def test_delete_succeeds(prisma):
    prisma.message.delete.return_value = _record()
    repo = PrismaMessageRepository(prisma)

    assert await repo.delete(1, "u1") is None
    prisma.message.delete.assert_awaited_once_with(where={"id": 1})


async def test_participants_exclude_caller(prisma):
    prisma.user.find_many.return_value = [_user("u2", "bob"), _user("u3", "carol")]
    repo = PrismaParticipantRepository(prisma)

    recipients = await repo.list_excluding("u1")

    prisma.user.find_many.assert_awaited_once_with(
        where={"NOT": {"id": "u1"}}, order={"user_name": "asc"}
    )
    assert [p.user_name for p in recipients] == ["bob", "carol"]
