import pytest
from dataclasses import FrozenInstanceError

from conftest import make_message
from src.domain.entities.message import MessageEntity, NewMessage


def _candidate(**overrides) -> NewMessage:
    fields = {"subject": "Hi", "body": "Hello", "sender_id": "u1", "receiver_id": "u2"}
    fields.update(overrides)
    return NewMessage(**fields)


def test_valid_message_has_no_errors():
    result = MessageEntity.validate(_candidate())
    assert result.is_valid
    assert result.errors == []


def test_self_message_is_rejected():
    result = MessageEntity.validate(_candidate(sender_id="u1", receiver_id="u1"))
    assert not result.is_valid
    assert result.errors == ["Cannot send a message to yourself"]


@pytest.mark.parametrize("blank", ["", "   ", None])
def test_blank_subject_and_body_are_both_reported(blank):
    result = MessageEntity.validate(_candidate(subject=blank, body=blank))
    assert result.errors == ["Subject is required", "Body is required"]


def test_every_violated_rule_is_reported():
    result = MessageEntity.validate(
        NewMessage(subject="", body="", sender_id="", receiver_id=None)
    )
    assert len(result.errors) == 4
    assert "Sender ID is required" in result.errors
    assert "Receiver ID is required" in result.errors
    # Self-check needs both ids present
    assert "Cannot send a message to yourself" not in result.errors


def test_length_limits_are_inclusive():
    result = MessageEntity.validate(
        _candidate(
            subject="s" * MessageEntity.MAX_SUBJECT_LENGTH,
            body="b" * MessageEntity.MAX_BODY_LENGTH,
        )
    )
    assert result.is_valid


def test_oversized_subject_and_body():
    result = MessageEntity.validate(
        _candidate(subject="s" * 201, body="b" * 10001, receiver_id="u1")
    )
    assert result.errors == [
        "Subject must be at most 200 characters",
        "Body must be at most 10000 characters",
        "Cannot send a message to yourself",
    ]


def test_length_is_checked_before_trimming():
    result = MessageEntity.validate(_candidate(subject="x" + " " * 200))
    assert result.errors == ["Subject must be at most 200 characters"]


def test_can_delete_for_sender_and_receiver_only():
    message = make_message(sender_id="u1", receiver_id="u2")
    assert MessageEntity.can_delete(message, "u1")
    assert MessageEntity.can_delete(message, "u2")
    assert not MessageEntity.can_delete(message, "u3")


def test_can_mark_as_read_for_receiver_only():
    message = make_message(sender_id="u1", receiver_id="u2")
    assert MessageEntity.can_mark_as_read(message, "u2")
    assert not MessageEntity.can_mark_as_read(message, "u1")
    assert not MessageEntity.can_mark_as_read(message, "u3")


def test_mark_read_is_one_way():
    message = make_message(is_read=False)

    read = message.mark_read()

    assert read.is_read
    assert not message.is_read
    assert read.mark_read() is read
    assert read.sender == message.sender


def test_message_fields_cannot_be_assigned():
    message = make_message()
    with pytest.raises(FrozenInstanceError):
        message.is_read = True


def test_to_message_drops_participants():
    message = make_message(id=7, is_read=True).to_message()
    assert type(message).__name__ == "Message"
    assert message.id == 7
    assert message.is_read
    assert not hasattr(message, "sender")
