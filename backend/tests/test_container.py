import pytest
from fastapi.testclient import TestClient

from src.config.settings import Config, TestingConfig, get_config
from src.fastapi_app import create_fastapi_app
from src.setup.ioc.container import (
    InMemoryPersistenceProvider,
    create_container,
    create_persistence_provider,
    parse_user_directory,
)


def test_parse_user_directory():
    assert parse_user_directory(" u1:alice , u2:bob ,") == {"u1": "alice", "u2": "bob"}
    assert parse_user_directory("") == {}


@pytest.mark.parametrize("raw", ["u1", "u1:", ":alice"])
def test_parse_user_directory_rejects_malformed_entries(raw):
    with pytest.raises(ValueError):
        parse_user_directory(raw)


def test_testing_env_selects_memory_backend(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    assert get_config() is TestingConfig
    assert isinstance(create_persistence_provider(), InMemoryPersistenceProvider)


def test_unknown_backend_is_rejected():
    with pytest.raises(ValueError, match="Unknown PERSISTENCE_BACKEND"):
        create_persistence_provider("sqlite")


def test_memory_backend_is_usable_from_config(monkeypatch, auth_headers):
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.setattr(Config, "MEMORY_USERS", "u1:alice,u2:bob")

    app = create_fastapi_app(create_container(create_persistence_provider("memory")))

    with TestClient(app) as client:
        sent = client.post(
            "/messages",
            headers=auth_headers("u1"),
            json={"subject": "Hi", "body": "Hello", "receiver_id": "u2"},
        )
        recipients = client.get("/users/recipients", headers=auth_headers("u1"))

    assert sent.status_code == 201
    assert sent.json()["receiver"] == {"id": "u2", "user_name": "bob"}
    assert recipients.json() == [{"id": "u2", "user_name": "bob"}]
