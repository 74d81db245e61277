# tests/conftest.py

import os, sys
from datetime import datetime, timedelta, timezone

# Settings are read at import time
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["STORE_BACKEND"] = "memory"

# Add the project root (the folder containing `chat_backend/`) to sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
from fastapi.testclient import TestClient
from chat_backend.main import app
from chat_backend.models.message import StoredMessage
from chat_backend.routers.deps import get_image_store, get_message_store, get_user_account_store
from chat_backend.services.image_store import LocalImageStore
from chat_backend.services.message_store import InMemoryMessageStore
from chat_backend.services.user_store import InMemoryUserAccountStore


class FakeClock:
    """Ticks one second per call."""

    def __init__(self, start=datetime(2024, 1, 1, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def message_store(clock):
    store = InMemoryMessageStore(clock=clock)
    store.insert("1", StoredMessage(username="u1", timestamp=clock(), text="t1"))
    store.insert("2", StoredMessage(username="u2", timestamp=clock(), text="t2"))
    return store


@pytest.fixture
def user_store():
    return InMemoryUserAccountStore()


@pytest.fixture
def image_store(tmp_path):
    return LocalImageStore(str(tmp_path / "images"), "/images")


@pytest.fixture
def client(message_store, user_store, image_store):
    app.dependency_overrides[get_message_store] = lambda: message_store
    app.dependency_overrides[get_user_account_store] = lambda: user_store
    app.dependency_overrides[get_image_store] = lambda: image_store
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def token(client):
    response = client.post("/auth/login", json={"username": "username", "password": "password"})
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
