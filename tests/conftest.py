"""
pytest configuration and fixtures.
"""

from typing import Generator, List

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from user_registry_api.app.core.config import Settings
from user_registry_api.app.main import create_app
from user_registry_api.app.schemas.user import UserRead
from user_registry_api.app.services.user_service import UserStore


@pytest.fixture
def test_users() -> List[UserRead]:
    return [
        UserRead(id="0", name="John", email="john@domain.com"),
        UserRead(id="1", name="Joan", email="joan@domain.com"),
    ]


@pytest.fixture
def app() -> FastAPI:
    """A fresh application with an empty store."""
    return create_app(Settings(log_level="WARNING", enable_docs=False))


@pytest.fixture
def store(app: FastAPI) -> UserStore:
    return app.state.user_store


@pytest.fixture
def seeded_store(store: UserStore, test_users: List[UserRead]) -> UserStore:
    """The application's store holding copies of ``test_users``."""
    store._users.extend(user.model_copy() for user in test_users)
    return store


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client
