"""
Shared pytest fixtures for user hobbies tests.
"""
import os
from unittest.mock import AsyncMock, patch

import pytest

# Tests never talk to a real MongoDB
os.environ["STORAGE_BACKEND"] = "memory"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from user_hobbies.core.config import reset_settings
from user_hobbies.di.container import reset_container
from user_hobbies.infrastructure.db.memory_repositories import (
    InMemoryHobbyRepository,
    InMemoryUserRepository,
)

reset_settings()


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_user_hobbies",
        "STORAGE_BACKEND": "memory",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        reset_settings()
        yield env_vars
    reset_settings()


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock()


@pytest.fixture
def mock_hobby_repo():
    """Mock HobbyRepository with async methods."""
    return AsyncMock()


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def hobby_repo():
    return InMemoryHobbyRepository()


@pytest.fixture
def client():
    """TestClient over the full app with a fresh in-memory store."""
    from fastapi.testclient import TestClient
    from user_hobbies.main import app

    reset_container()
    with TestClient(app) as c:
        yield c
    reset_container()
