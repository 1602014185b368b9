"""Test configuration for the todo API."""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from todo_api.main import create_app  # noqa: E402
from todo_api.repositories.todo_repository import SEED_TODOS, TodoRepository  # noqa: E402
from todo_api.settings import Settings  # noqa: E402

TOKEN = "test-token"


@pytest.fixture
def settings() -> Settings:
    """Settings with a known token."""
    return Settings(token=TOKEN)


@pytest.fixture
def repository() -> TodoRepository:
    """A repository holding the two seed todos."""
    return TodoRepository(SEED_TODOS)


@pytest.fixture
def client(settings: Settings, repository: TodoRepository) -> TestClient:
    """Provide a TestClient bound to a fresh application."""
    return TestClient(create_app(settings, repository))
