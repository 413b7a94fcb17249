"""Shared fixtures: each test gets its own application and store."""

import os

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("APP_ENV", "test")

from todo_api.main import create_app  # noqa: E402
from todo_api.repositories import InMemoryRepository  # noqa: E402
from todo_api.services import TodoService  # noqa: E402


@pytest.fixture
def repository() -> InMemoryRepository:
    return InMemoryRepository()


@pytest.fixture
def service(repository: InMemoryRepository) -> TodoService:
    return TodoService(repository)


@pytest.fixture
def app(repository: InMemoryRepository):
    return create_app(repository=repository)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
