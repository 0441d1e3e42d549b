import os

import pytest
from fastapi.testclient import TestClient

# Ensure we default to memory backend for tests to avoid filesystem dependencies
os.environ.setdefault("PERSISTENCE_BACKEND", "memory")

from todo_api.main import create_app  # noqa: E402
from todo_api.repositories import InMemoryTaskRepository  # noqa: E402
from todo_api.settings import Settings  # noqa: E402


@pytest.fixture
def client():
    # A fresh app per test so task ids always start at 1
    return TestClient(create_app(Settings(persistence_backend="memory")))


@pytest.fixture
def repository():
    return InMemoryTaskRepository()
