"""Pytest fixtures for the Task API tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from task_api.config import Settings
from task_api.main import create_app
from task_api.store import TaskStore


@pytest.fixture
def store() -> TaskStore:
    """A store holding the initial tasks (ids 1 and 2)."""
    return TaskStore()


@pytest.fixture
def app(store: TaskStore) -> FastAPI:
    """An application that owns the ``store`` fixture."""
    return create_app(Settings(), store=store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client for the API."""
    return TestClient(app)
