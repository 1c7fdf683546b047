"""Tests for the health check endpoint."""

from fastapi.testclient import TestClient

from task_api import __version__
from task_api.config import Settings
from task_api.main import create_app


def test_health_check(client: TestClient) -> None:
    """Test that health check returns healthy status outside the envelope."""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": __version__}


def test_health_check_after_clearing_tasks(client: TestClient) -> None:
    """Test that an empty task list does not affect health."""
    client.delete("/api/tasks")
    assert client.get("/api/health").json()["status"] == "healthy"


def test_health_check_without_debug_routes() -> None:
    client = TestClient(create_app(Settings(enable_debug_routes=False)))
    assert client.get("/api/health").status_code == 200
