"""Tests for debug endpoints and fallback error handling."""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from task_api.config import Settings
from task_api.main import create_app


def test_debug_error(client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
    """Test that the simulated fault becomes a 500 envelope."""
    with caplog.at_level(logging.ERROR, logger="task_api.main"):
        response = client.get("/api/debug/error")
    assert response.status_code == 500
    assert response.json() == {
        "status": "error",
        "data": None,
        "message": "Simulated server error.",
    }
    assert any("/api/debug/error" in r.getMessage() for r in caplog.records)


def test_debug_maintenance(client: TestClient) -> None:
    """Test the fixed 503 response."""
    response = client.get("/api/debug/maintenance")
    assert response.status_code == 503
    body = response.json()
    assert body["status"] == "error"
    assert body["data"] is None
    assert "maintenance" in body["message"]


def test_debug_routes_can_be_disabled() -> None:
    client = TestClient(create_app(Settings(enable_debug_routes=False)))
    assert client.get("/api/debug/error").status_code == 404
    assert client.get("/api/debug/maintenance").status_code == 404


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", "/"),
        ("GET", "/api/unknown"),
        ("POST", "/api/tasks/1"),
        ("PATCH", "/api/tasks/1"),
        ("DELETE", "/api/tasks/1/toggle"),
    ],
)
def test_unmatched_routes(client: TestClient, method: str, path: str) -> None:
    """Test that unknown paths and methods get the 404 envelope."""
    response = client.request(method, path)
    assert response.status_code == 404
    assert response.json() == {"status": "error", "data": None, "message": "Route not found."}


def test_unexpected_exception(app: FastAPI, caplog: pytest.LogCaptureFixture) -> None:
    """Test that an uncaught exception is mapped to a logged 500 envelope."""

    @app.get("/api/boom")
    async def boom() -> None:
        raise RuntimeError("kaboom")

    client = TestClient(app, raise_server_exceptions=False)
    with caplog.at_level(logging.INFO, logger="task_api.main"):
        response = client.get("/api/boom")
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("GET /api/boom 500") for m in messages)
    assert response.status_code == 500
    assert response.json() == {
        "status": "error",
        "data": None,
        "message": "Internal server error.",
    }

    # The server keeps answering
    assert client.get("/api/tasks").status_code == 200


def test_request_logging(client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
    """Test that each request is logged with method, path and status."""
    with caplog.at_level(logging.INFO, logger="task_api.main"):
        client.get("/api/tasks/999")
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("GET /api/tasks/999 404") for m in messages)
