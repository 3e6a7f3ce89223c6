"""
Tests for the HTTP surface with the model backend patched out.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from burrow import __version__
from burrow.api.settings_store import get_settings
from burrow.config import AgentSettings
from burrow.engine.client import ChatClient
from burrow.engine.errors import TransportError
from burrow.main import app


@pytest.fixture
def settings(tmp_path):
    return AgentSettings(workspace_root=tmp_path, max_iterations=5)


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": __version__}


def test_workspace(client, settings):
    response = client.get("/api/workspace")

    assert response.status_code == 200
    body = response.json()
    assert body["workspace_root"] == str(settings.workspace_root)
    assert body["model"] == settings.model
    assert body["max_iterations"] == 5


def test_run_writes_file_and_returns_answer(client, tmp_path):
    replies = [
        '{"tool":"write_file","path":"greeting.txt","content":"hello world"}',
        "Created greeting.txt.",
    ]
    with patch.object(ChatClient, "complete", AsyncMock(side_effect=replies)):
        response = client.post("/api/run", json={"task": "create a hello world file"})

    assert response.status_code == 200
    body = response.json()
    assert body["answer"] == "Created greeting.txt."
    assert body["iterations"] == 2
    assert body["tool_calls"] == [
        {"tool": "write_file", "path": "greeting.txt", "status": "ok", "message": None}
    ]
    assert (tmp_path / "greeting.txt").read_text() == "hello world"


def test_run_transport_error_is_502(client):
    with patch.object(
        ChatClient, "complete", AsyncMock(side_effect=TransportError("LLM error 503: busy"))
    ):
        response = client.post("/api/run", json={"task": "anything"})

    assert response.status_code == 502
    assert "busy" in response.json()["detail"]


def test_run_iteration_limit_is_500(client):
    with patch.object(
        ChatClient, "complete", AsyncMock(return_value='{"tool":"list_dir","path":"."}')
    ):
        response = client.post("/api/run", json={"task": "loop"})

    assert response.status_code == 500
    assert "5 iterations" in response.json()["detail"]


def test_run_requires_task(client):
    response = client.post("/api/run", json={})

    assert response.status_code == 422
