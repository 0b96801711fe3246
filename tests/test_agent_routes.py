"""
HTTP-level tests for the agent endpoints.

Dependencies are overridden so each test gets an isolated conversation log
and stubbed agent collaborators.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from agent_chat.agents.chat_agent import create_agent, generate_text
from agent_chat.app import app
from agent_chat.config import Settings, get_settings
from agent_chat.services import (
    ConversationLog,
    get_agent_factory,
    get_completion_service,
    get_conversation_log,
)
from tests.fixtures import completion_payload, tool_call


@pytest.fixture
def log() -> ConversationLog:
    return ConversationLog()


@pytest.fixture
def completion() -> AsyncMock:
    return AsyncMock(return_value="Hi there!")


@pytest.fixture
def client(log, completion, agent_config):
    factory = AsyncMock(return_value=agent_config)
    app.dependency_overrides[get_conversation_log] = lambda: log
    app.dependency_overrides[get_agent_factory] = lambda: factory
    app.dependency_overrides[get_completion_service] = lambda: completion
    app.dependency_overrides[get_settings] = lambda: Settings(strict_status_codes=False)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


class TestAgentSend:
    """POST /api/agent"""

    def test_success(self, client, log):
        response = client.post("/api/agent", json={"userMessage": "Hello"})

        assert response.status_code == 200
        assert response.json() == {"response": "Hi there!"}
        assert [(m.role, m.content) for m in log] == [("user", "Hello"), ("assistant", "Hi there!")]

    def test_upstream_failure_returns_generic_error_with_200(self, client, log, completion):
        completion.side_effect = RuntimeError("provider down")

        response = client.post("/api/agent", json={"userMessage": "Hello"})

        assert response.status_code == 200
        assert response.json() == {"error": "Failed to process message"}
        assert [(m.role, m.content) for m in log] == [("user", "Hello")]

    def test_strict_mode_uses_bad_gateway(self, client, completion):
        completion.side_effect = RuntimeError("provider down")
        app.dependency_overrides[get_settings] = lambda: Settings(strict_status_codes=True)

        response = client.post("/api/agent", json={"userMessage": "Hello"})

        assert response.status_code == 502
        assert response.json() == {"error": "Failed to process message"}

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"userMessage": ""},
            {"userMessage": "   "},
            {"userMessage": 42},
            {"message": "Hello"},
        ],
    )
    def test_invalid_body_is_rejected(self, client, log, completion, body):
        response = client.post("/api/agent", json=body)

        assert response.status_code == 422
        assert response.json()["error"] == "Invalid request"
        assert len(log) == 0
        completion.assert_not_awaited()

    def test_malformed_json_is_rejected(self, client, log):
        response = client.post(
            "/api/agent",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert "error" in response.json()
        assert len(log) == 0

    def test_extra_fields_are_ignored(self, client):
        response = client.post("/api/agent", json={"userMessage": "Hello", "id": "abc"})

        assert response.status_code == 200
        assert response.json() == {"response": "Hi there!"}


class TestAgentHistory:
    """GET /api/agent/history"""

    def test_history_lists_messages_oldest_first(self, client):
        client.post("/api/agent", json={"userMessage": "Hello"})

        response = client.get("/api/agent/history")

        assert response.status_code == 200
        messages = response.json()["messages"]
        assert [(m["role"], m["content"]) for m in messages] == [
            ("user", "Hello"),
            ("assistant", "Hi there!"),
        ]
        assert all(m["id"] for m in messages)


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["service"] == "agent-chat"


def test_tool_call_through_endpoint(log):
    settings = Settings(llm_api_key="sk-test")

    async def factory():
        return await create_agent(settings)

    request = AsyncMock(
        side_effect=[
            completion_payload(tool_calls=[tool_call("get_current_time", {})]),
            completion_payload("It is Tuesday."),
        ]
    )
    app.dependency_overrides[get_conversation_log] = lambda: log
    app.dependency_overrides[get_agent_factory] = lambda: factory
    app.dependency_overrides[get_completion_service] = lambda: generate_text
    app.dependency_overrides[get_settings] = lambda: settings
    try:
        with patch("agent_chat.agents.chat_agent.runtime.request_chat_completion", request):
            response = TestClient(app).post("/api/agent", json={"userMessage": "What day is it?"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.json() == {"response": "It is Tuesday."}
    assert request.await_args_list[0].kwargs["tools"][0]["function"]["name"] == "get_current_time"
    followup = request.await_args_list[1].kwargs["messages"]
    assert followup[-1]["role"] == "tool"
    assert '"status": "success"' in followup[-1]["content"]
    assert [(m.role, m.content) for m in log] == [
        ("user", "What day is it?"),
        ("assistant", "It is Tuesday."),
    ]
