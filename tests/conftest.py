"""Shared fixtures for the agent chat tests."""

import pytest

from agent_chat.agents.chat_agent import AgentConfig
from agent_chat.services import ConversationLog


@pytest.fixture
def conversation_log() -> ConversationLog:
    return ConversationLog()


@pytest.fixture
def agent_config() -> AgentConfig:
    return AgentConfig(
        model="test-model",
        instructions="You are a test agent.",
        api_key="sk-test",
        base_url="https://llm.example.test/v1",
    )
