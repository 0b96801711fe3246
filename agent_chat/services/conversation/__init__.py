"""Conversation-related service helpers."""

from .agent_handler import (
    FAILURE_MESSAGE,
    AgentFactory,
    CompletionService,
    get_agent_factory,
    get_completion_service,
    handle_agent_request,
)
from .log import ConversationLog, get_conversation_log

__all__ = [
    "AgentFactory",
    "CompletionService",
    "ConversationLog",
    "FAILURE_MESSAGE",
    "get_agent_factory",
    "get_completion_service",
    "get_conversation_log",
    "handle_agent_request",
]
