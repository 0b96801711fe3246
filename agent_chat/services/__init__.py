"""Service layer components."""

from .conversation import (
    FAILURE_MESSAGE,
    AgentFactory,
    CompletionService,
    ConversationLog,
    get_agent_factory,
    get_completion_service,
    get_conversation_log,
    handle_agent_request,
)

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
