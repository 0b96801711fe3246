from .agent import AgentRequest, AgentResponse
from .chat import ConversationHistoryResponse, ConversationMessage, MessageRole
from .meta import HealthResponse

__all__ = [
    "AgentRequest",
    "AgentResponse",
    "ConversationHistoryResponse",
    "ConversationMessage",
    "MessageRole",
    "HealthResponse",
]
