from .client import LLMClientError, request_chat_completion

__all__ = ["LLMClientError", "request_chat_completion"]
