"""Agent assets package.

Holds the chat agent factory and the runtime that drives chat completion
requests for it.
"""

__all__ = ["chat_agent"]
