"""Chat agent module."""

from .agent import (
    SYSTEM_PROMPT,
    AgentConfig,
    AgentConfigurationError,
    build_system_prompt,
    create_agent,
)
from .runtime import CompletionError, ToolResult, generate_text
from .tools import CURRENT_TIME_TOOL, AgentTool, get_current_time, get_tools

__all__ = [
    "SYSTEM_PROMPT",
    "AgentConfig",
    "AgentConfigurationError",
    "AgentTool",
    "CURRENT_TIME_TOOL",
    "CompletionError",
    "ToolResult",
    "build_system_prompt",
    "create_agent",
    "generate_text",
    "get_current_time",
    "get_tools",
]
