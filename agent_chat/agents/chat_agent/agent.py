"""Agent factory: assembles the model, instructions and tools for a chat turn."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ...config import Settings, get_settings
from ...logging_config import logger
from .tools import AgentTool, get_tools

_prompt_path = Path(__file__).parent / "system_prompt.md"
SYSTEM_PROMPT = _prompt_path.read_text(encoding="utf-8").strip()


class AgentConfigurationError(ValueError):
    """Raised when the agent cannot be assembled from the current settings."""


@dataclass(frozen=True)
class AgentConfig:
    """Everything the completion service needs to run the agent."""

    model: str
    instructions: str
    api_key: str
    base_url: str
    tools: Sequence[AgentTool] = ()
    max_steps: int = 5
    timeout: Optional[float] = None

    def tool_schemas(self) -> List[Dict[str, Any]]:
        return [tool.schema() for tool in self.tools]

    def find_tool(self, name: str) -> Optional[AgentTool]:
        for tool in self.tools:
            if tool.name == name:
                return tool
        return None


def build_system_prompt(settings: Settings) -> str:
    """Return the configured system prompt, falling back to the bundled one."""
    override = (settings.agent_system_prompt or "").strip()
    return override or SYSTEM_PROMPT


async def create_agent(settings: Optional[Settings] = None) -> AgentConfig:
    """Build the agent configuration used for a single chat turn."""

    settings = settings or get_settings()
    api_key = (settings.llm_api_key or "").strip()
    if not api_key:
        raise AgentConfigurationError(
            "LLM API key not configured. Set LLM_API_KEY or OPENAI_API_KEY environment variable."
        )

    config = AgentConfig(
        model=settings.agent_model,
        instructions=build_system_prompt(settings),
        api_key=api_key,
        base_url=settings.llm_base_url,
        tools=get_tools(),
        max_steps=max(1, settings.agent_max_steps),
        timeout=settings.llm_timeout,
    )
    logger.debug("agent created", extra={"model": config.model, "tools": len(config.tools)})
    return config
