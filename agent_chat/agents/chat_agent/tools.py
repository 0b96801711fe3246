"""Tool definitions for the chat agent."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Tuple

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


@dataclass(frozen=True)
class AgentTool:
    """A function the model may call while composing its reply."""

    name: str
    description: str
    handler: Callable[..., Any]
    parameters: Dict[str, Any] = field(
        default_factory=lambda: {"type": "object", "properties": {}, "additionalProperties": False}
    )

    def schema(self) -> Dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }


# Resolve an IANA zone name; UTC needs no tz database
def _resolve_timezone(name: str):
    cleaned = (name or "UTC").strip()
    if cleaned.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(cleaned)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"unknown timezone: {cleaned}") from exc


def get_current_time(timezone_name: str = "UTC") -> Dict[str, str]:
    """Return the current date and time in the requested timezone."""

    now = datetime.now(_resolve_timezone(timezone_name))
    return {
        "timezone": timezone_name or "UTC",
        "iso": now.isoformat(timespec="seconds"),
        "weekday": now.strftime("%A"),
    }


CURRENT_TIME_TOOL = AgentTool(
    name="get_current_time",
    description=(
        "Get the current date and time. Use this whenever the user asks about "
        "today's date, the time, or the day of the week."
    ),
    handler=get_current_time,
    parameters={
        "type": "object",
        "properties": {
            "timezone_name": {
                "type": "string",
                "description": "IANA timezone name such as 'Europe/Paris'. Defaults to UTC.",
            },
        },
        "additionalProperties": False,
    },
)


def get_tools() -> Tuple[AgentTool, ...]:
    """Return the tools every chat agent is built with."""
    return (CURRENT_TIME_TOOL,)


__all__ = ["AgentTool", "CURRENT_TIME_TOOL", "get_current_time", "get_tools"]
