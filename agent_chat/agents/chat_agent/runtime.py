"""Chat agent runtime - turns a conversation into a single final reply."""

import inspect
import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from ...llm_client import request_chat_completion
from ...logging_config import logger
from .agent import AgentConfig


class CompletionError(RuntimeError):
    """Raised when the model does not produce a usable final reply."""


@dataclass
class ToolResult:
    """Outcome of a single tool invocation, reported back to the model."""

    success: bool
    payload: Any = None


@dataclass
class _ToolCall:
    """Parsed tool invocation from an LLM response."""

    identifier: Optional[str]
    name: str
    arguments: Dict[str, Any]
    error: Optional[str] = None


async def generate_text(config: AgentConfig, messages: Sequence[Dict[str, Any]]) -> str:
    """Run the agent over ``messages`` and return its final text.

    Tool calls requested by the model are executed and fed back until the
    model answers in plain text or ``config.max_steps`` calls have been made.
    """

    conversation: List[Dict[str, Any]] = [dict(message) for message in messages]
    tool_schemas = config.tool_schemas()

    for step in range(config.max_steps):
        logger.debug(
            "agent calling LLM",
            extra={"model": config.model, "step": step, "messages": len(conversation)},
        )
        response = await request_chat_completion(
            model=config.model,
            messages=conversation,
            system=config.instructions,
            api_key=config.api_key,
            tools=tool_schemas or None,
            base_url=config.base_url,
            timeout=config.timeout,
        )
        assistant_message = _extract_assistant_message(response)
        raw_tool_calls = assistant_message.get("tool_calls") or []

        if not raw_tool_calls:
            return (assistant_message.get("content") or "").strip()

        conversation.append(
            {
                "role": "assistant",
                "content": assistant_message.get("content") or "",
                "tool_calls": raw_tool_calls,
            }
        )
        for tool_call in _parse_tool_calls(raw_tool_calls):
            result = await _execute_tool(config, tool_call)
            conversation.append(
                {
                    "role": "tool",
                    "tool_call_id": tool_call.identifier or tool_call.name,
                    "content": _format_tool_result(tool_call, result),
                }
            )

    raise CompletionError(f"Reached step limit ({config.max_steps}) without a final response")


def _extract_assistant_message(response: Dict[str, Any]) -> Dict[str, Any]:
    choice = (response.get("choices") or [{}])[0]
    message = choice.get("message") if isinstance(choice, dict) else None
    if not isinstance(message, dict):
        raise CompletionError("LLM response did not include an assistant message")
    return message


def _parse_tool_calls(raw_tool_calls: List[Dict[str, Any]]) -> List[_ToolCall]:
    parsed: List[_ToolCall] = []
    for raw in raw_tool_calls:
        function_block = raw.get("function") or {}
        name = function_block.get("name")
        if not isinstance(name, str) or not name:
            logger.warning("Skipping tool call without name", extra={"tool": raw})
            continue

        arguments, error = _parse_tool_arguments(function_block.get("arguments"))
        if error:
            logger.warning("Tool call arguments invalid", extra={"tool": name, "error": error})
        parsed.append(_ToolCall(identifier=raw.get("id"), name=name, arguments=arguments, error=error))
    return parsed


# Arguments arrive as a JSON string from most providers, occasionally as an object
def _parse_tool_arguments(raw_arguments: Any) -> tuple[Dict[str, Any], Optional[str]]:
    if raw_arguments is None:
        return {}, None

    if isinstance(raw_arguments, dict):
        return raw_arguments, None

    if isinstance(raw_arguments, str):
        if not raw_arguments.strip():
            return {}, None
        try:
            parsed = json.loads(raw_arguments)
        except json.JSONDecodeError as exc:
            return {}, f"invalid json: {exc}"
        if isinstance(parsed, dict):
            return parsed, None
        return {}, "decoded arguments were not an object"

    return {}, f"unsupported argument type: {type(raw_arguments).__name__}"


async def _execute_tool(config: AgentConfig, tool_call: _ToolCall) -> ToolResult:
    if tool_call.error:
        return ToolResult(success=False, payload=tool_call.error)

    tool = config.find_tool(tool_call.name)
    if tool is None:
        logger.warning(f"Tool '{tool_call.name}' rejected", extra={"reason": "unknown tool"})
        return ToolResult(success=False, payload=f"unknown tool: {tool_call.name}")

    try:
        outcome = tool.handler(**tool_call.arguments)
        if inspect.isawaitable(outcome):
            outcome = await outcome
    except Exception as exc:
        logger.error("Tool execution crashed", extra={"tool": tool_call.name, "error": str(exc)})
        return ToolResult(success=False, payload=str(exc))

    logger.info(f"Tool '{tool_call.name}' completed")
    return ToolResult(success=True, payload=outcome)


def _format_tool_result(tool_call: _ToolCall, result: ToolResult) -> str:
    payload: Dict[str, Any] = {
        "tool": tool_call.name,
        "status": "success" if result.success else "error",
        "arguments": tool_call.arguments,
    }
    if result.payload is not None:
        payload["result" if result.success else "error"] = result.payload

    try:
        return json.dumps(payload, default=str)
    except TypeError:
        return repr(payload)


__all__ = ["CompletionError", "ToolResult", "generate_text"]
