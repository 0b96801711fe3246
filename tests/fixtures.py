"""Builders for chat-completions payloads used across tests."""

import json
from typing import Any, Dict, List, Optional


def completion_payload(content: str = "", tool_calls: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    message: Dict[str, Any] = {"role": "assistant", "content": content}
    if tool_calls:
        message["tool_calls"] = tool_calls
    return {"id": "cmpl-1", "object": "chat.completion", "choices": [{"index": 0, "message": message}]}


def tool_call(name: str, arguments: Any, identifier: str = "call_1") -> Dict[str, Any]:
    if not isinstance(arguments, str):
        arguments = json.dumps(arguments)
    return {"id": identifier, "type": "function", "function": {"name": name, "arguments": arguments}}
