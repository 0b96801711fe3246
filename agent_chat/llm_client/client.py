from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import httpx

from ..config import get_settings


class LLMClientError(RuntimeError):
    """Raised when the chat completions API returns an error or cannot be reached."""


def _headers(*, api_key: Optional[str] = None) -> Dict[str, str]:
    settings = get_settings()
    key = (api_key or settings.llm_api_key or "").strip()
    if not key:
        raise LLMClientError("Missing LLM API key")

    return {
        "Authorization": f"Bearer {key}",
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


def _build_messages(messages: List[Dict[str, Any]], system: Optional[str]) -> List[Dict[str, Any]]:
    if system:
        return [{"role": "system", "content": system}, *messages]
    return list(messages)


def _handle_response_error(exc: httpx.HTTPStatusError) -> None:
    response = exc.response
    detail: str
    try:
        payload = response.json()
    except ValueError:
        detail = response.text
    else:
        error = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(error, dict):
            error = error.get("message")
        message = payload.get("message") if isinstance(payload, dict) else None
        detail = error or message or json.dumps(payload)
    raise LLMClientError(f"LLM request failed ({response.status_code}): {detail}") from exc


async def request_chat_completion(
    *,
    model: str,
    messages: List[Dict[str, Any]],
    system: Optional[str] = None,
    api_key: Optional[str] = None,
    tools: Optional[List[Dict[str, Any]]] = None,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Dict[str, Any]:
    """Request a non-streaming chat completion and return the raw JSON payload."""

    settings = get_settings()
    payload: Dict[str, object] = {
        "model": model,
        "messages": _build_messages(messages, system),
        "stream": False,
    }
    if tools:
        payload["tools"] = tools

    url = f"{(base_url or settings.llm_base_url).rstrip('/')}/chat/completions"
    headers = _headers(api_key=api_key)
    request_timeout = timeout if timeout is not None else settings.llm_timeout

    owns_client = client is None
    http = client or httpx.AsyncClient()
    try:
        response = await http.post(url, headers=headers, json=payload, timeout=request_timeout)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            _handle_response_error(exc)
        try:
            return response.json()
        except ValueError as exc:
            raise LLMClientError("LLM response was not valid JSON") from exc
    except httpx.HTTPError as exc:
        raise LLMClientError(f"LLM request failed: {exc}") from exc
    finally:
        if owns_client:
            await http.aclose()


__all__ = ["LLMClientError", "request_chat_completion"]
