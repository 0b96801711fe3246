from __future__ import annotations

import threading
from typing import Dict, Iterator, List, Tuple

from ...logging_config import logger
from ...models import ConversationMessage, MessageRole


class ConversationLog:
    """Append-only, in-memory conversation history replayed to the agent on every turn."""

    def __init__(self) -> None:
        self._entries: List[ConversationMessage] = []
        self._lock = threading.Lock()

    def append(self, role: MessageRole, content: str) -> ConversationMessage:
        message = ConversationMessage(role=role, content=str(content))
        with self._lock:
            self._entries.append(message)
            size = len(self._entries)
        logger.debug("conversation message appended", extra={"role": message.role, "entries": size})
        return message

    def record_user_message(self, content: str) -> ConversationMessage:
        return self.append(MessageRole.USER, content)

    def record_assistant_message(self, content: str) -> ConversationMessage:
        return self.append(MessageRole.ASSISTANT, content)

    def snapshot(self) -> Tuple[ConversationMessage, ...]:
        with self._lock:
            return tuple(self._entries)

    def to_model_messages(self) -> List[Dict[str, str]]:
        """Render the log in the provider's chat message format, oldest first."""
        return [message.as_llm_message() for message in self.snapshot()]

    def __iter__(self) -> Iterator[ConversationMessage]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


_conversation_log = ConversationLog()


def get_conversation_log() -> ConversationLog:
    return _conversation_log


__all__ = ["ConversationLog", "get_conversation_log"]
