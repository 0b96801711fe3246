from __future__ import annotations

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from ..utils.ids import generate_id


class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ConversationMessage(BaseModel):
    """A single turn in the conversation log."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    id: str = Field(default_factory=generate_id)
    role: MessageRole
    content: str

    def as_llm_message(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


class ConversationHistoryResponse(BaseModel):
    messages: List[ConversationMessage] = Field(default_factory=list)
