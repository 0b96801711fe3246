from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class AgentRequest(BaseModel):
    """Body of a chat request sent to the agent endpoint."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user_message: StrictStr = Field(..., alias="userMessage")

    @field_validator("user_message")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("userMessage must not be empty")
        return value


class AgentResponse(BaseModel):
    """Either the agent's reply or a generic error message."""

    response: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
