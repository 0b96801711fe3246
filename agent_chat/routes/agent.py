from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..config import Settings, get_settings
from ..models import AgentRequest, AgentResponse, ConversationHistoryResponse
from ..services import (
    AgentFactory,
    CompletionService,
    ConversationLog,
    get_agent_factory,
    get_completion_service,
    get_conversation_log,
    handle_agent_request,
)

router = APIRouter(prefix="/agent", tags=["agent"])


@router.post("", response_model=AgentResponse, summary="Send a message to the agent and receive its reply")
# Forward the user's message and the conversation history to the agent
async def agent_send(
    payload: AgentRequest,
    conversation_log: ConversationLog = Depends(get_conversation_log),
    agent_factory: AgentFactory = Depends(get_agent_factory),
    completion: CompletionService = Depends(get_completion_service),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    result = await handle_agent_request(
        payload,
        conversation_log=conversation_log,
        agent_factory=agent_factory,
        completion=completion,
    )
    status_code = status.HTTP_200_OK
    if not result.ok and settings.strict_status_codes:
        status_code = status.HTTP_502_BAD_GATEWAY
    return JSONResponse(result.to_payload(), status_code=status_code)


@router.get("/history", response_model=ConversationHistoryResponse)
# Return the conversation log, oldest first
def agent_history(
    conversation_log: ConversationLog = Depends(get_conversation_log),
) -> ConversationHistoryResponse:
    return ConversationHistoryResponse(messages=list(conversation_log.snapshot()))


__all__ = ["router"]
