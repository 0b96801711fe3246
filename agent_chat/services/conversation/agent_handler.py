from typing import Any, Awaitable, Callable, Dict, List

from ...agents.chat_agent import AgentConfig, create_agent, generate_text
from ...logging_config import logger
from ...models import AgentRequest, AgentResponse
from .log import ConversationLog

FAILURE_MESSAGE = "Failed to process message"

AgentFactory = Callable[[], Awaitable[AgentConfig]]
CompletionService = Callable[[AgentConfig, List[Dict[str, Any]]], Awaitable[str]]


# Run one chat turn: record the user message, ask the agent, record its reply
async def handle_agent_request(
    payload: AgentRequest,
    *,
    conversation_log: ConversationLog,
    agent_factory: AgentFactory = create_agent,
    completion: CompletionService = generate_text,
) -> AgentResponse:
    """Send the user's message plus the conversation so far to the agent.

    Failures never propagate: they are logged and reported with a generic
    message. If the completion call fails the user message stays in the log
    without a matching assistant reply.
    """

    user_content = payload.user_message
    logger.info(
        "agent request",
        extra={"message_length": len(user_content), "history_size": len(conversation_log)},
    )

    try:
        agent = await agent_factory()
        conversation_log.record_user_message(user_content)
        text = await completion(agent, conversation_log.to_model_messages())
        conversation_log.record_assistant_message(text)
    except Exception:
        logger.exception("Error processing agent request")
        return AgentResponse(error=FAILURE_MESSAGE)

    logger.info("agent responded", extra={"response_length": len(text)})
    return AgentResponse(response=text)


def get_agent_factory() -> AgentFactory:
    return create_agent


def get_completion_service() -> CompletionService:
    return generate_text
