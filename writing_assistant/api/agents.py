"""Agent control endpoints.

Start, stop and inspect the AI agent attached to a chat channel.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from writing_assistant.agent.registry import AgentRegistry, bot_user_id
from writing_assistant.api.dependencies import get_registry
from writing_assistant.models.schemas import (
    ActionResponse,
    AgentStatusResponse,
    ErrorResponse,
    StartAgentRequest,
    StopAgentRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["agents"])


def _error(status_code: int, error: str, reason: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, reason=reason).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


@router.post("/start-ai-agent", response_model=ActionResponse)
async def start_ai_agent(
    request: StartAgentRequest,
    registry: AgentRegistry = Depends(get_registry),
) -> ActionResponse | JSONResponse:
    """Start the AI agent for a channel.

    Repeated or concurrent calls for the same channel start one agent.

    Raises:
        400: ``channel_id`` missing.
        500: Agent construction or initialization failed.
    """
    logger.info(f"/start-ai-agent called for channel: {request.channel_id}")
    if not request.channel_id:
        return _error(status.HTTP_400_BAD_REQUEST, "Missing required fields")

    try:
        await registry.start_agent(request.channel_id, request.channel_type)
    except Exception as e:
        logger.error(f"Failed to start AI Agent: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to start AI Agent", str(e))

    return ActionResponse(message="AI Agent started")


@router.post("/stop-ai-agent", response_model=ActionResponse)
async def stop_ai_agent(
    request: StopAgentRequest,
    registry: AgentRegistry = Depends(get_registry),
) -> ActionResponse | JSONResponse:
    """Stop and dispose the AI agent for a channel. Unknown channels are a no-op."""
    logger.info(f"/stop-ai-agent called for channel: {request.channel_id}")
    if not request.channel_id:
        return _error(status.HTTP_400_BAD_REQUEST, "Missing required fields")

    try:
        await registry.stop_agent(request.channel_id)
    except Exception as e:
        logger.error(f"Failed to stop AI Agent: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to stop AI Agent", str(e))

    return ActionResponse(message="AI Agent stopped")


@router.get("/agent-status", response_model=AgentStatusResponse)
async def agent_status(
    channel_id: str | None = None,
    registry: AgentRegistry = Depends(get_registry),
) -> AgentStatusResponse | JSONResponse:
    """Report whether the channel's agent is connected, connecting or disconnected."""
    if not channel_id:
        return _error(status.HTTP_400_BAD_REQUEST, "Missing channel_id")

    agent_state = registry.agent_status(channel_id)
    logger.info(f"Status for {bot_user_id(channel_id)}: {agent_state.value}")
    return AgentStatusResponse(status=agent_state)
