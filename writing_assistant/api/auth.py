"""Client token endpoint for Stream Chat authentication."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from writing_assistant.agent.registry import AgentRegistry
from writing_assistant.api.dependencies import get_registry
from writing_assistant.chat.tokens import issue_token
from writing_assistant.models.schemas import ErrorResponse, TokenRequest, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/token", response_model=TokenResponse)
async def create_token(
    request: TokenRequest,
    registry: AgentRegistry = Depends(get_registry),
) -> TokenResponse | JSONResponse:
    """Issue a Stream Chat user token valid for one hour."""
    if not request.user_id:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error="userId is required").model_dump(exclude_none=True),
        )

    try:
        token = issue_token(registry.chat_client, request.user_id)
    except Exception as e:
        logger.error(f"Error generating token: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Failed to generate token").model_dump(exclude_none=True),
        )

    return TokenResponse(token=token)
