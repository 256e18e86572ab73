"""Pydantic models for the HTTP control surface.

Required fields are optional at the schema level so that a missing value
produces the 400 error body clients expect instead of a 422.
"""

from pydantic import BaseModel, Field

from writing_assistant.agent.registry import AgentStatus


class StartAgentRequest(BaseModel):
    """Request payload for ``POST /start-ai-agent``.

    Attributes:
        channel_id: Channel the agent should join.
        channel_type: Stream channel type.
    """

    channel_id: str | None = None
    channel_type: str = "messaging"


class StopAgentRequest(BaseModel):
    """Request payload for ``POST /stop-ai-agent``."""

    channel_id: str | None = None


class TokenRequest(BaseModel):
    """Request payload for ``POST /token``."""

    user_id: str | None = Field(None, alias="userId")


class ActionResponse(BaseModel):
    """Acknowledgement of a start or stop request."""

    message: str
    data: list[str] = Field(default_factory=list)


class ServerInfo(BaseModel):
    """Response for ``GET /``."""

    message: str
    active_agents: int = Field(..., serialization_alias="activeAgents")


class AgentStatusResponse(BaseModel):
    status: AgentStatus


class TokenResponse(BaseModel):
    token: str


class ErrorResponse(BaseModel):
    """Error body returned with 4xx/5xx statuses.

    Attributes:
        error: Short description of what failed.
        reason: Underlying error message, when available.
    """

    error: str
    reason: str | None = None
