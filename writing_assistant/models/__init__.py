"""Request and response schemas for the HTTP control surface.

Models:
    - StartAgentRequest / StopAgentRequest: Agent control payloads
    - TokenRequest / TokenResponse: Client token issuance
    - ActionResponse: Start/stop acknowledgement
    - ServerInfo: Root status with active agent count
    - AgentStatusResponse: connected / connecting / disconnected
    - ErrorResponse: Error body with optional reason
"""

from writing_assistant.models.schemas import (
    ActionResponse,
    AgentStatusResponse,
    ErrorResponse,
    ServerInfo,
    StartAgentRequest,
    StopAgentRequest,
    TokenRequest,
    TokenResponse,
)

__all__ = [
    "ActionResponse",
    "AgentStatusResponse",
    "ErrorResponse",
    "ServerInfo",
    "StartAgentRequest",
    "StopAgentRequest",
    "TokenRequest",
    "TokenResponse",
]
