"""Per-channel AI writing agents.

Responsibilities:
    - Agent configuration from environment variables
    - Gemini model sessions seeded with a priming exchange
    - Attachment handling (images, PDF text)
    - Streaming relay of model output into chat messages
    - Registry with duplicate-start protection and idle reaping
"""

from writing_assistant.agent.base import AgentPlatform, AgentState, AIAgent
from writing_assistant.agent.config import AgentConfig, RegistryConfig, get_agent_config
from writing_assistant.agent.errors import (
    AgentError,
    ConfigurationError,
    ModelInvocationError,
    TransientFetchError,
    UnsupportedPlatformError,
)
from writing_assistant.agent.registry import AgentRegistry, AgentStatus, bot_user_id
from writing_assistant.agent.relay import StreamingRelay

__all__ = [
    "AIAgent",
    "AgentConfig",
    "AgentError",
    "AgentPlatform",
    "AgentRegistry",
    "AgentState",
    "AgentStatus",
    "ConfigurationError",
    "ModelInvocationError",
    "RegistryConfig",
    "StreamingRelay",
    "TransientFetchError",
    "UnsupportedPlatformError",
    "bot_user_id",
    "get_agent_config",
]
