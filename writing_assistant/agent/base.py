"""Agent capability interface and platform tags."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any


class AgentPlatform(str, Enum):
    """Model backends an agent can be built for."""

    GEMINI = "gemini"
    # Retired OpenAI-backed assistant, still recognised so requests fail clearly
    WRITING_ASSISTANT = "writing_assistant"


class AgentState(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"
    DISPOSED = "disposed"


class AIAgent(ABC):
    """An AI participant bound to one chat channel.

    Attributes:
        user_id: Bot user the agent posts as.
        channel: The Stream channel the agent listens to.
        chat_client: Server-side Stream Chat client.
    """

    user_id: str
    channel: Any
    chat_client: Any

    @abstractmethod
    async def init(self) -> None:
        """Open the model session and start listening to the channel."""

    @abstractmethod
    async def dispose(self) -> None:
        """Stop listening and release the model session."""

    @abstractmethod
    def get_last_interaction(self) -> float:
        """Timestamp of the last processed inbound message."""
