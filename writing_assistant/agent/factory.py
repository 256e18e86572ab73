"""Agent construction by platform."""

import logging
import time
from collections.abc import Callable
from typing import Any

from writing_assistant.agent.base import AgentPlatform, AIAgent
from writing_assistant.agent.config import AgentConfig
from writing_assistant.agent.errors import UnsupportedPlatformError
from writing_assistant.agent.gemini_agent import GeminiAgent
from writing_assistant.chat.events import EventBus

logger = logging.getLogger(__name__)


def create_agent(
    user_id: str,
    platform: AgentPlatform,
    channel_type: str,
    channel_id: str,
    *,
    chat_client: Any,
    events: EventBus,
    config: AgentConfig | None = None,
    clock: Callable[[], float] = time.time,
) -> AIAgent:
    """Create an uninitialized agent for a channel.

    Args:
        user_id: Bot user the agent posts as.
        platform: Model backend to use.
        channel_type: Stream channel type, e.g. ``messaging``.
        channel_id: Stream channel id.
        chat_client: Server-side Stream Chat client.
        events: Bus delivering the channel's webhook events.
        config: Optional model configuration, loaded at ``init()`` otherwise.
        clock: Time source for last-interaction tracking.

    Returns:
        The agent. Call ``init()`` before use.

    Raises:
        UnsupportedPlatformError: If the platform has no implementation.
    """
    logger.info(f"Creating {platform.value} agent {user_id} for {channel_type}:{channel_id}")
    channel = chat_client.channel(channel_type, channel_id)

    if platform is AgentPlatform.GEMINI:
        return GeminiAgent(
            chat_client,
            channel,
            user_id,
            f"{channel_type}:{channel_id}",
            events,
            config=config,
            clock=clock,
        )
    if platform is AgentPlatform.WRITING_ASSISTANT:
        raise UnsupportedPlatformError("OpenAI agent is no longer supported.")
    raise UnsupportedPlatformError(f"Unsupported agent platform: {platform}")
