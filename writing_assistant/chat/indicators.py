"""AI status indicator events sent to a channel."""

import logging
from enum import Enum
from typing import Any

from writing_assistant.chat.events import AI_INDICATOR_UPDATE

logger = logging.getLogger(__name__)


class AIState(str, Enum):
    """Values of ``ai_state`` on ``ai_indicator.update`` events."""

    THINKING = "AI_STATE_THINKING"
    GENERATING = "AI_STATE_GENERATING"
    EXTERNAL_SOURCES = "AI_STATE_EXTERNAL_SOURCES"
    ERROR = "AI_STATE_ERROR"
    DONE = "AI_STATE_DONE"
    STOPPED = "AI_STATE_STOPPED"


async def send_ai_state(
    channel: Any,
    user_id: str,
    state: AIState,
    message: dict[str, Any],
    **extra: Any,
) -> None:
    """Emit an ``ai_indicator.update`` event referencing ``message``.

    Args:
        channel: Stream channel the message lives in.
        user_id: Bot user the event is sent as.
        state: The indicator state.
        message: The placeholder message (needs ``id`` and ``cid``).
        **extra: Additional event fields, e.g. ``error``.
    """
    event = {
        "type": AI_INDICATOR_UPDATE,
        "ai_state": state.value,
        "cid": message.get("cid"),
        "message_id": message["id"],
        **extra,
    }
    logger.debug(f"Sending {state.value} for message {message['id']}")
    await channel.send_event(event, user_id)
