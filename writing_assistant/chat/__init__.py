"""Stream Chat integration.

Responsibilities:
    - Server client construction from environment credentials
    - Webhook-fed event bus for ``message.new`` and ``ai_indicator.stop``
    - AI indicator status events
    - Short-lived user token issuance
"""

from writing_assistant.chat.events import (
    AI_INDICATOR_STOP,
    AI_INDICATOR_UPDATE,
    MESSAGE_NEW,
    EventBus,
)
from writing_assistant.chat.indicators import AIState, send_ai_state
from writing_assistant.chat.tokens import issue_token

__all__ = [
    "AI_INDICATOR_STOP",
    "AI_INDICATOR_UPDATE",
    "MESSAGE_NEW",
    "AIState",
    "EventBus",
    "issue_token",
    "send_ai_state",
]
