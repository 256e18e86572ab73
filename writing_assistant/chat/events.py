"""In-process event bus fed by Stream Chat webhooks.

The server SDK has no realtime connection, so channel events arrive as
webhook calls and are republished here. Agents and relays register
handlers per event type and remove them when disposed.
"""

import logging
from collections import defaultdict
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)

MESSAGE_NEW = "message.new"
AI_INDICATOR_UPDATE = "ai_indicator.update"
AI_INDICATOR_STOP = "ai_indicator.stop"

Event = dict[str, Any]
EventHandler = Callable[[Event], Awaitable[None]]


class EventBus:
    """Dispatch chat events to subscribed coroutine handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def on(self, event_type: str, handler: EventHandler) -> None:
        """Subscribe ``handler`` to events of ``event_type``."""
        self._handlers[event_type].append(handler)

    def off(self, event_type: str, handler: EventHandler) -> None:
        """Unsubscribe ``handler``. Unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def handler_count(self, event_type: str) -> int:
        return len(self._handlers.get(event_type, []))

    async def publish(self, event: Event) -> None:
        """Deliver ``event`` to every handler registered for its type.

        Handlers run in subscription order. A failing handler is logged
        and does not prevent delivery to the others.
        """
        event_type = event.get("type")
        if not event_type:
            logger.debug("Ignoring event without a type")
            return

        # Copy so handlers can unsubscribe while being dispatched
        for handler in list(self._handlers.get(event_type, [])):
            try:
                await handler(event)
            except Exception:
                logger.exception(f"Handler for {event_type} failed")
