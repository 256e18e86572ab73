"""Streaming relay from a model response stream to a chat message.

One relay per model invocation. Text is accumulated from each chunk and
the full buffer is written to the placeholder message in batches, so the
chat backend sees a bounded number of updates while the user still sees
text appear progressively.
"""

import asyncio
import logging
import time
from collections.abc import AsyncIterable, AsyncIterator, Callable
from typing import Any

from agno.run.agent import RunEvent

from writing_assistant.agent.errors import ModelInvocationError
from writing_assistant.chat.events import AI_INDICATOR_STOP, Event, EventBus
from writing_assistant.chat.indicators import AIState, send_ai_state

logger = logging.getLogger(__name__)

FLUSH_EVERY_CHUNKS = 5
FLUSH_INTERVAL = 0.5  # seconds
ERROR_FALLBACK_TEXT = "I encountered an error while processing your request."

_END = object()


def chunk_text(chunk: Any) -> str:
    """Extract the text carried by one stream chunk.

    Accepts agno run events (only content events carry text) as well as
    raw Gemini responses with ``candidates[0].content.parts``.

    Raises:
        ModelInvocationError: If the chunk is an agno run error event.
    """
    event = getattr(chunk, "event", None)
    if event == RunEvent.run_error:
        raise ModelInvocationError(str(getattr(chunk, "content", None) or "Model run failed"))
    if event is not None and event != RunEvent.run_content:
        return ""

    content = getattr(chunk, "content", None)
    if isinstance(content, str):
        return content

    candidates = getattr(chunk, "candidates", None)
    if candidates:
        parts = getattr(getattr(candidates[0], "content", None), "parts", None) or []
        return "".join(part.text for part in parts if getattr(part, "text", None))
    return ""


async def _next_chunk(iterator: AsyncIterator[Any]) -> Any:
    return await anext(iterator, _END)


class StreamingRelay:
    """Relay one model response stream into one placeholder message.

    Terminates with exactly one of: DONE (stream exhausted), ERROR then
    DONE (stream failed), or STOPPED (``ai_indicator.stop`` received for
    the placeholder message).
    """

    def __init__(
        self,
        stream: AsyncIterable[Any],
        chat_client: Any,
        channel: Any,
        message: dict[str, Any],
        user_id: str,
        events: EventBus,
        on_dispose: Callable[["StreamingRelay"], None],
        *,
        chunk_timeout: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._stream = stream
        self._chat_client = chat_client
        self._channel = channel
        self._message = message
        self._user_id = user_id
        self._events = events
        self._on_dispose = on_dispose
        self._chunk_timeout = chunk_timeout
        self._clock = clock

        self._text = ""
        self._chunk_count = 0
        self._last_flush: float | None = None
        self._stopped = False
        self._finished = False
        self._disposed = False

        self._events.on(AI_INDICATOR_STOP, self.handle_stop)

    @property
    def message_id(self) -> str:
        return self._message["id"]

    @property
    def text(self) -> str:
        return self._text

    @property
    def stopped(self) -> bool:
        return self._stopped

    async def run(self) -> None:
        """Consume the stream until it ends, fails, or is stopped."""
        iterator = aiter(self._stream)
        try:
            while not self._stopped:
                chunk = await asyncio.wait_for(_next_chunk(iterator), timeout=self._chunk_timeout)
                if chunk is _END:
                    break

                text = chunk_text(chunk)
                if not text:
                    continue

                if not self._text:
                    await self._send_generating()
                self._text += text
                self._chunk_count += 1

                now = self._clock()
                if self._chunk_count % FLUSH_EVERY_CHUNKS == 0 or self._flush_due(now):
                    await self._flush()
                    self._last_flush = now

            if not self._stopped:
                self._finished = True
                await self._flush()
                await send_ai_state(self._channel, self._user_id, AIState.DONE, self._message)
        except Exception as e:
            logger.exception(f"Error processing model response for message {self.message_id}")
            if self._stopped:
                logger.info(f"Message {self.message_id} already stopped, skipping error state")
            else:
                self._finished = True
                await self._handle_error(e)
        finally:
            await self._close_stream(iterator)
            self.dispose()

    async def handle_stop(self, event: Event) -> None:
        """Stop generating when the stop event targets this relay's message."""
        if event.get("message_id") != self.message_id or self._stopped or self._finished:
            return

        self._stopped = True
        logger.info(f"Stop requested for message {self.message_id}")
        try:
            await send_ai_state(self._channel, self._user_id, AIState.STOPPED, self._message)
        except Exception:
            logger.exception("Error handling stop event")

    def dispose(self) -> None:
        """Unsubscribe from stop events and detach from the owning agent."""
        if self._disposed:
            return
        self._disposed = True
        self._events.off(AI_INDICATOR_STOP, self.handle_stop)
        self._on_dispose(self)

    async def _send_generating(self) -> None:
        try:
            await send_ai_state(self._channel, self._user_id, AIState.GENERATING, self._message)
        except Exception:
            logger.exception(f"Failed to send GENERATING for message {self.message_id}")

    def _flush_due(self, now: float) -> bool:
        return self._last_flush is None or now - self._last_flush >= FLUSH_INTERVAL

    async def _flush(self) -> None:
        if self._stopped:
            return
        try:
            await self._write_text(self._text)
        except Exception:
            logger.exception(f"Error updating message {self.message_id}")

    async def _write_text(self, text: str) -> None:
        await self._chat_client.update_message(
            {
                "id": self.message_id,
                "text": text,
                "user_id": self._user_id,
                "mentioned_users": [],
            }
        )

    async def _handle_error(self, error: Exception) -> None:
        try:
            await self._write_text(self._text or ERROR_FALLBACK_TEXT)
            await send_ai_state(
                self._channel, self._user_id, AIState.ERROR, self._message, error=str(error)
            )
        except Exception:
            logger.exception("Error handling error state")

        # Clear the indicator even if reporting the error failed
        try:
            await send_ai_state(self._channel, self._user_id, AIState.DONE, self._message)
        except Exception:
            logger.exception(f"Failed to send DONE for message {self.message_id}")

    async def _close_stream(self, iterator: AsyncIterator[Any]) -> None:
        aclose = getattr(iterator, "aclose", None)
        if aclose is None:
            return
        try:
            await aclose()
        except Exception:
            logger.debug("Error closing model stream", exc_info=True)
