"""Gemini writing agent bound to a single Stream channel.

Each inbound user message gets a placeholder reply that is filled in by a
``StreamingRelay`` as the model streams its answer. The model session is
an Agno agent keeping the channel's conversation in memory for the life
of the agent.
"""

import asyncio
import logging
import time
from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
from agno.agent import Agent
from agno.db.in_memory import InMemoryDb
from agno.media import Image
from agno.models.google import Gemini

from writing_assistant.agent.attachments import FETCH_TIMEOUT, collect_attachments
from writing_assistant.agent.base import AgentState, AIAgent
from writing_assistant.agent.config import AgentConfig, get_agent_config
from writing_assistant.agent.prompts import (
    build_instructions,
    priming_messages,
    writing_task_context,
)
from writing_assistant.agent.relay import StreamingRelay
from writing_assistant.chat.events import MESSAGE_NEW, Event, EventBus
from writing_assistant.chat.indicators import AIState, send_ai_state

logger = logging.getLogger(__name__)

PDF_WITHOUT_TEXT_MESSAGE = "Cannot parse PDF as there is no text."
# Prior runs replayed into each request
HISTORY_RUNS = 10


class GeminiAgent(AIAgent):
    """Writing assistant answering a channel's messages with Gemini."""

    def __init__(
        self,
        chat_client: Any,
        channel: Any,
        user_id: str,
        cid: str,
        events: EventBus,
        *,
        config: AgentConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.chat_client = chat_client
        self.channel = channel
        self.user_id = user_id
        self.cid = cid
        self.events = events

        self._config = config
        self._http_client = http_client
        self._owns_http_client = http_client is None
        self._clock = clock
        self._session: Agent | None = None
        self._state = AgentState.UNINITIALIZED
        self._last_interaction = clock()

        self._relays: list[StreamingRelay] = []
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def state(self) -> AgentState:
        return self._state

    @property
    def relays(self) -> list[StreamingRelay]:
        return list(self._relays)

    def get_last_interaction(self) -> float:
        return self._last_interaction

    async def init(self) -> None:
        """Open the Gemini session and subscribe to new channel messages.

        Raises:
            ConfigurationError: If the Gemini API key is missing or a
                generation parameter is invalid.
        """
        self._state = AgentState.INITIALIZING
        config = self._config or get_agent_config()
        self._config = config

        logger.info(f"Initializing {self.user_id} with model: {config.model_name}")
        logger.info(
            f"Configuration: temperature={config.temperature}, "
            f"top_p={config.top_p}, top_k={config.top_k}"
        )

        self._session = self._create_session(config)
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=FETCH_TIMEOUT, follow_redirects=True)

        self.events.on(MESSAGE_NEW, self.handle_message)
        self._state = AgentState.READY

    def _create_session(self, config: AgentConfig) -> Agent:
        """Create the Agno agent holding this channel's conversation.

        Returns:
            Agent with a Gemini model, in-memory history and the priming exchange.
        """
        model = Gemini(
            id=config.model_name,
            api_key=config.api_key,
            temperature=config.temperature,
            top_p=config.top_p,
            top_k=config.top_k,
        )

        return Agent(
            name="AI Writing Assistant",
            model=model,
            db=InMemoryDb(),
            additional_input=priming_messages(),
            add_history_to_context=True,
            num_history_runs=HISTORY_RUNS,
            markdown=True,
        )

    async def dispose(self) -> None:
        self.events.off(MESSAGE_NEW, self.handle_message)
        self._session = None
        self._state = AgentState.DISPOSED

        for relay in list(self._relays):
            relay.dispose()
        self._relays.clear()

        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def handle_message(self, event: Event) -> None:
        """Answer a ``message.new`` event posted in this agent's channel."""
        if event.get("cid") != self.cid:
            return

        message = event.get("message")
        if not message or message.get("ai_generated"):
            return

        if self._session is None or self._http_client is None:
            logger.warning(f"{self.user_id} received a message before initialization")
            return

        text = message.get("text") or ""
        self._last_interaction = self._clock()

        writing_task = (message.get("custom") or {}).get("writingTask")
        instructions = build_instructions(writing_task_context(writing_task))
        attachments = message.get("attachments") or []
        context = await collect_attachments(attachments, self._http_client)

        response = await self.channel.send_message({"text": "", "ai_generated": True}, self.user_id)
        placeholder = response["message"]
        await send_ai_state(self.channel, self.user_id, AIState.THINKING, placeholder)

        try:
            only_pdf_without_text = (
                not text.strip()
                and not context.images
                and not context.pdf_text.strip()
                and context.has_pdf
            )
            if only_pdf_without_text:
                await self.chat_client.update_message(
                    {
                        "id": placeholder["id"],
                        "text": PDF_WITHOUT_TEXT_MESSAGE,
                        "user_id": self.user_id,
                        "mentioned_users": [],
                    }
                )
                await send_ai_state(self.channel, self.user_id, AIState.DONE, placeholder)
                return

            parts = [instructions]
            if text:
                parts.append(text)
            if context.pdf_text:
                parts.append(context.pdf_text)

            stream = self._stream_response("\n\n".join(parts), context.images)
            relay = StreamingRelay(
                stream,
                self.chat_client,
                self.channel,
                placeholder,
                self.user_id,
                self.events,
                self._remove_relay,
                chunk_timeout=self._config.chunk_timeout if self._config else None,
            )
            self._relays.append(relay)
            task = asyncio.create_task(relay.run())
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
        except Exception as e:
            logger.exception("Error sending message to Gemini")
            await send_ai_state(self.channel, self.user_id, AIState.ERROR, placeholder, error=str(e))
            await send_ai_state(self.channel, self.user_id, AIState.DONE, placeholder)

    def _stream_response(self, prompt: str, images: list[Image]) -> AsyncIterator[Any]:
        """Start a streaming run on the session for this channel."""
        return self._session.arun(
            prompt,
            images=images or None,
            session_id=self.cid,
            user_id=self.user_id,
            stream=True,
        )

    def _remove_relay(self, relay: StreamingRelay) -> None:
        if relay in self._relays:
            self._relays.remove(relay)
