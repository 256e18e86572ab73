"""Process-wide registry of per-channel agents.

Maps the bot user id derived from a channel id to its live agent. A
pending set collapses concurrent start requests for the same channel,
and a background reaper disposes agents that have been idle too long.

Cache and pending-set updates happen under one lock. The lock is never
held while an agent is being built, so status reads observe
``connecting`` for the whole construction window.
"""

import asyncio
import contextlib
import functools
import logging
import time
from collections.abc import Callable
from enum import Enum
from typing import Any

from writing_assistant.agent.base import AgentPlatform, AIAgent
from writing_assistant.agent.config import RegistryConfig
from writing_assistant.agent.factory import create_agent
from writing_assistant.chat.events import EventBus

logger = logging.getLogger(__name__)

BOT_USER_NAME = "AI Writing Assistant"

AgentFactory = Callable[[str, AgentPlatform, str, str], AIAgent]


class AgentStatus(str, Enum):
    CONNECTED = "connected"
    CONNECTING = "connecting"
    DISCONNECTED = "disconnected"


def bot_user_id(channel_id: str) -> str:
    """Derive the AI bot's user id for a channel."""
    return f"ai-bot-{channel_id.replace('!', '')}"


class AgentRegistry:
    """Owns every live agent and the idle reaper.

    Args:
        chat_client: Server-side Stream Chat client.
        events: Bus delivering webhook events to agents.
        config: Reaper timings, loaded from environment if not provided.
        platform: Model backend for new agents.
        agent_factory: Builds uninitialized agents, defaults to ``create_agent``.
        clock: Time source shared with the agents.
    """

    def __init__(
        self,
        chat_client: Any,
        events: EventBus | None = None,
        *,
        config: RegistryConfig | None = None,
        platform: AgentPlatform = AgentPlatform.GEMINI,
        agent_factory: AgentFactory | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.chat_client = chat_client
        self.events = events or EventBus()
        self._config = config or RegistryConfig()
        self._platform = platform
        self._clock = clock
        self._agent_factory = agent_factory or functools.partial(
            create_agent, chat_client=chat_client, events=self.events, clock=clock
        )

        self._agents: dict[str, AIAgent] = {}
        self._pending: set[str] = set()
        self._lock = asyncio.Lock()
        self._reaper: asyncio.Task[None] | None = None

    @property
    def active_count(self) -> int:
        return len(self._agents)

    def get_agent(self, channel_id: str) -> AIAgent | None:
        return self._agents.get(bot_user_id(channel_id))

    def agent_status(self, channel_id: str) -> AgentStatus:
        """Report whether the channel's agent is running, starting or absent."""
        user_id = bot_user_id(channel_id)
        if user_id in self._agents:
            return AgentStatus.CONNECTED
        if user_id in self._pending:
            return AgentStatus.CONNECTING
        return AgentStatus.DISCONNECTED

    async def start_agent(self, channel_id: str, channel_type: str = "messaging") -> bool:
        """Start an agent for the channel unless one exists or is starting.

        Returns:
            True if a new agent was installed, False if the call was a no-op.

        Raises:
            AgentError: If the agent cannot be configured or initialized.
            Exception: Chat backend errors while registering the bot user.
        """
        user_id = bot_user_id(channel_id)

        async with self._lock:
            if user_id in self._agents or user_id in self._pending:
                logger.info(f"AI Agent {user_id} already started or is pending.")
                return False
            self._pending.add(user_id)

        try:
            logger.info(f"Creating new agent for {user_id}")
            agent = await self._build_agent(user_id, channel_type, channel_id)

            async with self._lock:
                duplicate = user_id in self._agents
                if not duplicate:
                    self._agents[user_id] = agent

            if duplicate:
                logger.info(f"Agent {user_id} was installed concurrently, disposing duplicate")
                await agent.dispose()
                return False
            return True
        finally:
            async with self._lock:
                self._pending.discard(user_id)

    async def _build_agent(self, user_id: str, channel_type: str, channel_id: str) -> AIAgent:
        await self.chat_client.upsert_user({"id": user_id, "name": BOT_USER_NAME})

        channel = self.chat_client.channel(channel_type, channel_id)
        await channel.add_members([user_id])

        agent = self._agent_factory(user_id, self._platform, channel_type, channel_id)
        try:
            await agent.init()
        except Exception:
            await agent.dispose()
            raise
        return agent

    async def stop_agent(self, channel_id: str) -> bool:
        """Dispose the channel's agent if it is running.

        Returns:
            True if an agent was disposed, False if none was running.
        """
        user_id = bot_user_id(channel_id)
        async with self._lock:
            agent = self._agents.pop(user_id, None)

        if agent is None:
            logger.info(f"Agent for {user_id} not found in cache.")
            return False

        logger.info(f"Disposing agent for {user_id}")
        await self._dispose_agent(agent)
        return True

    async def _dispose_agent(self, agent: AIAgent) -> None:
        """Dispose an agent and hard-delete its bot user."""
        await agent.dispose()
        await self.chat_client.delete_user(agent.user_id, hard_delete=True)

    async def sweep(self, now: float | None = None) -> list[str]:
        """Dispose every agent idle for longer than the inactivity threshold.

        Args:
            now: Current time, defaults to the registry clock.

        Returns:
            Bot user ids of the evicted agents.
        """
        now = self._clock() if now is None else now
        threshold = self._config.inactivity_threshold

        async with self._lock:
            idle = {
                user_id: agent
                for user_id, agent in self._agents.items()
                if now - agent.get_last_interaction() > threshold
            }
            for user_id in idle:
                del self._agents[user_id]

        for user_id, agent in idle.items():
            logger.info(f"Disposing AI Agent due to inactivity: {user_id}")
            try:
                await self._dispose_agent(agent)
            except Exception:
                logger.exception(f"Failed to dispose idle agent {user_id}")

        return list(idle)

    async def _reap_forever(self) -> None:
        while True:
            await asyncio.sleep(self._config.sweep_interval)
            try:
                await self.sweep()
            except Exception:
                logger.exception("Agent sweep failed")

    def start(self) -> None:
        """Launch the idle reaper on the running event loop."""
        if self._reaper is None:
            self._reaper = asyncio.create_task(self._reap_forever())

    async def close(self) -> None:
        """Stop the reaper and dispose every live agent."""
        if self._reaper is not None:
            self._reaper.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._reaper
            self._reaper = None

        async with self._lock:
            agents = dict(self._agents)
            self._agents.clear()

        for user_id, agent in agents.items():
            try:
                await self._dispose_agent(agent)
            except Exception:
                logger.exception(f"Failed to dispose agent {user_id} on shutdown")
