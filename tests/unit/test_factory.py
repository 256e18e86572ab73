"""Unit tests for platform-based agent construction."""

import pytest

from tests.fakes import CID
from writing_assistant.agent.base import AgentPlatform
from writing_assistant.agent.errors import UnsupportedPlatformError
from writing_assistant.agent.factory import create_agent
from writing_assistant.agent.gemini_agent import GeminiAgent


class TestCreateAgent:
    def test_gemini_platform_builds_gemini_agent(self, chat_client, channel, events) -> None:
        agent = create_agent(
            "ai-bot-abc",
            AgentPlatform.GEMINI,
            "messaging",
            "abc",
            chat_client=chat_client,
            events=events,
        )

        assert isinstance(agent, GeminiAgent)
        assert agent.cid == CID
        assert agent.channel is channel
        assert agent.user_id == "ai-bot-abc"

    def test_retired_platform_is_rejected(self, chat_client, events) -> None:
        with pytest.raises(UnsupportedPlatformError, match="OpenAI agent is no longer supported"):
            create_agent(
                "ai-bot-abc",
                AgentPlatform.WRITING_ASSISTANT,
                "messaging",
                "abc",
                chat_client=chat_client,
                events=events,
            )
