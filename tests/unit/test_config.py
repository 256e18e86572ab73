"""Unit tests for AgentConfig and RegistryConfig."""

import pytest
from pydantic import ValidationError

from writing_assistant.agent.config import AgentConfig, RegistryConfig, get_agent_config
from writing_assistant.agent.errors import ConfigurationError
from writing_assistant.chat.config import StreamConfig


class TestAgentConfig:
    """Tests for AgentConfig validation."""

    def test_defaults(self, monkeypatch) -> None:
        """Config uses the documented generation defaults."""
        for name in ("GEMINI_MODEL", "GEMINI_TEMPERATURE", "GEMINI_TOP_P", "GEMINI_TOP_K"):
            monkeypatch.delenv(name, raising=False)

        config = AgentConfig(api_key="test-key")

        assert config.model_name == "gemini-2.5-pro"
        assert config.temperature == 0.7
        assert config.top_p == 0.95
        assert config.top_k == 40

    def test_values_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "  env-key  ")
        monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-flash")
        monkeypatch.setenv("GEMINI_TEMPERATURE", "0.2")
        monkeypatch.setenv("GEMINI_TOP_K", "8")

        config = get_agent_config()

        assert config.api_key == "env-key"
        assert config.model_name == "gemini-2.5-flash"
        assert config.temperature == 0.2
        assert config.top_k == 8

    def test_fails_with_missing_api_key(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            AgentConfig(api_key="   ")

        assert "Gemini API key is required" in str(exc_info.value)

    def test_get_config_raises_configuration_error(self, monkeypatch) -> None:
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)

        with pytest.raises(ConfigurationError):
            get_agent_config()

    def test_unparsable_environment_value_is_configuration_error(self, monkeypatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "key")
        monkeypatch.setenv("GEMINI_TOP_K", "many")

        with pytest.raises(ConfigurationError):
            get_agent_config()

    @pytest.mark.parametrize(
        "field,value",
        [("temperature", -0.1), ("temperature", 2.5), ("top_p", 1.5), ("top_k", 0)],
    )
    def test_rejects_out_of_range_values(self, field: str, value: float) -> None:
        with pytest.raises(ValidationError) as exc_info:
            AgentConfig(api_key="test-key", **{field: value})

        assert field in str(exc_info.value)


class TestRegistryConfig:
    def test_defaults_to_eight_hours_and_five_seconds(self, monkeypatch) -> None:
        monkeypatch.delenv("AGENT_INACTIVITY_THRESHOLD", raising=False)
        monkeypatch.delenv("AGENT_SWEEP_INTERVAL", raising=False)

        config = RegistryConfig()

        assert config.inactivity_threshold == 8 * 60 * 60
        assert config.sweep_interval == 5


class TestStreamConfig:
    def test_requires_both_credentials(self) -> None:
        with pytest.raises(ValidationError):
            StreamConfig(api_key="key", api_secret="")

    def test_accepts_credentials(self) -> None:
        config = StreamConfig(api_key=" key ", api_secret="secret")

        assert config.api_key == "key"
