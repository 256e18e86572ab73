"""Agent and registry configuration with environment variable loading.

Pydantic-based configuration for the Gemini writing agent and the
agent registry's idle reaper.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from writing_assistant.agent.errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()

DEFAULT_MODEL = "gemini-2.5-pro"


class AgentConfig(BaseModel):
    """Configuration for the Gemini writing agent.

    Attributes:
        api_key: Gemini API key.
        model_name: Model identifier to use.
        temperature: Sampling temperature.
        top_p: Nucleus sampling probability mass.
        top_k: Number of highest-probability tokens considered.
        chunk_timeout: Seconds to wait for the next streamed chunk.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", ""),
        description="API key for the Gemini API",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
        description="Model to use",
    )
    temperature: float = Field(
        default_factory=lambda: float(os.getenv("GEMINI_TEMPERATURE", "0.7")),
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    top_p: float = Field(
        default_factory=lambda: float(os.getenv("GEMINI_TOP_P", "0.95")),
        ge=0.0,
        le=1.0,
        description="Nucleus sampling threshold",
    )
    top_k: int = Field(
        default_factory=lambda: int(os.getenv("GEMINI_TOP_K", "40")),
        ge=1,
        description="Top-k sampling cutoff",
    )
    chunk_timeout: float = Field(
        default_factory=lambda: float(os.getenv("GEMINI_CHUNK_TIMEOUT", "120")),
        gt=0.0,
        description="Maximum seconds between streamed chunks",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("Gemini API key is required. Set GEMINI_API_KEY in .env")
        return v.strip()


class RegistryConfig(BaseModel):
    """Timing configuration for the agent registry.

    Attributes:
        inactivity_threshold: Seconds without interaction before an agent is reaped.
        sweep_interval: Seconds between reaper sweeps.
    """

    inactivity_threshold: float = Field(
        default_factory=lambda: float(os.getenv("AGENT_INACTIVITY_THRESHOLD", str(8 * 60 * 60))),
        gt=0.0,
    )
    sweep_interval: float = Field(
        default_factory=lambda: float(os.getenv("AGENT_SWEEP_INTERVAL", "5")),
        gt=0.0,
    )


def get_agent_config() -> AgentConfig:
    """Create agent configuration from environment.

    Returns:
        Configured AgentConfig instance.

    Raises:
        ConfigurationError: If no API key is set or a value is out of range.
    """
    try:
        return AgentConfig()
    except ValueError as e:
        raise ConfigurationError(str(e)) from e
