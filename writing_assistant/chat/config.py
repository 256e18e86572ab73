"""Stream Chat credentials loaded from the environment."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv()


class StreamConfig(BaseModel):
    """Server-side Stream Chat credentials.

    Attributes:
        api_key: Stream application key.
        api_secret: Stream application secret, used for signing tokens and webhooks.
    """

    api_key: str = Field(default_factory=lambda: os.getenv("STREAM_API_KEY", ""))
    api_secret: str = Field(default_factory=lambda: os.getenv("STREAM_API_SECRET", ""))

    @field_validator("api_key", "api_secret")
    @classmethod
    def validate_credentials(cls, v: str) -> str:
        """Reject empty credentials."""
        if not v or not v.strip():
            raise ValueError("Set STREAM_API_KEY and STREAM_API_SECRET in .env")
        return v.strip()
