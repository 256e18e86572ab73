"""Pytest fixtures and shared test configuration.

Provides fake Stream Chat clients and model streams so agents, relays
and the registry can be exercised without network access.

Fixtures:
    - chat_client: MagicMock standing in for StreamChatAsync
    - channel: The fake "messaging:abc" channel of ``chat_client``
    - events: Fresh EventBus
    - blank_pdf_bytes: One-page PDF without a text layer
"""

import io
from unittest.mock import MagicMock

import pytest
from pypdf import PdfWriter

from tests.fakes import CHANNEL_ID, CHANNEL_TYPE, CID, PLACEHOLDER_ID, FakeClock, make_chat_client
from writing_assistant.chat.events import EventBus


@pytest.fixture
def chat_client() -> MagicMock:
    return make_chat_client()


@pytest.fixture
def channel(chat_client: MagicMock) -> MagicMock:
    return chat_client.channel(CHANNEL_TYPE, CHANNEL_ID)


@pytest.fixture
def events() -> EventBus:
    return EventBus()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(1_000.0)


@pytest.fixture
def placeholder() -> dict[str, str]:
    return {"id": PLACEHOLDER_ID, "cid": CID}


@pytest.fixture
def blank_pdf_bytes() -> bytes:
    """Return a one-page PDF with no text layer.

    Returns:
        Raw PDF bytes.
    """
    writer = PdfWriter()
    writer.add_blank_page(width=72, height=72)
    writer.add_metadata({"/Title": "Blank draft"})
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()
