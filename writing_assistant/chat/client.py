"""Stream Chat server client construction."""

import logging

from stream_chat import StreamChatAsync

from writing_assistant.chat.config import StreamConfig

logger = logging.getLogger(__name__)


def create_chat_client(config: StreamConfig | None = None) -> StreamChatAsync:
    """Create an async Stream Chat client with server-side credentials.

    Must be called from within a running event loop; the client owns an
    aiohttp session that is released with ``await client.close()``.

    Args:
        config: Optional credentials. Loads from environment if not provided.

    Returns:
        Configured StreamChatAsync instance.
    """
    config = config or StreamConfig()
    logger.info("Creating Stream Chat server client")
    return StreamChatAsync(api_key=config.api_key, api_secret=config.api_secret)
