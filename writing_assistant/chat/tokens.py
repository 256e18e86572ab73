"""User token issuance for client-side Stream Chat authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

TOKEN_TTL = timedelta(hours=1)


def issue_token(
    chat_client: Any,
    user_id: str,
    ttl: timedelta = TOKEN_TTL,
    now: datetime | None = None,
) -> str:
    """Sign a short-lived token for ``user_id``.

    Args:
        chat_client: Stream Chat client holding the API secret.
        user_id: The user the token authenticates.
        ttl: Token lifetime.
        now: Issue time, defaults to the current UTC time.

    Returns:
        The signed JWT.
    """
    issued_at = (now or datetime.now(UTC)).replace(microsecond=0)
    return chat_client.create_token(user_id, exp=issued_at + ttl, iat=issued_at)
