"""Unit tests for Stream Chat token issuance."""

from datetime import UTC, datetime

import jwt
from stream_chat import StreamChat

from writing_assistant.chat.tokens import issue_token

SECRET = "test-secret"


class TestIssueToken:
    def test_token_expires_one_hour_after_issue(self) -> None:
        client = StreamChat(api_key="test-key", api_secret=SECRET)
        issued = datetime(2025, 3, 1, 12, 0, 0, tzinfo=UTC)

        token = issue_token(client, "writer-42", now=issued)

        claims = jwt.decode(token, SECRET, algorithms=["HS256"], options={"verify_exp": False})
        assert claims["user_id"] == "writer-42"
        assert claims["iat"] == int(issued.timestamp())
        assert claims["exp"] - claims["iat"] == 3600
