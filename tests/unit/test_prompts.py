"""Unit tests for the writing assistant prompts."""

from datetime import date

from writing_assistant.agent.prompts import (
    DEFAULT_CONTEXT,
    build_instructions,
    format_date,
    priming_messages,
    writing_task_context,
)


class TestInstructions:
    def test_date_is_spelled_out(self) -> None:
        assert format_date(date(2025, 1, 5)) == "January 5, 2025"

    def test_instructions_embed_date_and_default_context(self) -> None:
        instructions = build_instructions(today=date(2024, 11, 30))

        assert "Today's date is November 30, 2024." in instructions
        assert instructions.endswith(f"**Writing Context**: {DEFAULT_CONTEXT}")

    def test_writing_task_becomes_context(self) -> None:
        context = writing_task_context("Cover letter")

        assert context == "Writing Task: Cover letter"
        assert build_instructions(context).endswith("Writing Task: Cover letter")

    def test_missing_writing_task_has_no_context(self) -> None:
        assert writing_task_context(None) is None
        assert writing_task_context("") is None


class TestPriming:
    def test_priming_is_user_then_assistant(self) -> None:
        user, assistant = priming_messages()

        assert user.role == "user"
        assert "help with writing" in user.content
        assert assistant.role == "assistant"
        assert assistant.content.startswith("I'm here to help")
