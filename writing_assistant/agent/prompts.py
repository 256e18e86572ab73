"""Writing assistant persona, priming exchange and per-message instructions."""

from datetime import date

from agno.models.message import Message

PRIMING_USER_TEXT = "Hello, I need your help with writing."
PRIMING_MODEL_TEXT = (
    "I'm here to help with your writing needs. What would you like assistance with?"
)
DEFAULT_CONTEXT = "General writing assistance."

WRITING_ASSISTANT_PROMPT = """You are an expert AI Writing Assistant. Your primary purpose is to be a collaborative writing partner.

**Your Core Capabilities:**
- Content Creation, Improvement, Style Adaptation, Brainstorming, and Writing Coaching.
- **Current Date**: Today's date is {current_date}. Please use this for any time-sensitive queries.

**Response Format:**
- Be direct and production-ready.
- Use clear formatting.
- Never begin responses with phrases like "Here's the edit:", "Here are the changes:", or similar introductory statements.
- Provide responses directly and professionally without unnecessary preambles.

**Writing Context**: {context}"""


def priming_messages() -> list[Message]:
    """Two-turn exchange placed before every conversation."""
    return [
        Message(role="user", content=PRIMING_USER_TEXT),
        Message(role="assistant", content=PRIMING_MODEL_TEXT),
    ]


def format_date(day: date) -> str:
    """Format like ``January 5, 2025``."""
    return f"{day:%B} {day.day}, {day.year}"


def writing_task_context(writing_task: str | None) -> str | None:
    return f"Writing Task: {writing_task}" if writing_task else None


def build_instructions(context: str | None = None, today: date | None = None) -> str:
    """Render the system instructions for one user turn.

    Args:
        context: Optional writing context, e.g. ``Writing Task: ...``.
        today: Date embedded in the prompt, defaults to today.

    Returns:
        The instruction text.
    """
    return WRITING_ASSISTANT_PROMPT.format(
        current_date=format_date(today or date.today()),
        context=context or DEFAULT_CONTEXT,
    )
