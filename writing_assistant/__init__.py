"""AI Writing Assistant - Gemini-backed writing partner for Stream Chat channels.

Combines FastAPI for the control surface, Agno for model sessions,
the Stream Chat SDK for channel access, and Pydantic for validation.

Components:
    - api: HTTP control routes, token issuance and webhook ingress
    - agent: per-channel writing agents, streaming relay and registry
    - chat: Stream Chat client, event bus and status indicators
    - parsing: PDF text extraction for attachments
    - models: Request/response schemas
"""

__version__ = "0.1.0"
