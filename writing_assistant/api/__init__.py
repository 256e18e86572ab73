"""FastAPI endpoints for the AI writing assistant.

Endpoints:
    - GET /: Server status and active agent count
    - GET /health: Service health status
    - POST /start-ai-agent, POST /stop-ai-agent: Agent lifecycle per channel
    - GET /agent-status: connected / connecting / disconnected
    - POST /token: Stream Chat client tokens
    - POST /webhook: Stream Chat event ingress
"""

from writing_assistant.api.app import app, create_app

__all__ = ["app", "create_app"]
