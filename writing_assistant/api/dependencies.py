"""FastAPI dependencies shared by the routers."""

from fastapi import Request

from writing_assistant.agent.registry import AgentRegistry


def get_registry(request: Request) -> AgentRegistry:
    """Return the registry attached to the application state."""
    return request.app.state.registry
