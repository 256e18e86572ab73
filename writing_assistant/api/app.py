"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from writing_assistant.agent.registry import AgentRegistry
from writing_assistant.api.agents import router as agents_router
from writing_assistant.api.auth import router as auth_router
from writing_assistant.api.webhook import router as webhook_router
from writing_assistant.chat.client import create_chat_client
from writing_assistant.models.schemas import ServerInfo

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Builds the Stream Chat client and agent registry unless one was
    injected, starts the idle reaper, and disposes every agent on shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    # Startup
    logger.info("Starting AI Writing Assistant API...")
    owns_registry = app.state.registry is None
    if owns_registry:
        app.state.registry = AgentRegistry(create_chat_client())
    registry: AgentRegistry = app.state.registry
    registry.start()

    yield

    # Shutdown
    logger.info("Shutting down AI Writing Assistant API...")
    await registry.close()
    if owns_registry:
        await registry.chat_client.close()
        app.state.registry = None


def create_app(registry: AgentRegistry | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        registry: Optional pre-built registry. Built from environment
            credentials at startup if not provided.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="AI Writing Assistant API",
        description=(
            "Control surface for Gemini-powered writing agents in Stream Chat "
            "channels. Starts and stops one agent per channel, issues client "
            "tokens, and receives channel events through a signed webhook."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.registry = registry

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(agents_router)
    application.include_router(auth_router)
    application.include_router(webhook_router)

    @application.get("/", response_model=ServerInfo)
    async def root() -> ServerInfo:
        """Report that the server is up and how many agents are live."""
        active = application.state.registry.active_count if application.state.registry else 0
        return ServerInfo(message="AI Writing Assistant Server is running", active_agents=active)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "ai-writing-assistant"}

    return application


app = create_app()
