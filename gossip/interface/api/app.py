"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from gossip.interface.api.errors import register_error_handlers
from gossip.interface.api.routes import health, votes
from gossip.util.di.container import create_container, setup_di
from gossip.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container if omitted
    """
    app_instance = FastAPI(
        title="Gossip Votes API",
        description="Vote management for Gossip posts and comments",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(votes.router)

    return app_instance
