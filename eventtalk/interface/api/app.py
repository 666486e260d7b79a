"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eventtalk.config import Settings
from eventtalk.interface.api.errors import register_error_handlers
from eventtalk.interface.api.routes import comments, health
from eventtalk.util.di.container import create_container, setup_di
from eventtalk.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        container: DI container to use; the production container is built
            when omitted (tests pass one with in-memory persistence)

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Event Talk API",
        description="Comments on events: create, browse, search, like and delete",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
