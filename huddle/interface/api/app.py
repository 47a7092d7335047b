"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from huddle.config import Settings
from huddle.interface.api.routes import (
    bookings,
    health,
    invitations,
    resources,
    schedule,
)
from huddle.util.di.container import create_container, setup_di
from huddle.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        container: DI container to serve from; the production container
            is built when omitted

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Huddle API",
        description="Discussion room booking with group consensus",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.base_url, "http://localhost:3000"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Participant"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(resources.router)
    app_instance.include_router(schedule.router)
    app_instance.include_router(bookings.router)
    app_instance.include_router(invitations.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
