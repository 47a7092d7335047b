#!/usr/bin/env python3
"""Start the Huddle API, reporting startup errors to Logfire."""

import sys

import logfire
import uvicorn

from huddle.config import Settings
from huddle.util.logging import setup_logging
from huddle.util.observability import configure_logfire


def main() -> int:
    """Configure logging and observability, then serve the app."""
    settings = Settings()

    # Configure Logfire before the app module is imported
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info(
            "Starting Huddle API", host=settings.host, port=settings.port
        )
        uvicorn.run(
            "huddle.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
