"""Logfire setup.

Services log and trace through logfire directly:

    logfire.info("Booking created", booking_id=str(booking.id))

    with logfire.span("invitation_service.respond", invitation_id=...):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI

from huddle.config import ObservabilitySettings, Settings

SERVICE_NAME = "huddle"
SERVICE_VERSION = "0.1.0"


def should_send(observability: ObservabilitySettings) -> bool:
    """Send to Logfire cloud when asked to, or by default when a token is set."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Set OBSERVABILITY__LOGFIRE_TOKEN to ship spans to Logfire cloud, or
    OBSERVABILITY__SEND_TO_LOGFIRE to force it either way. Without either,
    spans are only printed to the console.

    Args:
        settings: Application settings
    """
    send = should_send(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
        git_sha=settings.git_sha,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Tag request spans with the acting participant, when given."""
    participant = request.headers.get("x-participant")
    if participant:
        return {**attributes, "participant": participant}
    return attributes


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request of the app.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)
