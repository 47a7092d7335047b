"""Standard library logging, forwarded to Logfire.

Application code logs through logfire directly. This covers records emitted
by uvicorn and other libraries through the logging module.
"""

import logging

import logfire

from huddle.config import Settings

_QUIET_LOGGERS = ("uvicorn.access",)


def log_level(settings: Settings) -> int:
    """Root level for an environment: debug wins, tests stay quiet."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Send standard library log records to Logfire.

    Args:
        settings: Application settings
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logfire.debug(
        "Standard logging forwarded",
        level=logging.getLevelName(level),
        environment=settings.environment,
    )
