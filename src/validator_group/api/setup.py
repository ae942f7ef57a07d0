"""
One-call wiring of validator groups into a FastAPI app.
"""

from typing import IO

import structlog
from fastapi import FastAPI

from validator_group.api.error_handlers import register_exception_handlers
from validator_group.logging_config import configure_logging

logger = structlog.get_logger(__name__)


def install(
    app: FastAPI,
    configure_logs: bool = True,
    log_level: str | None = None,
    environment: str | None = None,
    log_stream: IO[str] | None = None,
) -> FastAPI:
    """
    Register the error handlers and, optionally, structured logging.

    Args:
        app: Application to wire
        configure_logs: Skip when the host already configures structlog
        log_level: Passed to configure_logging (defaults to settings)
        environment: Passed to configure_logging (defaults to settings)
        log_stream: Passed to configure_logging (defaults to stdout)

    Returns:
        The same app
    """
    if configure_logs:
        configure_logging(log_level, environment, log_stream)

    register_exception_handlers(app)
    logger.info(
        "Validator groups installed",
        app_title=app.title,
        handlers=len(app.exception_handlers),
    )
    return app
