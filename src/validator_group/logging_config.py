"""
Structured logging for validator groups.

Every module logs through ``structlog.get_logger(__name__)``. Until
``configure_logging`` is called those events follow whatever structlog
setup the host application has. Once called, the ``validator_group``
logger tree gets its own stream handler: JSON lines in production,
readable console lines everywhere else.
"""

import logging
import sys
from typing import IO

import structlog
from structlog.types import EventDict, WrappedLogger

from .config import settings

LIBRARY_LOGGER = "validator_group"

# Pillow logs every plugin probe at DEBUG
NOISY_LOGGERS = ("PIL", "multipart", "python_multipart")


def add_library_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Tag every log event with the emitting library."""
    event_dict.setdefault("lib", "validator-group")
    return event_dict


def build_renderer(environment: str, stream: IO[str]) -> structlog.types.Processor:
    if environment.lower() == "production":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    log_level: str | None = None,
    environment: str | None = None,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """
    Send validator group events to a structured stream handler.

    Calling it again replaces the handler installed by the previous call.
    Loggers outside ``validator_group`` are left alone apart from the
    noisy third-party ones, which are raised to WARNING.

    Args:
        log_level: Level name, defaults to settings.LOG_LEVEL
        environment: "production" selects JSON output, defaults to
                     settings.ENVIRONMENT
        stream: Target stream, defaults to stdout

    Returns:
        The installed handler
    """
    log_level = (log_level or settings.LOG_LEVEL).upper()
    environment = environment or settings.ENVIRONMENT
    stream = stream or sys.stdout
    level = getattr(logging, log_level, logging.INFO)

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_library_context,
    ]
    if environment.lower() == "production":
        pre_chain.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream)
    handler.set_name(LIBRARY_LOGGER)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=build_renderer(environment, stream),
            foreign_pre_chain=pre_chain,
        )
    )

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for existing in list(library_logger.handlers):
        if existing.get_name() == LIBRARY_LOGGER:
            library_logger.removeHandler(existing)
    library_logger.addHandler(handler)
    library_logger.setLevel(level)
    library_logger.propagate = False

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_level=log_level,
        environment=environment,
    )
    return handler
