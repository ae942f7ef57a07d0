"""
FastAPI exception handlers for structured error responses.

Maps validator group exceptions to HTTP status codes.
"""

from datetime import datetime, timezone

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse

from validator_group.exceptions import GroupValidationFailed, InvalidArgumentError

logger = structlog.get_logger(__name__)


async def group_validation_failed_handler(
    request: Request, exc: GroupValidationFailed
) -> JSONResponse:
    """
    Handle submissions rejected by a validation group.
    
    Maps to 422 Unprocessable Entity. Only the group's message is returned;
    submitted values are never echoed.
    
    Args:
        request: FastAPI request
        exc: GroupValidationFailed instance
    
    Returns:
        JSON error response
    """
    logger.info(
        "Request rejected by validation group",
        path=request.url.path,
        **exc.details,
    )
    
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_failed",
            "message": exc.message,
            "field": exc.outcome.failed_field,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


async def invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    """
    Handle undecodable request bodies.
    
    Maps to 400 Bad Request (client error).
    
    Args:
        request: FastAPI request
        exc: InvalidArgumentError instance
    
    Returns:
        JSON error response
    """
    logger.warning(
        "Invalid request body",
        path=request.url.path,
        error=exc.message,
    )
    
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "invalid_request",
            "message": exc.message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    GroupValidationFailed: group_validation_failed_handler,
    InvalidArgumentError: invalid_argument_handler,
}


def register_exception_handlers(app) -> None:
    """Register every handler in EXCEPTION_HANDLERS on a FastAPI app."""
    for exc_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exc_class, handler)
