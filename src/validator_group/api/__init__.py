"""
FastAPI integration.

- dependencies.py: Request -> DataHandler, and the validated_by() dependency factory
- error_handlers.py: Exception handlers for structured error responses
- setup.py: install() wires error handlers and logging into an app
"""

from validator_group.api import dependencies, error_handlers
from validator_group.api.dependencies import get_request_handler, validated_by
from validator_group.api.error_handlers import EXCEPTION_HANDLERS, register_exception_handlers
from validator_group.api.setup import install

__all__ = [
    "dependencies",
    "error_handlers",
    "get_request_handler",
    "validated_by",
    "EXCEPTION_HANDLERS",
    "register_exception_handlers",
    "install",
]
