"""
Web form data handler.

Wraps any mapping-like form object (Starlette ``FormData``, ``QueryParams``
or a plain dict) posted with a POST/PUT/PATCH request.
"""

from typing import Any, Mapping

import structlog
from starlette.requests import Request

from .base import DataHandler

logger = structlog.get_logger(__name__)

BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


class FormDataHandler(DataHandler):
    """
    Data handler over submitted form fields.

    Browsers send untouched inputs as empty strings, so an empty string
    counts as absent here.
    """

    def __init__(self, form: Mapping[str, Any]):
        self._form = form

    @classmethod
    async def from_request(cls, request: Request) -> "FormDataHandler":
        """
        Build a handler from an incoming request's form body.

        Requests without a body method yield an empty handler, so every
        required field reports as missing.

        Args:
            request: Starlette / FastAPI request

        Returns:
            FormDataHandler over the parsed form
        """
        if request.method.upper() not in BODY_METHODS:
            logger.warning(
                "Form handler built for request without a body",
                method=request.method,
                path=request.url.path,
            )
            return cls({})

        form = await request.form()
        return cls(form)

    def has_value(self, name: str) -> bool:
        value = self._form.get(name)
        return value is not None and value != ""

    def get_value(self, name: str) -> Any:
        return self._form.get(name)
