"""
FastAPI dependency injection for validation groups.

Turns the incoming request into a DataHandler and runs a group against it,
so endpoints receive an already-validated ValidationOutcome.
"""

from typing import Awaitable, Callable

from fastapi import Depends, Request

from validator_group.exceptions import GroupValidationFailed
from validator_group.handlers.base import DataHandler
from validator_group.handlers.form_handler import FormDataHandler
from validator_group.handlers.json_handler import JSONHandler
from validator_group.models.outcome import ValidationOutcome
from validator_group.validation.group import ValidationGroup


async def get_request_handler(request: Request) -> DataHandler:
    """
    Build a data handler matching the request body.
    
    JSON bodies are decoded into a JSONHandler; everything else (urlencoded
    and multipart forms, bodiless requests) goes through FormDataHandler.
    
    Args:
        request: FastAPI request
    
    Returns:
        DataHandler over the request body
    
    Raises:
        InvalidArgumentError: If a JSON body is malformed or not an object
    """
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() == "application/json":
        body = await request.body()
        if not body.strip():
            return JSONHandler({})
        return JSONHandler(body, requires_decoding=True)
    
    return await FormDataHandler.from_request(request)


def validated_by(
    group_factory: Callable[[], ValidationGroup],
    debug: bool | None = None,
) -> Callable[..., Awaitable[ValidationOutcome]]:
    """
    Create a dependency that validates the request with a fresh group.
    
    A new group is built per request, so groups never share run state
    across concurrent requests.

    No upload handler is passed to the group: fields declared with
    add_file_upload_field always read as absent here, so a required one
    fails with "Missing required field". Endpoints taking files should
    build a FileUploadHandler from saved uploads and call
    ``group.validate(handler, uploads=...)`` themselves.

    Args:
        group_factory: Callable returning a configured group (usually the class)
        debug: Passed through to ValidationGroup.validate
    
    Returns:
        Dependency resolving to the successful ValidationOutcome
    
    Raises:
        GroupValidationFailed: If the request fails validation
    """
    async def dependency(
        handler: DataHandler = Depends(get_request_handler),
    ) -> ValidationOutcome:
        outcome = group_factory().validate(handler, debug=debug)
        if not outcome.valid:
            raise GroupValidationFailed(outcome)
        return outcome
    
    return dependency
