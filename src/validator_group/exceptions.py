"""
Exceptions raised while configuring a validation group or reading its inputs.

These are programmer errors and propagate immediately. A submission that
fails validation is NOT an exception: ``ValidationGroup.is_valid`` returns
False and exposes a single ``last_error_message`` instead.
"""

from typing import Any


class ValidatorGroupError(Exception):
    """
    Base exception for all validator group errors.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize validator group error.

        Args:
            message: Human-readable error description
            details: Structured error data for logging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class DuplicateFieldError(ValidatorGroupError):
    """
    Raised when registering a field id that the group already declares.
    """

    def __init__(self, field_id: str, group: str | None = None):
        details: dict[str, Any] = {"field_id": field_id}
        if group:
            details["group"] = group
        super().__init__(
            f'Unable to add field "{field_id}", it is already declared inside this group',
            details,
        )
        self.field_id = field_id


class UnknownFieldError(ValidatorGroupError):
    """
    Raised when modifying, removing or extending a field that was never declared.
    """

    def __init__(self, field_id: str, action: str = "modify", group: str | None = None):
        """
        Initialize unknown field error.

        Args:
            field_id: The undeclared field id
            action: What the caller tried to do (e.g., "remove", "append filter to")
            group: Name of the group class, for log context
        """
        details: dict[str, Any] = {"field_id": field_id, "action": action}
        if group:
            details["group"] = group
        super().__init__(
            f'Unable to {action} field "{field_id}", it has not been previously declared in this group',
            details,
        )
        self.field_id = field_id


class InvalidArgumentError(ValidatorGroupError):
    """
    Raised for malformed configuration or handler input.

    Examples:
    - A negative or non-integer minimum-fields threshold
    - A raw JSON payload that does not decode to an object
    """

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        invalid_value: Any | None = None,
        parse_error: str | None = None,
    ):
        details: dict[str, Any] = {}
        if argument:
            details["argument"] = argument
        if invalid_value is not None:
            # Keep the snippet short, raw payloads can be large
            details["invalid_value"] = str(invalid_value)[:200]
        if parse_error:
            details["parse_error"] = parse_error
        super().__init__(message, details)


class UploadMetadataNotFoundError(ValidatorGroupError):
    """
    Raised when upload metadata is requested for a field that has no upload.
    """

    def __init__(self, field_name: str):
        super().__init__(
            f'Unable to find meta for file with field name "{field_name}"',
            {"field_name": field_name},
        )
        self.field_name = field_name


class GroupValidationFailed(ValidatorGroupError):
    """
    A submission failed validation at the web boundary.

    Only raised by the FastAPI integration, which turns it into a 422
    response. The engine itself reports failures through its return value.
    """

    def __init__(self, outcome: Any):
        details: dict[str, Any] = {"group": outcome.group}
        if outcome.failed_field:
            details["field_id"] = outcome.failed_field
        if outcome.failure_reason:
            details["reason"] = outcome.failure_reason.value
        super().__init__(outcome.error_message or "Validation failed", details)
        self.outcome = outcome
