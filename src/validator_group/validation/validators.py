"""
Reference validators.

Each validator records a human-readable message when it rejects a value,
which the group reports as its last error message.
"""

from typing import Any, Callable, Iterable

from ..contracts import Validator
from ..models.uploaded_file import UploadedFile


class NumberBetween(Validator):
    """
    Accept numbers within [minimum, maximum] (inclusive).

    Strings, booleans and other types are rejected.
    """

    def __init__(self, minimum: float, maximum: float, message: str | None = None):
        super().__init__()
        self.minimum = minimum
        self.maximum = maximum
        self.message = message

    def is_valid(self, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            self.set_last_error_message(self.message or "Value must be a number")
            return False
        if not self.minimum <= value <= self.maximum:
            self.set_last_error_message(
                self.message
                or f"Value must be between {self.minimum} and {self.maximum}"
            )
            return False
        return True


class StringLength(Validator):
    """Accept strings whose length is within the given bounds."""

    def __init__(self, min_length: int = 0, max_length: int | None = None):
        super().__init__()
        self.min_length = min_length
        self.max_length = max_length

    def is_valid(self, value: Any) -> bool:
        if not isinstance(value, str):
            self.set_last_error_message("Value must be a string")
            return False
        if len(value) < self.min_length:
            self.set_last_error_message(
                f"Value must be at least {self.min_length} characters long"
            )
            return False
        if self.max_length is not None and len(value) > self.max_length:
            self.set_last_error_message(
                f"Value must be at most {self.max_length} characters long"
            )
            return False
        return True


class CallableValidator(Validator):
    """
    Adapt a predicate function into a validator.

    Args:
        predicate: Returns truthy for acceptable values
        message: Reported on rejection ("" lets the group use its default)
    """

    def __init__(self, predicate: Callable[[Any], bool], message: str = ""):
        super().__init__()
        self.predicate = predicate
        self.message = message

    def is_valid(self, value: Any) -> bool:
        if self.predicate(value):
            return True
        self.set_last_error_message(self.message)
        return False


class UploadedFileValid(Validator):
    """
    Accept successful uploads, optionally bounded by size and extension.

    Args:
        max_size_bytes: Largest accepted file
        allowed_extensions: Case-insensitive extensions without the dot
        max_width: Largest accepted image width (non-images are rejected)
        max_height: Largest accepted image height (non-images are rejected)
    """

    def __init__(
        self,
        max_size_bytes: int | None = None,
        allowed_extensions: Iterable[str] | None = None,
        max_width: int | None = None,
        max_height: int | None = None,
    ):
        super().__init__()
        self.max_size_bytes = max_size_bytes
        self.allowed_extensions = (
            {ext.lower().lstrip(".") for ext in allowed_extensions}
            if allowed_extensions is not None
            else None
        )
        self.max_width = max_width
        self.max_height = max_height

    def is_valid(self, value: Any) -> bool:
        if not isinstance(value, UploadedFile):
            self.set_last_error_message("Value is not an uploaded file")
            return False
        if not value.is_ok:
            self.set_last_error_message(
                f'Upload of "{value.original_filename}" failed with error code {value.error_code}'
            )
            return False
        if self.max_size_bytes is not None and value.size_bytes > self.max_size_bytes:
            self.set_last_error_message(
                f'File "{value.original_filename}" exceeds {self.max_size_bytes} bytes'
            )
            return False
        if (
            self.allowed_extensions is not None
            and value.extension.lower() not in self.allowed_extensions
        ):
            self.set_last_error_message(
                f'File type ".{value.extension}" is not allowed'
            )
            return False
        if self.max_width is not None or self.max_height is not None:
            return self._check_dimensions(value)
        return True

    def _check_dimensions(self, upload: UploadedFile) -> bool:
        if upload.dimensions is None:
            self.set_last_error_message(
                f'File "{upload.original_filename}" is not a readable image'
            )
            return False
        width, height = upload.dimensions
        if self.max_width is not None and width > self.max_width:
            self.set_last_error_message(f"Image is wider than {self.max_width}px")
            return False
        if self.max_height is not None and height > self.max_height:
            self.set_last_error_message(f"Image is taller than {self.max_height}px")
            return False
        return True
