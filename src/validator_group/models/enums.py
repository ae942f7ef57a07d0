"""
Enumerations for upload metadata and validation bookkeeping.
"""

from enum import Enum, IntEnum


class UploadErrorCode(IntEnum):
    """
    Standard multipart upload error codes.

    Values follow the codes web servers report for each uploaded file,
    so metadata produced by any upstream adapter maps directly.
    """

    OK = 0
    INI_SIZE = 1  # Exceeds server-side maximum size
    FORM_SIZE = 2  # Exceeds the form's declared maximum size
    PARTIAL = 3  # Only partially uploaded
    NO_FILE = 4
    NO_TMP_DIR = 6
    CANT_WRITE = 7
    EXTENSION = 8  # Stopped by a server extension


class FailureReason(str, Enum):
    """
    Why a validation run failed.

    Used as a metrics label and recorded on the run outcome.
    """

    MISSING_REQUIRED = "missing_required"
    VALIDATOR_FAILED = "validator_failed"
    MINIMUM_FIELDS = "minimum_fields"
    POST_HOOK = "post_hook"
