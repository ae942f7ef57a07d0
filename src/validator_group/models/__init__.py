"""
Data models for validation groups.

- field_spec.py: Declared per-field configuration and captured value pairs
- outcome.py: Result of one validation run (captured values, verdict, message)
- uploaded_file.py: Upload metadata view with lazy image dimensions
- enums.py: Upload error codes and failure reasons
"""

from .enums import FailureReason, UploadErrorCode
from .field_spec import CapturedValues, FieldSpec
from .outcome import ValidationOutcome
from .uploaded_file import UploadedFile, UploadMeta

__all__ = [
    "FieldSpec",
    "CapturedValues",
    "ValidationOutcome",
    "UploadedFile",
    "UploadMeta",
    "UploadErrorCode",
    "FailureReason",
]
