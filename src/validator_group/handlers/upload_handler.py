"""
File upload data handler.

Presence and value of file fields come from upload metadata passed in by
the caller, keyed by form field name.
"""

from typing import Any, Mapping

from ..models.uploaded_file import UploadedFile
from .base import DataHandler


class FileUploadHandler(DataHandler):
    """
    Data handler whose values are ``UploadedFile`` views.

    Args:
        uploads: Mapping of field name to upload metadata
                 (``name``, ``tmp_name``, ``type``, ``size``, ``error``)
    """

    def __init__(self, uploads: Mapping[str, Any]):
        self._uploads = uploads

    def has_value(self, name: str) -> bool:
        return name in self._uploads

    def get_value(self, name: str) -> UploadedFile:
        return UploadedFile(name, self._uploads)
