"""
Data handlers: where a validation group reads its input values from.

- base.py: DataHandler contract (has_value / get_value)
- json_handler.py: Decoded mapping or raw JSON text
- form_handler.py: Web form bodies (Starlette FormData or any mapping)
- upload_handler.py: Multipart upload metadata, one UploadedFile per field
"""

from .base import DataHandler
from .form_handler import FormDataHandler
from .json_handler import JSONHandler
from .upload_handler import FileUploadHandler

__all__ = [
    "DataHandler",
    "JSONHandler",
    "FormDataHandler",
    "FileUploadHandler",
]
