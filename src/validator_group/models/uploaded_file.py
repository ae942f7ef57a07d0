"""
Metadata for a single uploaded file.

Upload metadata is handed in explicitly as a mapping of field name to the
per-file entry produced by the web layer. Nothing here reads ambient
request state.
"""

from pathlib import PurePath
from typing import Any, Mapping

import structlog
from PIL import Image
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import InvalidArgumentError, UploadMetadataNotFoundError
from .enums import UploadErrorCode

logger = structlog.get_logger(__name__)


class UploadMeta(BaseModel):
    """
    Raw per-file upload entry, keyed the way multipart parsers report it.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(..., description="Original filename sent by the client")
    tmp_name: str = Field(..., description="Server-side temporary storage path")
    type: str = Field(default="", description="MIME type declared by the client")
    size: int = Field(default=0, ge=0, description="Size in bytes")
    error: int = Field(default=UploadErrorCode.OK, description="Upload error code")


class UploadedFile:
    """
    Read-only view over one field's upload metadata.

    Image dimensions are read lazily from the file header on first access.
    """

    def __init__(self, field_name: str, uploads: Mapping[str, Any]):
        """
        Look up upload metadata for a form field.

        Args:
            field_name: Form field the file was posted under
            uploads: Mapping of field name to metadata (dict or UploadMeta)

        Raises:
            UploadMetadataNotFoundError: If ``uploads`` has no entry for the field
            InvalidArgumentError: If the entry is malformed
        """
        if field_name not in uploads:
            raise UploadMetadataNotFoundError(field_name)

        raw = uploads[field_name]
        if isinstance(raw, UploadMeta):
            self._meta = raw
        else:
            try:
                self._meta = UploadMeta.model_validate(raw)
            except PydanticValidationError as e:
                error_messages = [
                    f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                    for err in e.errors()
                ]
                raise InvalidArgumentError(
                    f'Malformed upload metadata for field "{field_name}": {"; ".join(error_messages)}',
                    argument=field_name,
                ) from e

        self.field_name = field_name
        self._dimensions: tuple[int, int] | None = None
        self._dimensions_loaded = False

    def __repr__(self) -> str:
        return f"UploadedFile(field_name={self.field_name!r}, original_filename={self.original_filename!r})"

    def __str__(self) -> str:
        return self.original_filename

    @property
    def meta(self) -> dict[str, Any]:
        return self._meta.model_dump()

    @property
    def original_filename(self) -> str:
        return self._meta.name

    @property
    def temp_path(self) -> str:
        return self._meta.tmp_name

    @property
    def mime_type_hint(self) -> str:
        return self._meta.type

    @property
    def size_bytes(self) -> int:
        return self._meta.size

    @property
    def error_code(self) -> int:
        return self._meta.error

    @property
    def is_ok(self) -> bool:
        return self._meta.error == UploadErrorCode.OK

    @property
    def extension(self) -> str:
        """Extension of the original filename, without the dot ("" if none)."""
        return PurePath(self.original_filename).suffix.lstrip(".")

    @property
    def dimensions(self) -> tuple[int, int] | None:
        """
        Image (width, height), or None if the file is not a readable image.

        Pillow only parses the header here; pixel data is never decoded.
        """
        if not self._dimensions_loaded:
            self._dimensions_loaded = True
            try:
                with Image.open(self.temp_path) as image:
                    self._dimensions = image.size
            except OSError as e:
                logger.debug(
                    "Upload is not a readable image",
                    field_name=self.field_name,
                    error=str(e),
                )
                self._dimensions = None
        return self._dimensions

    @property
    def width(self) -> int | None:
        dimensions = self.dimensions
        return dimensions[0] if dimensions else None

    @property
    def height(self) -> int | None:
        dimensions = self.dimensions
        return dimensions[1] if dimensions else None
