"""
Unit tests for FileUploadHandler.
"""

from validator_group.handlers.upload_handler import FileUploadHandler
from validator_group.models.uploaded_file import UploadedFile


class TestFileUploadHandler:
    """Test suite for the upload metadata handler."""

    def test_presence_is_key_presence(self, upload_meta):
        handler = FileUploadHandler(upload_meta)

        assert handler.has_value("avatar") is True
        assert handler.has_value("resume") is False

    def test_value_is_uploaded_file(self, upload_meta):
        value = FileUploadHandler(upload_meta).get_value("avatar")

        assert isinstance(value, UploadedFile)
        assert value.field_name == "avatar"
        assert value.original_filename == "me.png"
