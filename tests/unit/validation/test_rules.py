"""
Unit tests for the reference filters and validators.
"""

import pytest

from validator_group.models.uploaded_file import UploadedFile
from validator_group.validation.filters import CallableFilter, Negate, ToInt, ToUpper, Trim
from validator_group.validation.validators import (
    CallableValidator,
    NumberBetween,
    StringLength,
    UploadedFileValid,
)


class TestFilters:
    """Filters transform what they understand and pass the rest through."""

    @pytest.mark.parametrize(
        "value,expected",
        [("  x  ", "x"), ("x", "x"), (5, 5), (None, None)],
    )
    def test_trim(self, value, expected):
        assert Trim().filter(value) == expected

    def test_trim_custom_chars(self):
        assert Trim("/").filter("/path/") == "path"

    def test_to_upper(self):
        assert ToUpper().filter("abc") == "ABC"
        assert ToUpper().filter(3) == 3

    @pytest.mark.parametrize(
        "value,expected",
        [("5", 5), (" 42 ", 42), (7, 7), (3.0, 3), (3.5, 3.5), ("abc", "abc"), (True, True)],
    )
    def test_to_int(self, value, expected):
        result = ToInt().filter(value)
        assert result == expected
        assert type(result) is type(expected)

    def test_negate(self):
        assert Negate().filter(5) == -5
        assert Negate().filter(-2.5) == 2.5
        assert Negate().filter("5") == "5"
        assert Negate().filter(True) is True

    def test_callable_filter(self):
        assert CallableFilter(lambda v: v * 2).filter(4) == 8


class TestNumberBetween:
    """Inclusive numeric range validator."""

    def test_bounds_are_inclusive(self):
        validator = NumberBetween(0, 130)

        assert validator.is_valid(0)
        assert validator.is_valid(130)
        assert validator.is_valid(30)

    def test_out_of_range_message(self):
        validator = NumberBetween(0, 130)

        assert validator.is_valid(200) is False
        assert validator.get_last_error_message() == "Value must be between 0 and 130"

    def test_custom_message(self):
        validator = NumberBetween(0, 130, message="Bad age")

        assert validator.is_valid(-1) is False
        assert validator.get_last_error_message() == "Bad age"

    @pytest.mark.parametrize("value", ["30", None, True])
    def test_non_numbers_rejected(self, value):
        assert NumberBetween(0, 130).is_valid(value) is False


class TestStringLength:
    """String length validator."""

    def test_within_bounds(self):
        assert StringLength(1, 5).is_valid("abc")

    def test_too_short(self):
        validator = StringLength(3)

        assert validator.is_valid("ab") is False
        assert "at least 3" in validator.get_last_error_message()

    def test_too_long(self):
        validator = StringLength(0, 2)

        assert validator.is_valid("abc") is False
        assert "at most 2" in validator.get_last_error_message()

    def test_non_string_rejected(self):
        assert StringLength().is_valid(12) is False


class TestCallableValidator:
    """Predicate adapter."""

    def test_passes_and_fails(self):
        validator = CallableValidator(lambda v: v == "ok", message="Not ok")

        assert validator.is_valid("ok")
        assert validator.is_valid("ko") is False
        assert validator.get_last_error_message() == "Not ok"

    def test_default_message_is_empty(self):
        validator = CallableValidator(lambda v: False)

        assert validator.is_valid("x") is False
        assert validator.get_last_error_message() == ""


class TestUploadedFileValid:
    """Upload validator."""

    def test_accepts_good_upload(self, upload_meta):
        upload = UploadedFile("avatar", upload_meta)

        assert UploadedFileValid(max_size_bytes=10_000, allowed_extensions=["PNG"]).is_valid(upload)

    def test_rejects_non_upload(self):
        validator = UploadedFileValid()

        assert validator.is_valid("me.png") is False
        assert validator.get_last_error_message() == "Value is not an uploaded file"

    def test_rejects_upload_error(self, upload_meta):
        upload_meta["avatar"]["error"] = 3
        validator = UploadedFileValid()

        assert validator.is_valid(UploadedFile("avatar", upload_meta)) is False
        assert "error code 3" in validator.get_last_error_message()

    def test_rejects_large_file(self, upload_meta):
        upload_meta["avatar"]["size"] = 5000
        validator = UploadedFileValid(max_size_bytes=1000)

        assert validator.is_valid(UploadedFile("avatar", upload_meta)) is False
        assert "exceeds 1000 bytes" in validator.get_last_error_message()

    def test_rejects_extension(self, upload_meta):
        validator = UploadedFileValid(allowed_extensions=[".jpg", "gif"])

        assert validator.is_valid(UploadedFile("avatar", upload_meta)) is False
        assert validator.get_last_error_message() == 'File type ".png" is not allowed'

    def test_checks_image_dimensions(self, upload_meta):
        upload = UploadedFile("avatar", upload_meta)

        assert UploadedFileValid(max_width=64, max_height=32).is_valid(upload)

        too_narrow = UploadedFileValid(max_width=50)
        assert too_narrow.is_valid(upload) is False
        assert too_narrow.get_last_error_message() == "Image is wider than 50px"

        too_short = UploadedFileValid(max_height=10)
        assert too_short.is_valid(upload) is False
        assert too_short.get_last_error_message() == "Image is taller than 10px"

    def test_dimension_check_rejects_non_image(self, text_file):
        uploads = {"doc": {"name": "notes.txt", "tmp_name": str(text_file)}}
        validator = UploadedFileValid(max_width=100)

        assert validator.is_valid(UploadedFile("doc", uploads)) is False
        assert "not a readable image" in validator.get_last_error_message()
