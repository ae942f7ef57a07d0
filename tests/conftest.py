"""Shared test fixtures and configuration for all tests.

Provides sample validation groups, handler factories and upload metadata
used across unit and integration tests.
"""

from pathlib import Path
from typing import Any

import pytest
from PIL import Image

from validator_group.config import Settings
from validator_group.handlers.json_handler import JSONHandler
from validator_group.validation.filters import ToInt, Trim
from validator_group.validation.group import ValidationGroup
from validator_group.validation.validators import NumberBetween, StringLength


class SimpleGroup(ValidationGroup):
    """Two required fields: a small integer and a trimmed string."""

    def __init__(self):
        super().__init__()
        self.add_field("testInt01", validators=[NumberBetween(1, 5)])
        self.add_field("testString01", validators=[StringLength(1, 20)], filters=[Trim()])


class AgeGroup(ValidationGroup):
    """Single required age field parsed from text."""

    def __init__(self):
        super().__init__()
        self.add_field(
            "age",
            validators=[NumberBetween(0, 130, message="Age must be between 0 and 130")],
            filters=[ToInt()],
        )


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults.
    
    Override specific settings in individual tests as needed.
    """
    return Settings(
        APP_NAME="Validator Group (Test)",
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        VALIDATION_DEBUG=False,
        DEBUG_VALUE_MAX_LENGTH=0,
        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def simple_group() -> SimpleGroup:
    return SimpleGroup()


@pytest.fixture
def age_group() -> AgeGroup:
    return AgeGroup()


@pytest.fixture
def json_handler():
    """Factory fixture building a JSONHandler from keyword arguments.
    
    Usage:
        def test_something(json_handler):
            handler = json_handler(name="Alex", age="30")
    """
    def _create(**values: Any) -> JSONHandler:
        return JSONHandler(values)
    
    return _create


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    """A real 64x32 PNG on disk."""
    path = tmp_path / "upload_abc123"
    Image.new("RGB", (64, 32), (255, 0, 0)).save(path, format="PNG")
    return path


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    """A plain text file (not an image)."""
    path = tmp_path / "upload_def456"
    path.write_text("not an image")
    return path


@pytest.fixture
def upload_meta(png_file: Path) -> dict[str, dict[str, Any]]:
    """Upload metadata for an 'avatar' field pointing at png_file."""
    return {
        "avatar": {
            "name": "me.png",
            "tmp_name": str(png_file),
            "type": "image/png",
            "size": png_file.stat().st_size,
            "error": 0,
        }
    }
