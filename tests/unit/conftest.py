"""Unit test fixtures (spies and stubs).

Provides filters and validators that record how they were called.
"""

import io
import logging
from typing import Any

import pytest
import structlog

from validator_group.contracts import Filter, Validator
from validator_group.logging_config import LIBRARY_LOGGER


class SpyValidator(Validator):
    """Validator returning a fixed verdict and counting its calls."""

    def __init__(self, verdict: bool = True, message: str = ""):
        super().__init__()
        self.verdict = verdict
        self.message = message
        self.calls: list[Any] = []

    def is_valid(self, value: Any) -> bool:
        self.calls.append(value)
        if not self.verdict:
            self.set_last_error_message(self.message)
        return self.verdict


class SpyFilter(Filter):
    """Identity filter counting its calls."""

    def __init__(self):
        self.calls: list[Any] = []

    def filter(self, value: Any) -> Any:
        self.calls.append(value)
        return value


class RecordingHandler:
    """Duck-typed handler logging every lookup, in order."""

    def __init__(self, values: dict[str, Any]):
        self.values = values
        self.lookups: list[tuple[str, str]] = []

    def has_value(self, name: str) -> bool:
        self.lookups.append(("has", name))
        return name in self.values

    def get_value(self, name: str) -> Any:
        self.lookups.append(("get", name))
        return self.values[name]


@pytest.fixture
def spy_validator():
    """Factory fixture for SpyValidator."""
    return SpyValidator


@pytest.fixture
def spy_filter():
    """Factory fixture for SpyFilter."""
    return SpyFilter


@pytest.fixture
def recording_handler():
    """Factory fixture for RecordingHandler."""
    return RecordingHandler


@pytest.fixture
def log_stream():
    """In-memory stream for configure_logging; logging state is restored afterwards."""
    stream = io.StringIO()
    yield stream

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in list(library_logger.handlers):
        if handler.get_name() == LIBRARY_LOGGER:
            library_logger.removeHandler(handler)
    library_logger.setLevel(logging.NOTSET)
    library_logger.propagate = True
    structlog.reset_defaults()
