"""
Abstract contracts for filters and validators.

The engine only relies on the method names below, so any object exposing
them works. Subclassing these bases is the convenient way to get the
last-error bookkeeping for free.
"""

from abc import ABC, abstractmethod
from typing import Any


class Filter(ABC):
    """
    A pure transform applied to a field's value before validation.

    Implementations must not raise for any value they are registered
    against; a filter that cannot transform a value returns it unchanged.
    """

    @abstractmethod
    def filter(self, value: Any) -> Any:
        """
        Transform a value.

        Args:
            value: Raw value or output of the previous filter in the chain

        Returns:
            Transformed value
        """
        pass


class Validator(ABC):
    """
    A predicate checked against a field's filtered value.

    ``get_last_error_message`` is only queried after ``is_valid`` returned
    False. An empty message lets the group fall back to its default text.

    The message is instance state, so one validator instance must not be
    shared by runs executing at the same time.
    """

    def __init__(self) -> None:
        self._last_error_message = ""

    @abstractmethod
    def is_valid(self, value: Any) -> bool:
        """
        Check a value.

        Args:
            value: Filtered field value

        Returns:
            True if the value is acceptable, False otherwise
        """
        pass

    def get_last_error_message(self) -> str:
        return self._last_error_message

    def set_last_error_message(self, message: str) -> None:
        self._last_error_message = message
