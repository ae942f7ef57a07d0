"""
Abstract data handler.

A handler is the only way a validation group sees input values. One
concrete handler exists per data source (JSON body, web form, upload
metadata), so the engine never needs to know where values came from.
"""

from abc import ABC, abstractmethod
from typing import Any


class DataHandler(ABC):
    """
    Source of named input values consulted by a validation group.

    The group always calls ``has_value`` before ``get_value``; calling
    ``get_value`` for an absent name has no defined result.
    """

    @abstractmethod
    def has_value(self, name: str) -> bool:
        """
        Check whether a value is present for ``name``.

        Must return False for an absent value, not merely for a falsy one:
        ``0``, ``False`` and ``[]`` are present values.
        """
        pass

    @abstractmethod
    def get_value(self, name: str) -> Any:
        """Return the raw value for ``name``."""
        pass
