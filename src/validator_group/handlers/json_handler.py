"""
JSON data handler.

Wraps either an already-decoded mapping or a raw JSON string.
"""

import json
from typing import Any, Mapping

import structlog

from ..exceptions import InvalidArgumentError
from .base import DataHandler

logger = structlog.get_logger(__name__)


class JSONHandler(DataHandler):
    """
    Data handler over a JSON object.

    A key whose value is ``null`` counts as absent, so optional fields may
    be sent explicitly as null.
    """

    def __init__(self, data: Mapping[str, Any] | str | bytes, requires_decoding: bool = False):
        """
        Initialize JSON handler.

        Args:
            data: Decoded mapping, or raw JSON text when ``requires_decoding``
            requires_decoding: Whether ``data`` must be parsed first

        Raises:
            InvalidArgumentError: If the data is not (or does not decode to) a JSON object
        """
        if requires_decoding:
            self._source = self._decode(data)
        elif isinstance(data, Mapping):
            self._source = data
        else:
            raise InvalidArgumentError(
                f"JSONHandler expects a mapping (got {type(data).__name__}); "
                f"pass requires_decoding=True for raw JSON",
                argument="data",
            )

    @staticmethod
    def _decode(data: Any) -> Mapping[str, Any]:
        if not isinstance(data, (str, bytes, bytearray)):
            raise InvalidArgumentError(
                f"Raw JSON must be str or bytes (got {type(data).__name__})",
                argument="data",
            )
        try:
            parsed = json.loads(data)
        except json.JSONDecodeError as e:
            raise InvalidArgumentError(
                f"Failed to decode JSON payload: {e.msg}",
                argument="data",
                invalid_value=data,
                parse_error=f"{e.msg} at line {e.lineno} col {e.colno}",
            ) from e

        if not isinstance(parsed, dict):
            raise InvalidArgumentError(
                f"JSON payload is not an object (got {type(parsed).__name__})",
                argument="data",
                invalid_value=data,
            )

        logger.debug("Decoded JSON payload", top_level_keys=len(parsed))
        return parsed

    def has_value(self, name: str) -> bool:
        return self._source.get(name) is not None

    def get_value(self, name: str) -> Any:
        return self._source.get(name)
