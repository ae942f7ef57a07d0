"""
Reference filters.

Small, dependency-free transforms covering the common cases. Every filter
returns values it cannot handle unchanged instead of raising.
"""

from typing import Any, Callable

from ..contracts import Filter


class Trim(Filter):
    """Strip surrounding whitespace (or ``chars``) from strings."""

    def __init__(self, chars: str | None = None):
        self.chars = chars

    def filter(self, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip(self.chars)
        return value


class ToUpper(Filter):
    def filter(self, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value


class ToInt(Filter):
    """
    Coerce numeric strings and floats to int.

    Booleans and values that do not parse are returned unchanged, leaving
    the decision to the validators.
    """

    def filter(self, value: Any) -> Any:
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value) if value.is_integer() else value
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return value
        return value


class Negate(Filter):
    """Flip the sign of numbers; anything else passes through."""

    def filter(self, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return -value
        return value


class CallableFilter(Filter):
    """Adapt a plain function into a filter."""

    def __init__(self, func: Callable[[Any], Any]):
        self.func = func

    def filter(self, value: Any) -> Any:
        return self.func(value)
