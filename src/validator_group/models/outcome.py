"""
Result of a single validation run.

Every call to ``ValidationGroup.validate`` builds a fresh outcome, so the
long-lived group configuration never carries run state and can be shared
between concurrent callers.
"""

import json
from dataclasses import dataclass, field
from typing import Any

from .enums import FailureReason
from .field_spec import CapturedValues


@dataclass
class ValidationOutcome:
    """
    Captured values and verdict of one validation run.

    Attributes:
        group: Name of the group class that produced this outcome
        valid: Overall pass/fail verdict
        error_message: The single failure message of the run (None on success)
        failure_reason: Which step of the run failed
        failed_field: Field id that caused the failure, if any
        captured: field_id -> CapturedValues, in processing order, only for
                  fields that had a value during this run
        secure_fields: Field ids excluded from ``export_values``
    """

    group: str
    valid: bool = False
    error_message: str | None = None
    failure_reason: FailureReason | None = None
    failed_field: str | None = None
    captured: dict[str, CapturedValues] = field(default_factory=dict)
    secure_fields: frozenset[str] = frozenset()

    def __bool__(self) -> bool:
        return self.valid

    def fail(
        self,
        message: str | None,
        reason: FailureReason,
        field_id: str | None = None,
    ) -> "ValidationOutcome":
        """Mark the run as failed and return self."""
        self.valid = False
        self.error_message = message
        self.failure_reason = reason
        self.failed_field = field_id
        return self

    def was_provided(self, field_id: str) -> bool:
        """True if the field had a value during this run."""
        return field_id in self.captured

    def get_value(self, field_id: str, default: Any = None) -> Any:
        """
        Get the value of a field from this run.

        Preference order: filtered value, original value, ``default``.
        A captured value of None falls through to the next option.

        Args:
            field_id: Field to look up (unknown ids return ``default``)
            default: Returned when nothing usable was captured

        Returns:
            The best available value for the field
        """
        values = self.captured.get(field_id)
        if values is not None:
            if values.filtered_value is not None:
                return values.filtered_value
            if values.original_value is not None:
                return values.original_value
        return default

    def export_values(self) -> list[dict[str, Any]]:
        """
        Non-sensitive filtered values, safe to mirror back to a client.

        Returns:
            Ordered list of single-entry ``{field_id: filtered_value}`` dicts,
            skipping secure fields and fields without a filtered value
        """
        exported: list[dict[str, Any]] = []
        for field_id, values in self.captured.items():
            if field_id in self.secure_fields:
                continue
            if values.filtered_value is None:
                continue
            exported.append({field_id: values.filtered_value})
        return exported

    def as_json(self) -> str:
        """JSON rendering of ``export_values`` for embedding in a page."""
        return json.dumps(self.export_values(), default=str)
