"""
Validation Group: field registry and validation engine.

A group declares named fields, each with a filter chain, a validator chain
and a required flag. ``validate`` walks the fields in declaration order:

- Required field absent -> fail immediately
- Optional field absent -> skipped
- Present field -> filters run, values captured, validators run
  (first failing validator fails the run)

After the walk, the "at least N fields" policy and the post hook decide
the final verdict. Exactly one error message survives a failed run.
"""

import time
from typing import Any, Iterable

import structlog

from ..config import settings
from ..contracts import Filter, Validator
from ..exceptions import DuplicateFieldError, InvalidArgumentError, UnknownFieldError
from ..handlers.base import DataHandler
from ..models.enums import FailureReason
from ..models.field_spec import CapturedValues, FieldSpec
from ..models.outcome import ValidationOutcome
from ..monitoring.metrics import record_validation

logger = structlog.get_logger(__name__)

DEBUG_MARKER = " ::debug:: "


class ValidationGroup:
    """
    Base class for validation groups.

    Subclasses declare their fields in ``__init__``::

        class SignupGroup(ValidationGroup):
            def __init__(self):
                super().__init__()
                self.add_field("email", validators=[EmailAddress()], filters=[Trim()])
                self.add_secure_field("password", validators=[StringLength(min_length=8)])

    The field configuration is built once; every ``validate`` call returns a
    fresh ValidationOutcome, and ``is_valid`` additionally keeps the latest
    outcome on the group for ``get_value`` / ``last_error_message``.

    Registry methods are for configuration time only and must not be
    called while a run is in flight.
    """

    def __init__(self) -> None:
        self._fields: dict[str, FieldSpec] = {}
        self.minimum_required_fields = 0
        self._last_outcome: ValidationOutcome | None = None

    @property
    def name(self) -> str:
        return type(self).__name__

    # === Registry ===

    def add_field(
        self,
        field_id: str,
        validators: Iterable[Validator] = (),
        filters: Iterable[Filter] = (),
        required: bool = True,
    ) -> "ValidationGroup":
        """
        Declare a regular field.

        Raises:
            DuplicateFieldError: If ``field_id`` is already declared
        """
        return self._declare(FieldSpec(field_id, required, list(filters), list(validators)))

    def add_secure_field(
        self,
        field_id: str,
        validators: Iterable[Validator] = (),
        filters: Iterable[Filter] = (),
        required: bool = True,
    ) -> "ValidationGroup":
        """
        Declare a password-like field, never included in exported values.

        Raises:
            DuplicateFieldError: If ``field_id`` is already declared
        """
        return self._declare(
            FieldSpec(field_id, required, list(filters), list(validators), secure=True)
        )

    def add_file_upload_field(
        self,
        field_id: str,
        validators: Iterable[Validator] = (),
        filters: Iterable[Filter] = (),
        required: bool = True,
    ) -> "ValidationGroup":
        """
        Declare a field whose value is read from the upload handler.

        Raises:
            DuplicateFieldError: If ``field_id`` is already declared
        """
        return self._declare(
            FieldSpec(field_id, required, list(filters), list(validators), is_file=True)
        )

    def _declare(self, spec: FieldSpec) -> "ValidationGroup":
        if spec.field_id in self._fields:
            raise DuplicateFieldError(spec.field_id, group=self.name)

        self._fields[spec.field_id] = spec
        logger.debug(
            "Field declared",
            group=self.name,
            field_id=spec.field_id,
            required=spec.required,
            secure=spec.secure,
            is_file=spec.is_file,
        )
        return self

    def modify_field(
        self,
        field_id: str,
        validators: Iterable[Validator] | None = None,
        filters: Iterable[Filter] | None = None,
        required: bool | None = None,
        required_other_fields: Iterable[str] | None = None,
    ) -> "ValidationGroup":
        """
        Replace the given attributes of a declared field.

        Arguments left as None keep their current value.

        Raises:
            UnknownFieldError: If ``field_id`` is not declared
        """
        spec = self._require(field_id, "modify")

        if validators is not None:
            spec.validators = list(validators)
        if filters is not None:
            spec.filters = list(filters)
        if required is not None:
            spec.required = required
        if required_other_fields is not None:
            spec.required_other_fields = set(required_other_fields)

        return self

    def modify_field_make_optional(self, field_id: str) -> "ValidationGroup":
        self._require(field_id, "modify").required = False
        return self

    def modify_field_make_mandatory(self, field_id: str) -> "ValidationGroup":
        self._require(field_id, "modify").required = True
        return self

    def append_filter_to_filters(self, field_id: str, filter: Filter) -> "ValidationGroup":
        self._require(field_id, "append filter to").filters.append(filter)
        return self

    def prepend_filter_to_filters(self, field_id: str, filter: Filter) -> "ValidationGroup":
        self._require(field_id, "prepend filter to").filters.insert(0, filter)
        return self

    def remove_field(self, field_id: str) -> "ValidationGroup":
        self._require(field_id, "remove")
        del self._fields[field_id]
        return self

    def requires_at_least_x_fields(self, minimum: int) -> "ValidationGroup":
        """
        Require at least ``minimum`` fields to be supplied.

        Only matters when no field at all had a value during a run.

        Raises:
            InvalidArgumentError: If ``minimum`` is not a non-negative integer
        """
        if isinstance(minimum, bool) or not isinstance(minimum, int) or minimum < 0:
            raise InvalidArgumentError(
                "requires_at_least_x_fields needs a non-negative integer",
                argument="minimum",
                invalid_value=minimum,
            )
        self.minimum_required_fields = minimum
        return self

    def has_field(self, field_id: str) -> bool:
        return field_id in self._fields

    def field_ids(self) -> list[str]:
        return list(self._fields)

    def get_field(self, field_id: str) -> FieldSpec:
        return self._require(field_id, "read")

    def _require(self, field_id: str, action: str) -> FieldSpec:
        spec = self._fields.get(field_id)
        if spec is None:
            raise UnknownFieldError(field_id, action=action, group=self.name)
        return spec

    # === Validation ===

    def is_valid(
        self,
        handler: DataHandler,
        debug: bool | None = None,
        uploads: DataHandler | None = None,
    ) -> bool:
        """
        Validate input and remember the outcome on the group.

        Args:
            handler: Source of regular field values
            debug: Append the filtered value to validator failure messages
                   (defaults to settings.VALIDATION_DEBUG)
            uploads: Source of file upload fields; without it every file
                     field is treated as absent

        Returns:
            True if every check passed
        """
        outcome = self.validate(handler, debug=debug, uploads=uploads)
        self._last_outcome = outcome
        return outcome.valid

    def validate(
        self,
        handler: DataHandler,
        debug: bool | None = None,
        uploads: DataHandler | None = None,
    ) -> ValidationOutcome:
        """
        Run every field through its filters and validators.

        Does not touch the group's stored outcome, so concurrent calls on
        one group never share captured values. Validators still record
        their last error message on the instance; build a group per caller
        when failure messages must not cross between runs.

        Args:
            handler: Source of regular field values
            debug: Append the filtered value to validator failure messages
                   (defaults to settings.VALIDATION_DEBUG)
            uploads: Source of file upload fields

        Returns:
            Fresh ValidationOutcome for this run
        """
        if debug is None:
            debug = settings.VALIDATION_DEBUG

        started = time.perf_counter()
        # Snapshot, the registry may still be edited between runs
        fields = list(self._fields.values())
        outcome = ValidationOutcome(
            group=self.name,
            secure_fields=frozenset(spec.field_id for spec in fields if spec.secure),
        )

        self._run(outcome, fields, handler, uploads, debug)

        latency = time.perf_counter() - started
        reason = outcome.failure_reason.value if outcome.failure_reason else None
        record_validation(self.name, outcome.valid, reason, latency)

        if outcome.valid:
            logger.debug(
                "Validation passed",
                group=self.name,
                provided_fields=len(outcome.captured),
                latency_ms=round(latency * 1000, 3),
            )
        else:
            logger.info(
                "Validation failed",
                group=self.name,
                reason=reason,
                field_id=outcome.failed_field,
            )

        return outcome

    def _run(
        self,
        outcome: ValidationOutcome,
        fields: list[FieldSpec],
        handler: DataHandler,
        uploads: DataHandler | None,
        debug: bool,
    ) -> ValidationOutcome:
        found_value = False
        provided = 0

        for spec in fields:
            field_id = spec.field_id
            source = uploads if spec.is_file else handler
            has_value = source is not None and source.has_value(field_id)

            if spec.required and not has_value:
                return outcome.fail(
                    f'Missing required field "{field_id}"',
                    FailureReason.MISSING_REQUIRED,
                    field_id,
                )

            if not has_value:
                continue

            # Any present field counts, required or optional
            found_value = True

            original_value = source.get_value(field_id)
            filtered_value = original_value
            for value_filter in spec.filters:
                filtered_value = value_filter.filter(filtered_value)

            outcome.captured[field_id] = CapturedValues(original_value, filtered_value)

            for validator in spec.validators:
                if validator.is_valid(filtered_value):
                    continue

                message = validator.get_last_error_message() or (
                    f'The field "{field_id}" has been set but fails validation'
                )
                if debug:
                    message += DEBUG_MARKER + self._debug_value(filtered_value)
                return outcome.fail(message, FailureReason.VALIDATOR_FAILED, field_id)

            provided += 1

        if not found_value and provided < self.minimum_required_fields:
            return outcome.fail(
                f"At least {self.minimum_required_fields} field(s) are required",
                FailureReason.MINIMUM_FIELDS,
            )

        if not self.post_hook_is_valid(outcome):
            return outcome.fail(outcome.error_message, FailureReason.POST_HOOK)

        outcome.valid = True
        return outcome

    @staticmethod
    def _debug_value(value: Any) -> str:
        rendered = str(value)
        limit = settings.DEBUG_VALUE_MAX_LENGTH
        if limit and len(rendered) > limit:
            return rendered[:limit] + "..."
        return rendered

    def post_hook_is_valid(self, outcome: ValidationOutcome) -> bool:
        """
        Extension point for cross-field checks, run after every field passed.

        Override to add checks; read values with ``outcome.get_value`` and
        set ``outcome.error_message`` before returning False.

        Args:
            outcome: The in-progress outcome of the current run

        Returns:
            True to accept the run
        """
        return True

    # === Results of the latest is_valid call ===

    @property
    def last_outcome(self) -> ValidationOutcome | None:
        return self._last_outcome

    @property
    def last_error_message(self) -> str | None:
        if self._last_outcome is None:
            return None
        return self._last_outcome.error_message

    def get_last_error_message(self) -> str | None:
        return self.last_error_message

    def get_value(self, field_id: str, default: Any = None) -> Any:
        """
        Value of a field from the latest ``is_valid`` call.

        Filtered value, else original value, else ``default``. Unknown
        fields and groups that never ran return ``default``.
        """
        if self._last_outcome is None:
            return default
        return self._last_outcome.get_value(field_id, default)

    def export_values(self) -> list[dict[str, Any]]:
        """Non-secure filtered values from the latest ``is_valid`` call."""
        if self._last_outcome is None:
            return []
        return self._last_outcome.export_values()

    def as_json(self) -> str:
        if self._last_outcome is None:
            return "[]"
        return self._last_outcome.as_json()
