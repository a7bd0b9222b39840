"""
Validator - Declarative, recursive data-shape validation.

The validator walks a schema field by field and applies a fixed pipeline
of checks to each value:
1. Presence - required / optional-empty
2. Type - declared type must match the runtime type tag exactly
3. Constraints - length, range, enum, pattern
4. Nested schema, then custom function

Each field reports at most one error (the first failing check), and a
failure in one field never stops validation of the others.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from shapecheck.config import Settings, get_settings
from shapecheck.core.models import (
    MISSING,
    FailureCode,
    FieldType,
    Rule,
    TypeTag,
    as_rule,
)
from shapecheck.core.types import classify, is_empty, join_values, render_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldFailure:
    """A single failed check."""

    field: str
    message: str
    code: FailureCode


@dataclass(frozen=True)
class FieldOutcome:
    """Result of the field pipeline: a resolved value or a failure."""

    value: Any = None
    failure: FieldFailure | None = None

    @classmethod
    def success(cls, value: Any) -> "FieldOutcome":
        return cls(value=value)

    @classmethod
    def fail(cls, field_name: str, message: str, code: FailureCode) -> "FieldOutcome":
        return cls(failure=FieldFailure(field=field_name, message=message, code=code))


@dataclass
class ValidationResult:
    """Result of validation."""

    errors: list[str] = field(default_factory=list)
    validated_data: dict[str, Any] = field(default_factory=dict)
    failures: list[FieldFailure] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True iff no errors were produced."""
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form: ``isValid``, ``errors``, ``validatedData``."""
        return {
            "isValid": self.is_valid,
            "errors": list(self.errors),
            "validatedData": dict(self.validated_data),
        }


class Validator:
    """
    Validate arbitrary objects against a schema.

    The schema is copied on construction and never changes afterwards,
    so one Validator can be shared between callers and threads.
    """

    def __init__(
        self,
        schema: Mapping[str, Rule | Mapping[str, Any]],
        settings: Settings | None = None,
    ):
        self._schema: Mapping[str, Rule] = MappingProxyType(
            {name: as_rule(rule) for name, rule in schema.items()}
        )
        # Resolved on first logged failure, never at construction
        self._settings = settings

    @property
    def schema(self) -> Mapping[str, Rule]:
        """Read-only view of the normalized schema."""
        return self._schema

    def validate(self, data: Any) -> ValidationResult:
        """
        Validate data against the schema.

        Args:
            data: Mapping (or any object with attributes) to check

        Returns:
            ValidationResult with one validated_data entry per schema field
        """
        result = ValidationResult()

        for field_name, rule in self._schema.items():
            try:
                value = self._read(data, field_name)
                outcome = self.validate_field(field_name, value, rule)
            except Exception as e:
                logger.warning(f"Unhandled error validating field {field_name}: {e!r}", exc_info=True)
                outcome = FieldOutcome.fail(
                    field_name,
                    str(e) or f"Validation failed for field: {field_name}",
                    FailureCode.UNCLASSIFIED,
                )

            if outcome.failure is not None:
                if self._log_failures():
                    logger.debug(
                        f"Field {field_name} failed [{outcome.failure.code.value}]: "
                        f"{outcome.failure.message}"
                    )
                result.failures.append(outcome.failure)
                result.errors.append(outcome.failure.message)
                result.validated_data[field_name] = None
            else:
                result.validated_data[field_name] = (
                    None if outcome.value is MISSING else outcome.value
                )

        return result

    def validate_field(self, field_name: str, value: Any, rule: Rule) -> FieldOutcome:
        """Run the check pipeline for one field, stopping at the first failure."""
        empty = is_empty(value)

        if rule.required and empty:
            return FieldOutcome.fail(
                field_name, f"{field_name} is required", FailureCode.MISSING_FIELD
            )

        if empty:
            return FieldOutcome.success(value)

        actual = classify(value)

        if rule.type is not None and actual.value != rule.type.value:
            return FieldOutcome.fail(
                field_name,
                f"{field_name} must be of type {rule.type.value}",
                FailureCode.INVALID_TYPE,
            )

        if rule.type is FieldType.STRING:
            outcome = self._check_string(field_name, value, rule)
            if outcome is not None:
                return outcome

        if rule.type is FieldType.NUMBER:
            outcome = self._check_number(field_name, value, rule)
            if outcome is not None:
                return outcome

        if rule.enum is not None and not self._is_member(value, rule.enum):
            options = join_values(rule.enum, ", ")
            return FieldOutcome.fail(
                field_name,
                f"{field_name} must be one of: {options}",
                FailureCode.NOT_IN_ENUM,
            )

        # Applies whatever the declared type, against the rendered value
        if rule.pattern is not None and not rule.pattern.search(render_value(value)):
            return FieldOutcome.fail(
                field_name, f"{field_name} format is invalid", FailureCode.PATTERN_MISMATCH
            )

        if rule.nested is not None and actual is TypeTag.OBJECT:
            # Built per call, not cached
            nested_result = Validator(rule.nested, settings=self._settings).validate(value)
            if not nested_result.is_valid:
                return FieldOutcome.fail(
                    field_name,
                    f"{field_name}: {', '.join(nested_result.errors)}",
                    FailureCode.NESTED_INVALID,
                )
            # Custom check does not run for a valid nested object
            return FieldOutcome.success(nested_result.validated_data)

        if rule.custom is not None:
            message = rule.custom(value)
            if message:
                return FieldOutcome.fail(field_name, message, FailureCode.CUSTOM)

        return FieldOutcome.success(value)

    def _check_string(self, field_name: str, value: str, rule: Rule) -> FieldOutcome | None:
        """Validate string length bounds."""
        if rule.min_length is not None and len(value) < rule.min_length:
            return FieldOutcome.fail(
                field_name,
                f"{field_name} must be at least {rule.min_length} characters",
                FailureCode.TOO_SHORT,
            )
        if rule.max_length is not None and len(value) > rule.max_length:
            return FieldOutcome.fail(
                field_name,
                f"{field_name} must not exceed {rule.max_length} characters",
                FailureCode.TOO_LONG,
            )
        return None

    def _check_number(self, field_name: str, value: Any, rule: Rule) -> FieldOutcome | None:
        """Validate numeric range bounds (inclusive)."""
        if rule.min is not None and value < rule.min:
            return FieldOutcome.fail(
                field_name,
                f"{field_name} must be greater than or equal to {render_value(rule.min)}",
                FailureCode.BELOW_MINIMUM,
            )
        if rule.max is not None and value > rule.max:
            return FieldOutcome.fail(
                field_name,
                f"{field_name} must be less than or equal to {render_value(rule.max)}",
                FailureCode.ABOVE_MAXIMUM,
            )
        return None

    def _log_failures(self) -> bool:
        """Whether field failures are logged. Bad environment settings disable it."""
        if not logger.isEnabledFor(logging.DEBUG):
            return False
        if self._settings is None:
            try:
                self._settings = get_settings()
            except ValidationError as e:
                logger.warning(f"Ignoring invalid SHAPECHECK_* settings: {e}")
                return False
        return self._settings.log_failures

    @staticmethod
    def _is_member(value: Any, options: tuple[Any, ...]) -> bool:
        """Enum membership without bool/int crossover (True is not 1). NaN matches NaN."""
        tag = classify(value)
        if tag is TypeTag.NUMBER and value != value:
            return any(
                classify(option) is tag and option != option for option in options
            )
        return any(classify(option) is tag and option == value for option in options)

    @staticmethod
    def _read(data: Any, field_name: str) -> Any:
        """Read a field from a mapping or an attribute-bearing object."""
        if data is None:
            return MISSING
        if isinstance(data, Mapping):
            return data.get(field_name, MISSING)
        return getattr(data, field_name, MISSING)
