"""Validator - Schema-driven field validation."""

from shapecheck.core.validator.validator import (
    FieldFailure,
    FieldOutcome,
    ValidationResult,
    Validator,
)

__all__ = ["FieldFailure", "FieldOutcome", "ValidationResult", "Validator"]
