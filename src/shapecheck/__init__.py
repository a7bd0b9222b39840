"""shapecheck - Declarative, recursive data-shape validation."""

import logging

from shapecheck.config import Settings, get_settings
from shapecheck.core import (
    MISSING,
    FailureCode,
    FieldType,
    Rule,
    Schema,
    TypeTag,
    classify,
)
from shapecheck.core.validator import (
    FieldFailure,
    FieldOutcome,
    ValidationResult,
    Validator,
)
from shapecheck.logging_utils import configure_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "MISSING",
    "FailureCode",
    "FieldFailure",
    "FieldOutcome",
    "FieldType",
    "Rule",
    "Schema",
    "Settings",
    "TypeTag",
    "ValidationResult",
    "Validator",
    "classify",
    "configure_logging",
    "get_settings",
]
