"""shapecheck core - Schema models and type classification."""

from shapecheck.core.models import (
    MISSING,
    FailureCode,
    FieldType,
    Rule,
    Schema,
    TypeTag,
    as_rule,
)
from shapecheck.core.types import classify, is_empty, join_values, render_value

__all__ = [
    "MISSING",
    "FailureCode",
    "FieldType",
    "Rule",
    "Schema",
    "TypeTag",
    "as_rule",
    "classify",
    "is_empty",
    "join_values",
    "render_value",
]
