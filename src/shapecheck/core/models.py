"""Core schema models for shapecheck.

These models define the declarative contract a Validator enforces:
- Rule: the constraints applied to one field
- Schema: ordered mapping of field name to Rule
- Closed enums for declared types, runtime type tags and failure codes
"""

import re
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Enums (closed sets)
# =============================================================================


class FieldType(str, Enum):
    """Types a Rule may declare. No coercion between them."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"


class TypeTag(str, Enum):
    """Runtime classification of a value, see ``classify``."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    NULL = "null"
    UNDEFINED = "undefined"  # Key absent from the input


class FailureCode(str, Enum):
    """Which check of the field pipeline produced a failure."""

    MISSING_FIELD = "MISSING_FIELD"
    INVALID_TYPE = "INVALID_TYPE"
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    BELOW_MINIMUM = "BELOW_MINIMUM"
    ABOVE_MAXIMUM = "ABOVE_MAXIMUM"
    NOT_IN_ENUM = "NOT_IN_ENUM"
    PATTERN_MISMATCH = "PATTERN_MISMATCH"
    NESTED_INVALID = "NESTED_INVALID"
    CUSTOM = "CUSTOM"
    UNCLASSIFIED = "UNCLASSIFIED"  # Raised instead of returned


class _Missing(Enum):
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing.MISSING


# =============================================================================
# Rule / Schema
# =============================================================================


class Rule(BaseModel):
    """
    Constraints for a single field.

    Every option is optional. ``minLength``/``maxLength`` are accepted as
    aliases of ``min_length``/``max_length``. A string ``pattern`` is compiled
    on construction, and ``nested`` accepts plain dicts for sub-rules.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    required: bool = False
    type: FieldType | None = None

    # String-only
    min_length: int | None = Field(default=None, ge=0, alias="minLength")
    max_length: int | None = Field(default=None, ge=0, alias="maxLength")

    # Number-only
    min: int | float | None = None
    max: int | float | None = None

    pattern: re.Pattern | None = None
    enum: tuple[Any, ...] | None = None
    custom: Callable[[Any], str | None] | None = None
    nested: "dict[str, Rule] | None" = None


Schema = Mapping[str, Rule]


def as_rule(rule: Rule | Mapping[str, Any]) -> Rule:
    """Accept a Rule or a plain dict of rule options."""
    if isinstance(rule, Rule):
        return rule
    return Rule.model_validate(rule)


Rule.model_rebuild()
