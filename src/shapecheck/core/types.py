"""
Value classification shared by the type check and the nested check.

Python's own type hierarchy is not the classification the validator needs:
``bool`` is a subclass of ``int`` and both ``list`` and ``dict`` are just
containers. ``classify`` maps any value onto the closed ``TypeTag`` set.
"""

import numbers
from typing import Any

from shapecheck.core.models import MISSING, TypeTag


def classify(value: Any) -> TypeTag:
    """Return the runtime type tag of a value."""
    if value is MISSING:
        return TypeTag.UNDEFINED
    if value is None:
        return TypeTag.NULL
    # bool before number, bool is an int subclass
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, numbers.Real):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, (list, tuple, bytes, bytearray)):
        return TypeTag.ARRAY
    return TypeTag.OBJECT


def is_empty(value: Any) -> bool:
    """Absent, None and "" are empty. 0, False, [] and {} are not."""
    return value is MISSING or value is None or (isinstance(value, str) and value == "")


def render_value(value: Any) -> str:
    """
    Render a value for error messages and pattern matching.

    Booleans and None render as ``true``/``false``/``null``, integral floats
    drop the trailing ``.0`` and sequences are comma-joined.
    """
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return join_values(value, ",")
    return str(value)


def join_values(values: Any, separator: str) -> str:
    """Join rendered values. None and MISSING items render as empty strings."""
    return separator.join(
        "" if item is None or item is MISSING else render_value(item) for item in values
    )
