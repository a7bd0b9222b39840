"""Tests for Rule construction and type classification."""

import re

import pytest
from pydantic import ValidationError

from shapecheck import MISSING, FieldType, Rule, TypeTag, Validator, classify
from shapecheck.core import as_rule, is_empty, render_value


class TestRule:
    """Test Rule parsing and constraints."""

    def test_defaults(self) -> None:
        """Every option is optional."""
        rule = Rule()

        assert rule.required is False
        assert rule.type is None
        assert rule.nested is None

    def test_camel_case_aliases(self) -> None:
        """minLength/maxLength map onto snake_case fields."""
        rule = Rule.model_validate({"type": "string", "minLength": 2, "maxLength": 5})

        assert rule.type == FieldType.STRING
        assert rule.min_length == 2
        assert rule.max_length == 5

    def test_pattern_string_is_compiled(self) -> None:
        """A string pattern becomes a compiled regex."""
        rule = as_rule({"pattern": r"^\d+$"})

        assert isinstance(rule.pattern, re.Pattern)
        assert rule.pattern.search("123")

    def test_compiled_pattern_kept(self) -> None:
        """A compiled pattern keeps its flags."""
        rule = as_rule({"pattern": re.compile("^abc$", re.IGNORECASE)})

        assert rule.pattern.search("ABC")

    def test_enum_list_becomes_tuple(self) -> None:
        """Enum values are stored immutably."""
        assert as_rule({"enum": ["a", "b"]}).enum == ("a", "b")

    def test_nested_dicts_become_rules(self) -> None:
        """Nested schemas accept plain dicts at any depth."""
        rule = as_rule({"nested": {"a": {"nested": {"b": {"required": True}}}}})

        inner = rule.nested["a"].nested["b"]
        assert isinstance(inner, Rule)
        assert inner.required is True

    def test_as_rule_returns_rule_unchanged(self) -> None:
        """Existing Rule instances pass straight through."""
        rule = Rule(required=True)

        assert as_rule(rule) is rule

    def test_unknown_option_rejected(self) -> None:
        """Misspelled options fail at construction."""
        with pytest.raises(ValidationError):
            Rule.model_validate({"requird": True})

    def test_unknown_type_rejected(self) -> None:
        """Only the five declared types are accepted."""
        with pytest.raises(ValidationError):
            Rule.model_validate({"type": "integer"})

    def test_negative_length_rejected(self) -> None:
        """Length bounds cannot be negative."""
        with pytest.raises(ValidationError):
            Rule.model_validate({"minLength": -1})

    def test_custom_must_be_callable(self) -> None:
        """custom only accepts callables."""
        with pytest.raises(ValidationError):
            Rule.model_validate({"custom": "not callable"})

    def test_rule_is_frozen(self) -> None:
        """Rules cannot be modified after construction."""
        rule = Rule(required=True)

        with pytest.raises(ValidationError):
            rule.required = False  # type: ignore[misc]

    def test_bad_schema_fails_at_construction(self) -> None:
        """Invalid rules surface when the Validator is built."""
        with pytest.raises(ValidationError):
            Validator({"a": {"type": "integer"}})


class TestClassify:
    """Test runtime type tags."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (MISSING, TypeTag.UNDEFINED),
            (None, TypeTag.NULL),
            (True, TypeTag.BOOLEAN),
            (0, TypeTag.NUMBER),
            (1.5, TypeTag.NUMBER),
            (float("nan"), TypeTag.NUMBER),
            ("", TypeTag.STRING),
            ([], TypeTag.ARRAY),
            ((1,), TypeTag.ARRAY),
            (b"raw", TypeTag.ARRAY),
            (bytearray(b"raw"), TypeTag.ARRAY),
            ({}, TypeTag.OBJECT),
            (object(), TypeTag.OBJECT),
        ],
    )
    def test_classify(self, value: object, expected: TypeTag) -> None:
        """Values map onto the closed tag set."""
        assert classify(value) is expected

    def test_is_empty(self) -> None:
        """Only absent, None and "" are empty."""
        assert is_empty(MISSING)
        assert is_empty(None)
        assert is_empty("")
        assert not any(is_empty(v) for v in (0, False, [], {}, " "))

    def test_missing_is_falsy(self) -> None:
        """MISSING behaves like an absent value in conditions."""
        assert not MISSING
        assert repr(MISSING) == "MISSING"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (True, "true"),
            (False, "false"),
            (None, "null"),
            (18.0, "18"),
            (0.5, "0.5"),
            ([1, "a", None], "1,a,"),
            ("text", "text"),
        ],
    )
    def test_render_value(self, value: object, expected: str) -> None:
        """Rendering used by messages and pattern matching."""
        assert render_value(value) == expected
