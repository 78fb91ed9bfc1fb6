"""
Tests for typeshape leaf parsers and runtime categories.
"""

from collections import OrderedDict

import pytest

from typeshape import (
    UNDEFINED,
    ParseError,
    ParseErrorSet,
    Success,
    as_array,
    as_boolean,
    as_function,
    as_null,
    as_number,
    as_object,
    as_string,
    as_undefined,
    runtime_category,
)


def _single(message: str) -> ParseErrorSet:
    return ParseErrorSet((ParseError((), message),))


class TestPrimitives:
    def test_null(self):
        assert as_null.parse(UNDEFINED) == _single("expected null but got undefined")
        assert as_null.parse(None) == Success(None)

    def test_undefined(self):
        assert as_undefined.parse(None) == _single("expected undefined but got object")
        assert as_undefined.parse(UNDEFINED) == Success(UNDEFINED)

    def test_number(self):
        assert as_number.parse(None) == _single("expected number but got object")
        assert as_number.parse(42) == Success(42)
        assert as_number.parse(1.5) == Success(1.5)

    def test_bool_is_not_a_number(self):
        assert as_number.parse(True) == _single("expected number but got boolean")
        assert as_boolean.parse(False) == Success(False)
        assert as_boolean.parse(0) == _single("expected boolean but got number")

    def test_string(self):
        assert as_string.parse("hi") == Success("hi")
        assert as_string.parse(5) == _single("expected string but got number")

    def test_array(self):
        assert as_array.parse([1]) == Success([1])
        assert as_array.parse((1,)) == Success((1,))
        assert as_array.parse("abc") == _single("expected array but got string")
        assert as_array.parse({"a": 1}) == _single("expected array but got object")

    def test_function(self):
        assert as_function.parse(len) == Success(len)
        assert as_function.parse(1) == _single("expected function but got number")


class TestIdentity:
    @pytest.mark.parametrize(
        "parser,value",
        [
            (as_array, [1, 2]),
            (as_object, {"a": 1}),
            (as_function, lambda: None),
            (as_string, "text"),
        ],
    )
    def test_success_returns_same_object(self, parser, value):
        result = parser.parse(value)
        assert isinstance(result, Success)
        assert result.value is value


class TestObjectBoundary:
    def test_mappings_accepted(self):
        od = OrderedDict(a=1)
        assert as_object.parse(od) == Success(od)

    def test_none_rejected(self):
        # None reports the "object" category but is not a mapping
        assert as_object.parse(None) == _single("expected object but got object")

    def test_list_rejected(self):
        assert as_object.parse([]) == _single("expected object but got array")


class TestRuntimeCategory:
    @pytest.mark.parametrize(
        "value,category",
        [
            (UNDEFINED, "undefined"),
            (None, "object"),
            (True, "boolean"),
            (3, "number"),
            (3.0, "number"),
            ("s", "string"),
            ([1], "array"),
            ((1,), "array"),
            (print, "function"),
            ({"a": 1}, "object"),
            (object(), "object"),
        ],
    )
    def test_categories(self, value, category):
        assert runtime_category(value) == category

    def test_arrays_report_array_in_messages(self):
        assert as_string.parse([1, 2]) == _single("expected string but got array")
        assert as_number.parse([]) == _single("expected number but got array")
