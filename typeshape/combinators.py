"""
Aggregating combinators: arrays, records and function results.

Array and record parsers attempt every element or field and report all
failures together, prepending the index or key to each error's path.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, TypeVar

from .core import Input, Output, Parser, call_guarded
from .leaves import as_array, as_function, as_object
from .results import ParseError, ParseErrorSet, ParseResult, Success
from .undefined import UNDEFINED

R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class EachParser(Parser[list[Output], Sequence[Any]]):
    """Applies one parser to every element of an already-checked array."""

    p: Parser[Output, Any]

    def parse(self, inputs: Sequence[Any]) -> ParseResult[list[Output]]:
        errors: list[ParseError] = []
        results: list[Output] = []

        for i, item in enumerate(inputs):
            match self.p.parse(item):
                case ParseErrorSet() as item_errors:
                    errors.extend(item_errors.prepend_path(i))
                case Success(value=value):
                    results.append(value)

        if errors:
            return ParseErrorSet(tuple(errors))
        return Success(results)


@dataclass(frozen=True, slots=True)
class ParseAt(Parser[Output, Any]):
    """Looks up ``key`` (UNDEFINED when absent) in a mapping and parses that value."""

    key: str
    p: Parser[Output, Any]

    def parse(self, input: Any) -> ParseResult[Output]:
        match as_object.parse(input):
            case ParseErrorSet() as errors:
                return errors
            case Success(value=mapping):
                return self.p.parse(mapping.get(self.key, UNDEFINED))
        raise TypeError("as_object returned a non-result")


def _check_fields(fields: Any) -> None:
    if not isinstance(fields, Mapping):
        raise TypeError(f"Fields must be a mapping, got {type(fields).__name__}")
    for key, p in fields.items():
        if not isinstance(key, str):
            raise TypeError(f"Field names must be str, got {key!r}")
        if not isinstance(p, Parser):
            raise TypeError(f"Field {key!r} must be a Parser, got {type(p).__name__}")


class DictParser(Parser[dict[str, Any], Input]):
    """
    Record parser where every field parser sees the whole input.

    A field's result may therefore be derived from several source keys.
    All fields are attempted; on any failure the errors of every failing
    field are returned with the field name prepended, in declaration order.
    On success the output holds exactly the declared keys.

    Usage:
        full_name = custom(lambda d: Success(f"{d['first']} {d['last']}"))
        DictParser({"name": full_name, "age": ParseAt("age", as_number)})
    """

    __slots__ = ("fields",)

    def __init__(self, fields: Mapping[str, Parser[Any, Any]]):
        _check_fields(fields)
        self.fields: Mapping[str, Parser[Any, Any]] = MappingProxyType(dict(fields))

    def parse(self, input: Input) -> ParseResult[dict[str, Any]]:
        errors: list[ParseError] = []
        result: dict[str, Any] = {}

        for key, p in self.fields.items():
            match p.parse(input):
                case ParseErrorSet() as field_errors:
                    errors.extend(field_errors.prepend_path(key))
                case Success(value=value):
                    result[key] = value

        if errors:
            return ParseErrorSet(tuple(errors))
        return Success(result)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.fields)!r})"


class SimpleDictParser(DictParser[Mapping[str, Any]]):
    """
    Record parser where each field parser sees only the value at its own key.

    The input must be a mapping. A missing key is passed to its field parser
    as UNDEFINED. Keys that are not declared are ignored.

    Usage:
        SimpleDictParser({"id": as_number, "name": as_string})
    """

    __slots__ = ("source_fields",)

    def __init__(self, fields: Mapping[str, Parser[Any, Any]]):
        _check_fields(fields)
        super().__init__({k: ParseAt(k, p) for k, p in fields.items()})
        self.source_fields: Mapping[str, Parser[Any, Any]] = MappingProxyType(
            dict(fields)
        )

    def parse(self, input: Any) -> ParseResult[dict[str, Any]]:
        match as_object.parse(input):
            case ParseErrorSet() as errors:
                return errors
            case Success(value=mapping):
                return super().parse(mapping)
        raise TypeError("as_object returned a non-result")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.source_fields)!r})"


@dataclass(frozen=True, slots=True)
class TransformFunctionResult(Parser[Callable[..., ParseResult[R]], Any]):
    """Wraps a callable so each call returns a parsed result."""

    p: Parser[R, Any]

    def parse(self, fn: Callable[..., Any]) -> ParseResult[Callable[..., ParseResult[R]]]:
        p = self.p

        def wrapper(*args: Any, **kwargs: Any) -> ParseResult[R]:
            match call_guarded(fn, *args, **kwargs):
                case ParseErrorSet() as errors:
                    return errors
                case Success(value=value):
                    return p.parse(value)
            raise TypeError("call_guarded returned a non-result")

        return Success(wrapper)


def parse_array(p: Parser[Output, Any]) -> Parser[list[Output], Any]:
    """
    Parse an array, applying ``p`` to every element.

    Usage:
        parse_array(as_number).parse([1, 2, "x"])
        # ParseErrorSet: [2] expected number but got string
    """
    if not isinstance(p, Parser):
        raise TypeError(f"parse_array() needs a Parser, got {type(p).__name__}")
    return as_array.bind(EachParser(p))


def transform_function_result(p: Parser[R, Any]) -> Parser[Callable[..., ParseResult[R]], Any]:
    """
    Parse a callable into one whose every return value is parsed by ``p``.

    Usage:
        get_count = transform_function_result(as_number).parse(fn).value
        get_count()   # Success(5) or ParseErrorSet
    """
    if not isinstance(p, Parser):
        raise TypeError(
            f"transform_function_result() needs a Parser, got {type(p).__name__}"
        )
    return as_function.bind(TransformFunctionResult(p))
