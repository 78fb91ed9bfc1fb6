"""
Core parser classes for typeshape.

Provides the Parser base class with sequential composition (bind) and
ad hoc stages (custom), plus the fluent leaf accessors.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .context import is_capturing_exceptions
from .results import ParseErrorSet, ParseResult, Success

logger = logging.getLogger(__name__)

Input = TypeVar("Input")
Output = TypeVar("Output")
O2 = TypeVar("O2")


class Parser(ABC, Generic[Output, Input]):
    """
    A reusable check-and-convert step.

    Subclasses implement parse(), which must return Success or a
    ParseErrorSet and never raise for invalid input. Parsers hold no
    mutable state, so one instance can be shared freely.
    """

    __slots__ = ()

    @abstractmethod
    def parse(self, input: Input) -> ParseResult[Output]:
        ...

    def __call__(self, input: Input) -> ParseResult[Output]:
        return self.parse(input)

    def bind(self, p2: Parser[O2, Output]) -> Parser[O2, Input]:
        """
        Run this parser, then feed its success value into ``p2``.

        If this parser fails, ``p2`` is never run and the errors are
        returned unchanged.
        """
        return bind(self, p2)

    def __rshift__(self, p2: Parser[O2, Output]) -> Parser[O2, Input]:
        """
        Usage:
            as_number >> custom(check_positive)
        """
        return self.bind(p2)

    def custom(self, f: Callable[[Output], ParseResult[O2]]) -> Parser[O2, Input]:
        return self.bind(custom(f))

    # Fluent leaf accessors: each is bind() with a fixed leaf parser

    def as_null(self) -> Parser[None, Input]:
        from .leaves import as_null

        return self.bind(as_null)

    def as_undefined(self) -> Parser[Any, Input]:
        from .leaves import as_undefined

        return self.bind(as_undefined)

    def as_number(self) -> Parser[int | float, Input]:
        from .leaves import as_number

        return self.bind(as_number)

    def as_boolean(self) -> Parser[bool, Input]:
        from .leaves import as_boolean

        return self.bind(as_boolean)

    def as_string(self) -> Parser[str, Input]:
        from .leaves import as_string

        return self.bind(as_string)

    def as_array(self) -> Parser[Any, Input]:
        from .leaves import as_array

        return self.bind(as_array)

    def as_object(self) -> Parser[Any, Input]:
        from .leaves import as_object

        return self.bind(as_object)

    def as_function(self) -> Parser[Callable[..., Any], Input]:
        from .leaves import as_function

        return self.bind(as_function)

    def parse_array(self, p: Parser[O2, Any]) -> Parser[list[O2], Input]:
        from .combinators import parse_array

        return self.bind(parse_array(p))

    def transform_function_result(
        self, p: Parser[O2, Any]
    ) -> Parser[Callable[..., ParseResult[O2]], Input]:
        from .combinators import transform_function_result

        return self.bind(transform_function_result(p))


@dataclass(frozen=True, slots=True)
class Bind(Parser[Output, Input]):
    """Sequential composition; not an aggregation boundary."""

    p1: Parser[Any, Input]
    p2: Parser[Output, Any]

    def parse(self, input: Input) -> ParseResult[Output]:
        match self.p1.parse(input):
            case ParseErrorSet() as errors:
                return errors
            case Success(value=value):
                return self.p2.parse(value)
        raise TypeError(f"{self.p1!r} returned a non-result")


@dataclass(frozen=True, slots=True)
class CustomParser(Parser[Output, Input]):
    """Lifts a function returning a ParseResult into a parser."""

    f: Callable[[Input], ParseResult[Output]]

    def parse(self, input: Input) -> ParseResult[Output]:
        outcome = call_guarded(self.f, input)
        if isinstance(outcome, ParseErrorSet):
            return outcome

        result = outcome.value
        if not isinstance(result, (Success, ParseErrorSet)):
            raise TypeError(
                "custom parser function must return Success or ParseErrorSet, "
                f"got {type(result).__name__}"
            )
        return result


def bind(p1: Parser[Any, Input], p2: Parser[Output, Any]) -> Parser[Output, Input]:
    """Compose two parsers; fail-fast on the first."""
    for p in (p1, p2):
        if not isinstance(p, Parser):
            raise TypeError(f"Cannot bind {type(p).__name__}, expected a Parser")
    return Bind(p1, p2)


def custom(f: Callable[[Input], ParseResult[Output]]) -> Parser[Output, Input]:
    """
    Create a parser from a function returning Success or ParseErrorSet.

    Usage:
        def in_range(x):
            if 0 <= x <= 100:
                return Success(x)
            return ParseErrorSet.single(f"{x} is out of range")

        percent = as_number.custom(in_range)
    """
    if not callable(f):
        raise TypeError(f"custom() needs a callable, got {type(f).__name__}")
    return CustomParser(f)


def call_guarded(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> ParseResult[Any]:
    """
    Call user code, wrapping its return value in Success.

    Exceptions propagate unless parsing_context(capture_exceptions=True)
    is active, in which case they become a single root-path ParseError.
    """
    if not is_capturing_exceptions():
        return Success(fn(*args, **kwargs))

    try:
        return Success(fn(*args, **kwargs))
    except Exception as e:
        logger.debug("Captured exception from %r", fn, exc_info=True)
        return ParseErrorSet.single(f"{type(e).__name__}: {e}")
