"""
Leaf parsers for typeshape.

Each leaf narrows an untyped value to one primitive category and returns
the input itself on success.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

from .core import Input, Output, Parser
from .results import ParseErrorSet, ParseResult, Success
from .undefined import UNDEFINED


def runtime_category(x: Any) -> str:
    """
    Coarse dynamic category of a value, used in leaf failure messages.

    None reports "object" (as a null reference does in JSON-style type
    reflection), lists and tuples report "array", any other callable
    reports "function", and every remaining value reports "object".
    """
    if x is UNDEFINED:
        return "undefined"
    if x is None:
        return "object"
    if isinstance(x, bool):
        return "boolean"
    if isinstance(x, (int, float)):
        return "number"
    if isinstance(x, str):
        return "string"
    if isinstance(x, (list, tuple)):
        return "array"
    if callable(x):
        return "function"
    return "object"


@dataclass(frozen=True, slots=True)
class TypeNarrowingParser(Parser[Output, Input]):
    """Predicate-based leaf: Success(x) if ``check(x)``, else one error."""

    type_name: str
    check: Callable[[Any], bool]

    def parse(self, input: Input) -> ParseResult[Output]:
        if self.check(input):
            return Success(input)
        return ParseErrorSet.single(
            f"expected {self.type_name} but got {runtime_category(input)}"
        )

    def __repr__(self) -> str:
        return f"as_{self.type_name}"


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


as_null: Parser[None, Any] = TypeNarrowingParser("null", lambda x: x is None)

as_undefined: Parser[Any, Any] = TypeNarrowingParser(
    "undefined", lambda x: x is UNDEFINED
)

as_number: Parser[int | float, Any] = TypeNarrowingParser("number", _is_number)

as_boolean: Parser[bool, Any] = TypeNarrowingParser(
    "boolean", lambda x: isinstance(x, bool)
)

as_string: Parser[str, Any] = TypeNarrowingParser(
    "string", lambda x: isinstance(x, str)
)

as_array: Parser[list | tuple, Any] = TypeNarrowingParser(
    "array", lambda x: isinstance(x, (list, tuple))
)

# None is rejected here even though its category word is "object"
as_object: Parser[Mapping[str, Any], Any] = TypeNarrowingParser(
    "object", lambda x: isinstance(x, Mapping)
)

as_function: Parser[Callable[..., Any], Any] = TypeNarrowingParser(
    "function", callable
)
