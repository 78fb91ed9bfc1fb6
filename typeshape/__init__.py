"""
typeshape - composable parsers from untyped values to typed results.

Usage:
    from typeshape import SimpleDictParser, as_number, as_string, parse_array

    user = SimpleDictParser({
        "id": as_number,
        "tags": parse_array(as_string),
    })

    match user.parse(payload):
        case Success(value=value): ...
        case ParseErrorSet() as errors: ...
"""

import logging

from .combinators import (
    DictParser,
    EachParser,
    ParseAt,
    SimpleDictParser,
    TransformFunctionResult,
    parse_array,
    transform_function_result,
)
from .context import is_capturing_exceptions, parsing_context
from .core import Bind, CustomParser, Parser, bind, custom
from .leaves import (
    TypeNarrowingParser,
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
from .results import (
    ParseError,
    ParseErrorAlternatives,
    ParseErrorSet,
    ParseResult,
    Path,
    PathElement,
    Success,
)
from .schema import ModelParser, as_model, errors_from_pydantic
from .undefined import UNDEFINED, Undefined

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Result types
    "Success",
    "ParseError",
    "ParseErrorSet",
    "ParseErrorAlternatives",
    "ParseResult",
    "Path",
    "PathElement",
    # Core
    "Parser",
    "Bind",
    "CustomParser",
    "bind",
    "custom",
    # Leaves
    "TypeNarrowingParser",
    "runtime_category",
    "as_null",
    "as_undefined",
    "as_number",
    "as_boolean",
    "as_string",
    "as_array",
    "as_object",
    "as_function",
    "UNDEFINED",
    "Undefined",
    # Combinators
    "EachParser",
    "ParseAt",
    "DictParser",
    "SimpleDictParser",
    "TransformFunctionResult",
    "parse_array",
    "transform_function_result",
    # Pydantic
    "ModelParser",
    "as_model",
    "errors_from_pydantic",
    # Config
    "parsing_context",
    "is_capturing_exceptions",
]
