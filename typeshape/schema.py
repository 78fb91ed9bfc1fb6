"""
Pydantic interop for typeshape.

Provides as_model(), a parser that validates its input into a Pydantic
model and reports Pydantic's errors as a path-annotated ParseErrorSet.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .core import Parser
from .results import ParseError, ParseErrorSet, ParseResult, PathElement, Success

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)


class ModelParser(Parser[_ModelT, Any]):
    """Parser delegating to ``model.model_validate``."""

    __slots__ = ("model", "strict")

    def __init__(self, model: type[_ModelT], strict: bool | None = None):
        if not (isinstance(model, type) and issubclass(model, BaseModel)):
            raise TypeError(f"Expected a pydantic BaseModel subclass, got {model!r}")
        self.model = model
        self.strict = strict

    def parse(self, input: Any) -> ParseResult[_ModelT]:
        try:
            return Success(self.model.model_validate(input, strict=self.strict))
        except ValidationError as e:
            logger.debug(
                "%s rejected input with %d error(s)",
                self.model.__name__,
                e.error_count(),
            )
            return errors_from_pydantic(e)

    def __repr__(self) -> str:
        return f"as_model({self.model.__name__})"


def _path_element(loc: Any) -> PathElement:
    if isinstance(loc, int) and not isinstance(loc, bool):
        return loc
    return str(loc)


def errors_from_pydantic(error: ValidationError) -> ParseErrorSet:
    """
    Convert a Pydantic ValidationError into a ParseErrorSet.

    Each Pydantic error's ``loc`` becomes the path and ``msg`` the message.
    """
    return ParseErrorSet(
        tuple(
            ParseError(tuple(_path_element(loc) for loc in e["loc"]), e["msg"])
            for e in error.errors()
        )
    )


def as_model(model: type[_ModelT], strict: bool | None = None) -> Parser[_ModelT, Any]:
    """
    Parse input into an instance of a Pydantic model.

    Args:
        model: The BaseModel subclass to validate against
        strict: Passed through to model_validate (None uses the model config)

    Usage:
        class User(BaseModel):
            name: str
            age: int

        parse_array(as_model(User)).parse([{"name": "A", "age": 1}])
    """
    return ModelParser(model, strict=strict)
