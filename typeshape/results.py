"""
Result types for typeshape parsers.

A parse yields exactly one of Success(value) or a non-empty ParseErrorSet.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar, Union

T = TypeVar("T")

PathElement = Union[str, int]
Path = tuple[PathElement, ...]


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Successful parse carrying the computed output."""

    value: T


@dataclass(frozen=True, slots=True)
class ParseErrorAlternatives:
    """
    Failure of every candidate shape in a one-of check.

    Keeps one ParseErrorSet per alternative attempted. No parser in this
    package builds it yet; it exists so the error tree can carry union
    failures once a one-of combinator is added.
    """

    errors: tuple[ParseErrorSet, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"alternatives": [e.to_list() for e in self.errors]}


@dataclass(frozen=True, slots=True)
class ParseError:
    """
    One failure located by its path from the root of the input.

    The path is built outermost-first: each enclosing array or record
    prepends its index or key as the error travels upward.
    """

    path: Path
    error: str | ParseErrorAlternatives

    def prepend_path(self, element: PathElement) -> ParseError:
        return ParseError((element, *self.path), self.error)

    def to_dict(self) -> dict[str, Any]:
        error = self.error
        if isinstance(error, ParseErrorAlternatives):
            return {"path": list(self.path), "error": error.to_dict()}
        return {"path": list(self.path), "error": error}


@dataclass(frozen=True, slots=True)
class ParseErrorSet:
    """Ordered, non-empty collection of ParseErrors in discovery order."""

    errors: tuple[ParseError, ...]

    def __post_init__(self) -> None:
        # Accept lists and iterables from callers but store an immutable tuple
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))
        if not self.errors:
            raise ValueError("ParseErrorSet requires at least one error")

    @classmethod
    def single(cls, message: str) -> ParseErrorSet:
        """One error with an empty path."""
        return cls((ParseError((), message),))

    def prepend_path(self, element: PathElement) -> ParseErrorSet:
        """Return a new set with ``element`` at the front of every error's path."""
        return ParseErrorSet(tuple(e.prepend_path(element) for e in self.errors))

    def to_list(self) -> list[dict[str, Any]]:
        """
        Plain-data form of the error tree for renderers.

        Returns:
            [{"path": [...], "error": str | {"alternatives": [...]}}, ...]
        """
        return [e.to_dict() for e in self.errors]

    def __iter__(self) -> Iterator[ParseError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __add__(self, other: ParseErrorSet) -> ParseErrorSet:
        if not isinstance(other, ParseErrorSet):
            return NotImplemented
        return ParseErrorSet(self.errors + other.errors)


ParseResult = Union[Success[T], ParseErrorSet]
