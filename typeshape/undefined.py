"""
UNDEFINED sentinel for values that are absent rather than null.
"""

from enum import Enum


class Undefined(Enum):
    """
    Sentinel marking an absent value, distinct from ``None``.

    A mapping that lacks a key yields UNDEFINED when that key is looked up
    by a SimpleDictParser, so field parsers can tell "missing" apart from
    "present and null".

    Examples:
        as_undefined.parse(UNDEFINED)   # Success(UNDEFINED)
        as_undefined.parse(None)        # expected undefined but got object
    """

    UNDEFINED = "undefined"

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = Undefined.UNDEFINED
