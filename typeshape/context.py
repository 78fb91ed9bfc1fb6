"""
Per-context parsing options.

Options live in ContextVars so that concurrent threads and asyncio tasks
parsing with the same parser instances never see each other's settings.
"""

from contextlib import contextmanager
from contextvars import ContextVar

_capture_exceptions: ContextVar[bool] = ContextVar("capture_exceptions", default=False)


def is_capturing_exceptions() -> bool:
    return _capture_exceptions.get()


@contextmanager
def parsing_context(*, capture_exceptions: bool = False):
    """
    Scope parsing options to a ``with`` block; the previous values come back on exit.

    ``capture_exceptions`` covers user code that runs mid-parse: custom()
    stages and callables wrapped by transform_function_result. Off, their
    exceptions reach the caller. On, each one is reported as a parse error
    at the path where it happened, e.g. ``["lines", 2, "qty"]`` with
    message ``"ZeroDivisionError: division by zero"``.

    Useful when parsing third-party payloads with checks that were written
    assuming well-formed input:

        ratio = SimpleDictParser({"qty": as_number.custom(lambda n: Success(10 / n))})

        with parsing_context(capture_exceptions=True):
            report = parse_array(ratio).parse(rows)
    """
    token = _capture_exceptions.set(capture_exceptions)
    try:
        yield
    finally:
        _capture_exceptions.reset(token)
