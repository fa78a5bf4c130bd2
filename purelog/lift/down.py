"""
Lower Logging.

Functions for interpreting Logging and extracting results.
"""

from __future__ import annotations

from kungfu import Result

from .. import interpret
from .._errors import InterpretationError
from .._types import Sink
from ..writer import Logging, LoggingInstruction


def run[T](wrapped: Logging[T], sink: Sink = interpret.print_sink) -> T:
    """Perform the logging and return the value. Sink errors propagate."""
    return interpret.run_io(wrapped, sink)


def to_result[T](
    wrapped: Logging[T],
    sink: Sink = interpret.print_sink,
) -> Result[T, InterpretationError]:
    """Perform the logging, returning Ok(value) or Error(InterpretationError)."""
    return interpret.run_io_result(wrapped, sink)


def to_tuple[T](wrapped: Logging[T]) -> tuple[T, LoggingInstruction]:
    """Return (value, log) without performing anything."""
    return (wrapped.result, wrapped.log)


def discard[T](wrapped: Logging[T]) -> T:
    """Drop the log unperformed. Warning: the logging never happens!"""
    return wrapped.result


__all__ = (
    "run",
    "to_result",
    "to_tuple",
    "discard",
)
