"""
Interpreters for Logging.

The interpreter is the only place where logging instructions are
executed. Everything else builds descriptions.

Leaves are written left to right, depth first, which is the order
bind appended them in. Each leaf becomes one line "<TAG>: <msg>".
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from kungfu import Error, Ok, Result

from ._errors import InterpretationError
from ._types import Sink
from .writer import Leaf, Logging, flatten


def render_line(instruction: Leaf) -> str:
    """Text written for one leaf, e.g. "INFO: 4 + 5"."""
    return f"{instruction.tag}: {instruction.msg}"


def render_lines[T](wrapped: Logging[T]) -> list[str]:
    """Lines run_io would write, without writing them."""
    return [render_line(instruction) for instruction in flatten(wrapped.log)]


# ============================================================================
# Sinks
# ============================================================================


def line_sink(write: Callable[[str], None]) -> Sink:
    """
    Adapt any line writer into a Sink.

    Example:
        lines: list[str] = []
        run_io(program, sink=line_sink(lines.append))
    """

    def sink(instruction: Leaf) -> None:
        write(render_line(instruction))

    return sink


print_sink: Sink = line_sink(print)


class ListSink:
    """
    Sink collecting rendered lines in memory.

    Example:
        sink = ListSink()
        run_io(program, sink=sink)
        sink.lines  # ["INFO: 4 + 5", "WARN: Neg 9"]
    """

    __slots__ = ("lines",)

    def __init__(self) -> None:
        self.lines: list[str] = []

    def __call__(self, instruction: Leaf) -> None:
        self.lines.append(render_line(instruction))

    def __repr__(self) -> str:
        return f"ListSink({self.lines!r})"


def logger_sink(logger: logging.Logger | None = None) -> Sink:
    """
    Route instructions into stdlib logging.

    Info -> logger.info, Warn -> logger.warning, Debug -> logger.debug.
    The tag is dropped from the message since the record level carries it.
    """
    target = logger if logger is not None else logging.getLogger("purelog")

    def sink(instruction: Leaf) -> None:
        target.log(instruction.level, instruction.msg)

    return sink


# ============================================================================
# Interpreters
# ============================================================================


def run_io[T](wrapped: Logging[T], sink: Sink = print_sink) -> T:
    """
    Perform the logging and return the bare value.

    Whatever the sink raises propagates and no further leaves are written.
    """
    for instruction in flatten(wrapped.log):
        sink(instruction)
    return wrapped.result


def run_io_result[T](
    wrapped: Logging[T],
    sink: Sink = print_sink,
) -> Result[T, InterpretationError]:
    """
    Like run_io, but an OSError from the sink becomes Error(InterpretationError).

    Stops at the failing leaf. Other exceptions propagate.
    """
    for instruction in flatten(wrapped.log):
        try:
            sink(instruction)
        except OSError as exc:
            return Error(InterpretationError(instruction, exc))
    return Ok(wrapped.result)


__all__ = (
    "render_line",
    "render_lines",
    "line_sink",
    "ListSink",
    "print_sink",
    "logger_sink",
    "run_io",
    "run_io_result",
)
