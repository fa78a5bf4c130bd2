"""
Pure functions with logging declared in their results.

Core building blocks for purifying side effects:
- LoggingInstruction (Info / Warn / Debug / MultiLog) describes logging
- Logging[T] pairs a value with its instruction
- bind / pure compose Logging values
- run_io interprets the instructions and returns the bare value

Example:
    from purelog import Info, Logging, Warn, run_io

    def sum_(x: int, y: int) -> Logging[int]:
        return Logging(Info(f"{x} + {y}"), x + y)

    def neg(x: int) -> Logging[int]:
        return Logging(Warn(f"Neg {x}"), -x)

    run_io(sum_(4, 5).bind(neg))  # INFO: 4 + 5 / WARN: Neg 9, returns -9
"""

# Core types
from ._types import Continuation, Formatter, Sink
from ._errors import InterpretationError

# Writer monad
from . import writer
from .writer import (
    EMPTY,
    Debug,
    Info,
    Leaf,
    Logging,
    LoggingInstruction,
    MultiLog,
    Warn,
    bind,
    combine,
    combine_all,
    flatten,
    normalize,
    pure,
)

# Interpreters
from .interpret import (
    ListSink,
    line_sink,
    logger_sink,
    print_sink,
    render_line,
    render_lines,
    run_io,
    run_io_result,
)

# Lift helpers
from . import lift

__all__ = (
    # Core types
    "Continuation",
    "Formatter",
    "Sink",
    "InterpretationError",
    # Writer monad
    "writer",
    "EMPTY",
    "Debug",
    "Info",
    "Leaf",
    "Logging",
    "LoggingInstruction",
    "MultiLog",
    "Warn",
    "bind",
    "combine",
    "combine_all",
    "flatten",
    "normalize",
    "pure",
    # Interpreters
    "ListSink",
    "line_sink",
    "logger_sink",
    "print_sink",
    "render_line",
    "render_lines",
    "run_io",
    "run_io_result",
    # Lift
    "lift",
)
