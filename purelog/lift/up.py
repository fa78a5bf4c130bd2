"""
Lift values into Logging.

Functions for turning plain values and messages into Logging[T].
"""

from __future__ import annotations

from collections.abc import Iterable

from ..writer import Debug, Info, Logging, LoggingInstruction, MultiLog, Warn


def pure[T](
    value: T,
    *,
    log: Iterable[LoggingInstruction] | None = None,
) -> Logging[T]:
    """
    Lift value into Logging with optional log.

    Without log this is the monadic unit: the log is MultiLog(()).

    Example:
        from purelog import lift as L

        L.up.pure(10)  # Logging(MultiLog(()), 10)
    """
    return Logging(MultiLog(tuple(log or ())), value)


def tell(*entries: LoggingInstruction) -> Logging[None]:
    """Create Logging with only log, no value."""
    return Logging.tell(*entries)


def info[T](msg: str, value: T) -> Logging[T]:
    """
    Decorate value with an Info instruction.

    Example:
        def sum_(x: int, y: int) -> Logging[int]:
            return L.up.info(f"{x} + {y}", x + y)
    """
    return Logging(Info(msg), value)


def warn[T](msg: str, value: T) -> Logging[T]:
    """Decorate value with a Warn instruction."""
    return Logging(Warn(msg), value)


def debug[T](msg: str, value: T) -> Logging[T]:
    return Logging(Debug(msg), value)


__all__ = (
    "pure",
    "tell",
    "info",
    "warn",
    "debug",
)
