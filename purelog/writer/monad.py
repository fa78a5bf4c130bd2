"""Logging Monad

A value decorated with the logging instructions that produced it.

Functions returning Logging[T] stay pure: the log is part of the result,
declared in the signature, and only an interpreter performs it."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .instruction import EMPTY, LoggingInstruction, MultiLog, combine, normalize


@dataclass(frozen=True, slots=True)
class Logging[T]:
    """Writer monad over LoggingInstruction.

    Monadic laws (logs compared with normalize):
    - Left identity: pure(a).bind(f) ≡ f(a)
    - Right identity: m.bind(pure) ≡ m
    - Associativity: m.bind(f).bind(g) ≡ m.bind(lambda x: f(x).bind(g))
    """

    log: LoggingInstruction
    result: T

    @staticmethod
    def pure[V](value: V) -> Logging[V]:
        """Lift a value into the monad with empty log."""
        return Logging(EMPTY, value)

    @staticmethod
    def tell(*entries: LoggingInstruction) -> Logging[None]:
        """Write entries to the log without producing a value."""
        return Logging(MultiLog(entries), None)

    # Functor operations

    def map[U](self, f: Callable[[T], U], /) -> Logging[U]:
        """Functor fmap - apply function to the value, preserve log."""
        return Logging(self.log, f(self.result))

    # Monad operations

    def bind[U](self, f: Callable[[T], Logging[U]], /) -> Logging[U]:
        """
        Monadic bind (>>=).

        Calls f once with the current value and appends its log after ours.
        """
        logging = f(self.result)
        return Logging(combine(self.log, logging.log), logging.result)

    then = bind

    # Writer operations

    def with_log(self, *entries: LoggingInstruction) -> Logging[T]:
        """Add entries to log without changing the value."""
        return Logging(combine(self.log, MultiLog(entries)), self.result)

    def listen(self) -> Logging[tuple[T, LoggingInstruction]]:
        """Get access to the log along with the value."""
        return Logging(self.log, (self.result, self.log))

    def censor(self, f: Callable[[LoggingInstruction], LoggingInstruction], /) -> Logging[T]:
        """Modify the log."""
        return Logging(f(self.log), self.result)

    def normalized(self) -> Logging[T]:
        return Logging(normalize(self.log), self.result)

    @property
    def description(self) -> str:
        return f"({self.log.description}, {self.result})"


# Convenience Constructors
def pure[T](value: T) -> Logging[T]:
    """Lift value into Logging with the empty (no-op) log."""
    return Logging.pure(value)


def bind[T, U](logging: Logging[T], f: Callable[[T], Logging[U]], /) -> Logging[U]:
    """Function form of Logging.bind."""
    return logging.bind(f)


__all__ = (
    "Logging",
    "pure",
    "bind",
)
