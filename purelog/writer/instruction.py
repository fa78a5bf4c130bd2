"""
LoggingInstruction - logging described as data
===============================================

A logging instruction says what should be logged without logging it.
Leaves carry a single message; MultiLog is the monoidal accumulator
used by bind to merge the logs of composed computations:

- empty: MultiLog(())
- combine: concatenation of effective sequences (append, never reorder)

Monoid laws hold up to normalize():
- Left identity: combine(MultiLog(()), x) ~ x
- Right identity: combine(x, MultiLog(())) ~ x
- Associativity: combine(combine(x, y), z) ~ combine(x, combine(y, z))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar, assert_never


class _Instruction:
    """Shared behaviour of every logging instruction."""

    __slots__ = ()

    @property
    def description(self) -> str:
        raise NotImplementedError

    @property
    def leaves(self) -> tuple[Leaf, ...]:
        """Leaf instructions in the order an interpreter visits them."""
        return flatten(self)  # type: ignore[arg-type]

    def combine(self, other: LoggingInstruction, /) -> MultiLog:
        """
        Combine two instructions (monoidal append).

        Example:
            Info("a").combine(Warn("b"))  # MultiLog((Info("a"), Warn("b")))
        """
        return combine(self, other)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.description


class _Leaf(_Instruction):
    __slots__ = ()

    kind: ClassVar[str]
    tag: ClassVar[str]
    level: ClassVar[int]
    msg: str

    @property
    def description(self) -> str:
        return f"{self.kind}({self.msg})"


@dataclass(frozen=True, slots=True)
class Info(_Leaf):
    msg: str

    kind: ClassVar[str] = "Info"
    tag: ClassVar[str] = "INFO"
    level: ClassVar[int] = logging.INFO


@dataclass(frozen=True, slots=True)
class Warn(_Leaf):
    msg: str

    kind: ClassVar[str] = "Warn"
    tag: ClassVar[str] = "WARN"
    level: ClassVar[int] = logging.WARNING


@dataclass(frozen=True, slots=True)
class Debug(_Leaf):
    msg: str

    kind: ClassVar[str] = "Debug"
    tag: ClassVar[str] = "DEBUG"
    level: ClassVar[int] = logging.DEBUG


@dataclass(frozen=True, slots=True)
class MultiLog(_Instruction):
    """Ordered combination of instructions. MultiLog(()) logs nothing."""

    logs: tuple[LoggingInstruction, ...] = ()

    def __post_init__(self) -> None:
        # lists are accepted but never stored
        object.__setattr__(self, "logs", tuple(self.logs))

    @staticmethod
    def of(*logs: LoggingInstruction) -> MultiLog:
        """Create MultiLog with logs."""
        return MultiLog(logs)

    @property
    def description(self) -> str:
        return f"Multi({[log.description for log in self.logs]!r})"


type Leaf = Info | Warn | Debug
type LoggingInstruction = Info | Warn | Debug | MultiLog

EMPTY = MultiLog(())


def _effective(instruction: LoggingInstruction) -> tuple[LoggingInstruction, ...]:
    match instruction:
        case MultiLog(logs):
            return logs
        case Info() | Warn() | Debug():
            return (instruction,)
        case _ as unreachable:
            assert_never(unreachable)


def combine(left: LoggingInstruction, right: LoggingInstruction, /) -> MultiLog:
    """
    Merge two instructions, left first.

    Flattens one level so repeated binds do not nest:
        combine(MultiLog.of(a, b), c)  # MultiLog((a, b, c))
    """
    return MultiLog((*_effective(left), *_effective(right)))


def combine_all(instructions: Iterable[LoggingInstruction], /) -> MultiLog:
    """Fold instructions with combine, starting from EMPTY."""
    result = EMPTY
    for instruction in instructions:
        result = combine(result, instruction)
    return result


def flatten(instruction: LoggingInstruction, /) -> tuple[Leaf, ...]:
    """Leaves of an instruction, left to right, depth first.

    Walks an explicit stack, so nesting depth is not bounded by the recursion limit.
    """
    leaves: list[Leaf] = []
    pending: list[LoggingInstruction] = [instruction]
    while pending:
        node = pending.pop()
        match node:
            case MultiLog(logs):
                pending.extend(reversed(logs))
            case Info() | Warn() | Debug():
                leaves.append(node)
            case _ as unreachable:
                assert_never(unreachable)
    return tuple(leaves)


def normalize(instruction: LoggingInstruction, /) -> MultiLog:
    """Canonical form: a single MultiLog of leaves. Two instructions log the same iff their normal forms are equal."""
    return MultiLog(flatten(instruction))


__all__ = (
    "Info",
    "Warn",
    "Debug",
    "MultiLog",
    "Leaf",
    "LoggingInstruction",
    "EMPTY",
    "combine",
    "combine_all",
    "flatten",
    "normalize",
)
