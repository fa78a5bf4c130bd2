"""
Writer Monad
============

Logging[T] - a value paired with the LoggingInstruction describing
the logging it requires:
- Info / Warn / Debug (single messages)
- MultiLog (ordered combination, MultiLog(()) is the empty log)

Pure producers return Logging values; bind composes them and merges logs.
"""

from .instruction import (
    EMPTY,
    Debug,
    Info,
    Leaf,
    LoggingInstruction,
    MultiLog,
    Warn,
    combine,
    combine_all,
    flatten,
    normalize,
)
from .monad import Logging, bind, pure

__all__ = (
    "EMPTY",
    "Debug",
    "Info",
    "Leaf",
    "LoggingInstruction",
    "MultiLog",
    "Warn",
    "combine",
    "combine_all",
    "flatten",
    "normalize",
    "Logging",
    "bind",
    "pure",
)
