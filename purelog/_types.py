"""
Core type definitions for purelog.

Aliases used across the library.
"""

from __future__ import annotations

from collections.abc import Callable

from .writer import Leaf, Logging

# ============================================================================
# Type aliases
# ============================================================================

# Sink = where an interpreter writes a single leaf instruction
type Sink = Callable[[Leaf], None]

# Continuation = second argument of bind
type Continuation[T, U] = Callable[[T], Logging[U]]

# Formatter = builds a log message from the arguments of a logged function
type Formatter = Callable[..., str]

__all__ = (
    "Sink",
    "Continuation",
    "Formatter",
)
