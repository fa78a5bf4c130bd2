"""
Purify functions.

Decorators turning plain functions into functions returning Logging.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from .._types import Continuation, Formatter
from ..writer import Leaf, Logging


def logged[T, **P](
    kind: Callable[[str], Leaf],
    message: Formatter,
) -> Callable[[Callable[P, T]], Callable[P, Logging[T]]]:
    """
    Decorator declaring the logging of a pure function in its result.

    message receives the same arguments as the decorated function.

    Example:
        from purelog import Info, lift as L

        @L.logged(Info, lambda x, y: f"{x} + {y}")
        def sum_(x: int, y: int) -> int:
            return x + y

        sum_(4, 5)  # Logging(Info("4 + 5"), 9)
    """

    def decorator(func: Callable[P, T]) -> Callable[P, Logging[T]]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Logging[T]:
            return Logging(kind(message(*args, **kwargs)), func(*args, **kwargs))

        return wrapper

    return decorator


def lifted[T, U](func: Callable[[T], U]) -> Continuation[T, U]:
    """
    Turn a plain unary function into a continuation with empty log.

    Lets non-logging steps take part in bind chains:
        sum_(4, 5).bind(L.lifted(abs))
    """

    @wraps(func)
    def wrapper(value: T) -> Logging[U]:
        return Logging.pure(func(value))

    return wrapper


__all__ = (
    "logged",
    "lifted",
)
