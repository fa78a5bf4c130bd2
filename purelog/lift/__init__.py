"""
Lift helpers with semantic namespaces.

    from purelog import lift as L

Architecture:
- L.up.*    - lift values into Logging
- L.down.*  - interpret Logging into values
- L.logged  - purify plain functions

Examples:
    from purelog import Info, Warn, lift as L

    @L.logged(Info, lambda x, y: f"{x} + {y}")
    def sum_(x: int, y: int) -> int:
        return x + y

    program = sum_(4, 5).bind(lambda x: L.up.warn(f"Neg {x}", -x))
    value = L.down.run(program)  # prints INFO/WARN lines, returns -9
"""

from __future__ import annotations

from . import down, up
from .call import lifted, logged
from .down import discard, run, to_result, to_tuple
from .up import debug, info, pure, tell, warn

__all__ = (
    # Namespaces
    "up",
    "down",
    # Purify
    "logged",
    "lifted",
    # From up
    "pure",
    "tell",
    "info",
    "warn",
    "debug",
    # From down
    "run",
    "to_result",
    "to_tuple",
    "discard",
)
