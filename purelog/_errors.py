from __future__ import annotations

from .writer import Leaf


class InterpretationError(Exception):
    """Sink failed while an interpreter was writing an instruction."""

    instruction: Leaf
    cause: OSError

    def __init__(self, instruction: Leaf, cause: OSError) -> None:
        self.instruction = instruction
        self.cause = cause
        super().__init__(f"Failed to write {instruction.description}: {cause}")


__all__ = ("InterpretationError",)
