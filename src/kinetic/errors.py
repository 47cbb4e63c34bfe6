"""Errors raised by the computation engine."""

from __future__ import annotations

INVALID_INPUT = "invalid-input"
INVALID_ANTHROPOMETRY = "invalid-anthropometry"


class ComputationError(ValueError):
    """A calculation could not be performed for the given inputs.

    Attributes:
        kind: Machine-readable error kind ("invalid-input" or
              "invalid-anthropometry")
    """

    def __init__(self, kind: str, message: str):
        super().__init__(f"{kind}: {message}")
        self.kind = kind
        self.message = message
