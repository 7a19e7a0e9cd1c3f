from __future__ import annotations
from typing import Any, Dict, Optional


class PuzzleError(Exception):
    """Base class for every error raised by the solver."""


class InvalidBoard(PuzzleError, ValueError):
    """Board is not a length-9 permutation of 0..8."""


class UnsolvableBoard(InvalidBoard):
    """Start and goal have different inversion parity."""


class IllegalMove(PuzzleError, AssertionError):
    """A move was applied where the blank cannot go. Always a bug."""


class SearchExhausted(PuzzleError):
    """Search stopped (iteration cap, deadline, empty frontier) before the goal."""

    def __init__(self, message: str, result: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.result = result or {}
        self.termination = self.result.get("termination")
