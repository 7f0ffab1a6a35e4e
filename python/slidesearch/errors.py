"""Exceptions raised by the search engine.

Every condition is recoverable: callers catch it and retry with adjusted
parameters (a larger ``max_depth``, a smaller ``min_misplaced``, ...).
"""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for all sliding puzzle errors."""


class InvalidStateError(PuzzleError, ValueError):
    """A grid is not a permutation of ``0 .. rows*cols-1`` with one blank."""


class NoSolutionFound(PuzzleError):
    """The solver exhausted its search space without reaching the goal."""


class NoScrambleFound(PuzzleError):
    """The shuffler found no state with enough misplaced tiles."""
