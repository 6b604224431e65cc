"""
Error types for the notation core.

Every failure in the core is a deterministic, pure-function failure:
nothing is retried or recovered internally.
"""

from __future__ import annotations


class NotationError(Exception):
    """Base class for all notation errors."""


class DomainError(NotationError, ValueError):
    """A value was constructed or parsed outside its valid range."""


class SpellingError(NotationError):
    """
    No accidental in [-2, +2] reproduces the required pitch class.

    Raised by interval shifting when the letter distance (from the interval
    degree) and the semitone distance cannot be reconciled, e.g. a double
    sharp shifted up by an augmented interval.
    """

    def __init__(self, message: str, note: object = None, interval: object = None) -> None:
        super().__init__(message)
        self.note = note
        self.interval = interval


class CatalogError(NotationError):
    """A chord catalog file is missing, unreadable or fails validation."""
