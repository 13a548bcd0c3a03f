"""
sokuza/errors.py - Fault kinds raised by the engine

Unification failure is not an error: it is the ``None`` store returned by
``unify`` and the empty list returned by goals. Exceptions are reserved for
callers breaking the term contract.
"""
from __future__ import annotations

from typing import Any


class SokuzaError(Exception):
    """Base class for engine errors."""


class InvalidTermShapeError(SokuzaError, TypeError):
    """Raised when a term does not have the shape an operation requires.

    Example:
        car(Atom(1))  # expected a pair, got an atom
    """

    def __init__(self, term: Any, expected: str):
        self.term = term
        self.expected = expected
        super().__init__(f"Expected {expected}, got {term!r}")


class SerializationError(SokuzaError, ValueError):
    """Raised when persisted term or store data cannot be decoded."""
