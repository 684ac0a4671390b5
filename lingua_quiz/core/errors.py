"""Exceptions raised when callers break the quiz engine contract."""

from __future__ import annotations


class QuizEngineError(Exception):
    """Base class for quiz engine contract violations."""


class InvalidStateError(QuizEngineError):
    """Raised when an operation is not allowed in the attempt's current status."""


class OutOfRangeError(QuizEngineError, IndexError):
    """Raised when a question or option index is outside the quiz bounds."""


class QuizDefinitionError(ValueError):
    """Raised when a quiz definition is malformed."""
