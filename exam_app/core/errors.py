"""Errors raised by the exam core."""

from __future__ import annotations


class ExamError(Exception):
    """Base class for all exam domain errors."""


class LoadError(ExamError):
    """Raised when the question set cannot be retrieved or is unusable."""


class InvalidStateError(ExamError, RuntimeError):
    """Raised when an operation is not allowed in the current phase."""


class IndexOutOfRangeError(ExamError, IndexError):
    """Raised when a jump targets a question index outside the test."""


class InvalidAnswerError(ExamError, ValueError):
    """Raised when an answer names an unknown question or option."""
