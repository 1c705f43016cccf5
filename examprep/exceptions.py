"""Exception hierarchy for examprep.

Every error carries a human readable ``message`` and a ``details`` dict with
the data that produced it, so callers can log or display either.
"""

from typing import Any, Optional


class ExamPrepError(Exception):
    """Base class for all examprep errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ValidationError(ExamPrepError):
    """An exam or question violates a structural invariant."""


class ExamNotFoundError(ExamPrepError):
    """The requested exam file does not exist."""


class ExamFormatError(ExamPrepError):
    """The exam file could not be deserialized."""


class InvalidInputError(ExamPrepError):
    """User supplied input was rejected before use."""


class PathTraversalError(InvalidInputError):
    """A file name tried to escape the exam directory."""


class ConfigError(ExamPrepError):
    """A configuration value is invalid."""
