"""Application exception hierarchy.

Every step of the review pipeline raises from this tree so that the entry
point can tell a benign halt from a real failure without string matching.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application-layer errors."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}


class WorkflowExecutionError(ApplicationError):
    """Raised when the review pipeline fails at any step."""


class WorkflowHaltedException(ApplicationError):
    """Benign early exit, e.g. the triggering event is not a pull request."""


class ConfigurationError(ApplicationError):
    """Action inputs or runner context are missing or invalid."""


class DiffParseError(ApplicationError):
    """The pull request diff could not be parsed."""


class PublishFailedError(ApplicationError):
    """The hosting API rejected the review."""
