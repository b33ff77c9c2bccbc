"""
Errors raised by the estimation engine.

Both are ValueError subclasses so callers that only care about "bad input"
can catch ValueError; the HTTP layer tells them apart to pick a message.
"""

from typing import List, Optional


class EstimationError(ValueError):
    """Base class for every failure the engine reports."""


class InvalidInput(EstimationError):
    """A dimension is missing, non-numeric, non-finite, not positive or too large."""

    def __init__(self, field: str, value, reason: str = "must be a positive number"):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}: {value!r} ({reason})")


class UnknownProjectType(EstimationError):
    """The project type selector is not one of the recognized values."""

    def __init__(self, project_type, accepted: Optional[List[str]] = None):
        self.project_type = project_type
        self.accepted = accepted or []
        message = f"Unknown project type: {project_type!r}"
        if self.accepted:
            message += f". Available: {self.accepted}"
        super().__init__(message)
