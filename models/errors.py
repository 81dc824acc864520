"""Errors raised by the maintenance request workflow and its collaborators."""

from typing import Optional


class WorkflowError(Exception):
    """Base class for maintenance request workflow errors."""


class ValidationError(WorkflowError):
    """No maintenance task was selected before submitting."""


class TaskLookupError(WorkflowError, LookupError):
    """The task catalog could not return tasks for a fleet."""


class SubmissionError(WorkflowError):
    """The request service failed to create a maintenance request.

    ``reason`` is a human-readable message safe to show to the user,
    or None when the service gave nothing better than a raw error.
    """

    def __init__(self, message: str, reason: Optional[str] = None):
        super().__init__(message)
        self.reason = reason


class StaleResponse(WorkflowError):
    """A result arrived for a fleet context that has since been replaced."""
