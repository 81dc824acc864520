"""Status enums for task loading and request submission."""

from enum import Enum


class LoadStatus(Enum):
    """Task list loading status. Exactly one is active at a time."""

    LOADING = 1
    LOADED = 2
    EMPTY = 3
    FAILED = 4


class SubmitStatus(Enum):
    """Maintenance request submission status."""

    IDLE = 1
    SUBMITTING = 2
    SUCCEEDED = 3
    FAILED = 4
