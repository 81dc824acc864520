"""
Maintenance request models.

This package provides the maintenance request workflow and its data:
- MaintenanceTask: A predefined task a request can reference
- SelectionState: Candidate tasks and the selected one
- RequestDraft / RequestRecord: A request before and after creation
- LoadState / SubmitState / ViewState: What the form renders
- SubmissionController: Validates and submits one request at a time
- MaintenanceRequestWorkflow: The load/select/submit state machine
- Fleet: A fleet vehicle loaded from YAML
"""

from .status import LoadStatus, SubmitStatus
from .errors import (
    WorkflowError,
    ValidationError,
    TaskLookupError,
    SubmissionError,
    StaleResponse,
)
from .maintenance_task import MaintenanceTask
from .request_draft import RequestDraft, RequestRecord
from .selection import SelectionState, PLACEHOLDER_LABEL
from .view_state import LoadState, SubmitState, ViewState
from .submission import (
    SubmissionController,
    SELECTION_REQUIRED_MESSAGE,
    SUBMISSION_FAILED_MESSAGE,
)
from .workflow import MaintenanceRequestWorkflow, LOAD_FAILED_MESSAGE
from .fleet import Fleet
from .formatting import format_interval, format_task_label
from .loader import load_fleet, load_tasks, load_requests, save_request

__all__ = [
    "LoadStatus",
    "SubmitStatus",
    "WorkflowError",
    "ValidationError",
    "TaskLookupError",
    "SubmissionError",
    "StaleResponse",
    "MaintenanceTask",
    "RequestDraft",
    "RequestRecord",
    "SelectionState",
    "PLACEHOLDER_LABEL",
    "LoadState",
    "SubmitState",
    "ViewState",
    "SubmissionController",
    "SELECTION_REQUIRED_MESSAGE",
    "SUBMISSION_FAILED_MESSAGE",
    "MaintenanceRequestWorkflow",
    "LOAD_FAILED_MESSAGE",
    "Fleet",
    "format_interval",
    "format_task_label",
    "load_fleet",
    "load_tasks",
    "load_requests",
    "save_request",
]
