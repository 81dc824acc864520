"""SubmissionController - validates a selection and creates the request."""

import asyncio
import logging
from typing import Callable, Optional, TYPE_CHECKING

from .errors import SubmissionError, ValidationError
from .request_draft import RequestDraft
from .selection import SelectionState
from .status import SubmitStatus
from .view_state import SubmitState

if TYPE_CHECKING:
    from services import RequestService

logger = logging.getLogger(__name__)

SELECTION_REQUIRED_MESSAGE = "selection required"
SUBMISSION_FAILED_MESSAGE = "submission failed"


class SubmissionController:
    """
    Owns the submit state for one workflow instance.

    At most one submission is in flight at a time. A successful
    submission is terminal: later submits are ignored, so the request
    service never sees a duplicate from this controller.
    """

    def __init__(
        self,
        request_service: "RequestService",
        on_completed: Optional[Callable[[SubmitState], None]] = None,
    ):
        self.request_service = request_service
        self.on_completed = on_completed
        self.state = SubmitState.idle()
        self._completed_notified = False

    def reset(self) -> None:
        """Clear the outcome of a previous attempt (new fleet context)."""
        if self.state.in_flight:
            return
        self.state = SubmitState.idle()
        self._completed_notified = False

    async def submit(self, selection: SelectionState, fleet_id: str) -> SubmitState:
        """
        Submit a maintenance request for the selected task.

        Preconditions, checked in order:
        1. A task must be selected, otherwise FAILED('selection required')
           without calling the request service.
        2. No submission may already be in flight; a concurrent call
           returns the current state unchanged.
        """
        if selection.selected_id is None:
            error = ValidationError(SELECTION_REQUIRED_MESSAGE)
            logger.info("Rejected submit for fleet %s: %s", fleet_id, error)
            failed = SubmitState.failed(str(error))
            # An in-flight or finished submission keeps its state
            if self.state.status not in (SubmitStatus.SUBMITTING, SubmitStatus.SUCCEEDED):
                self.state = failed
            return failed

        if self.state.status in (SubmitStatus.SUBMITTING, SubmitStatus.SUCCEEDED):
            logger.debug(
                "Ignoring submit for fleet %s while %s", fleet_id, self.state.status.name
            )
            return self.state

        self.state = SubmitState.submitting()
        draft = RequestDraft(fleet_id=fleet_id, maintenance_task_id=selection.selected_id)
        logger.info("Submitting maintenance request: %s", draft.to_record())

        try:
            record = await self.request_service.create_maintenance_request(draft)
        except asyncio.CancelledError:
            self.state = SubmitState.idle()
            raise
        except SubmissionError as e:
            logger.warning("Error submitting maintenance request: %s", e)
            self.state = SubmitState.failed(e.reason or SUBMISSION_FAILED_MESSAGE)
            return self.state
        except Exception:
            logger.exception("Unexpected error submitting maintenance request")
            self.state = SubmitState.failed(SUBMISSION_FAILED_MESSAGE)
            return self.state

        self.state = SubmitState.succeeded(record)
        self._notify_completed()
        return self.state

    def _notify_completed(self) -> None:
        """Fire on_completed once, on the first transition to SUCCEEDED."""
        if self._completed_notified:
            return
        self._completed_notified = True
        if self.on_completed is not None:
            self.on_completed(self.state)
