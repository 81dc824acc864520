"""MaintenanceRequestWorkflow - the load/select/submit state machine."""

import logging
from typing import Callable, Optional, TYPE_CHECKING

from .errors import StaleResponse, TaskLookupError
from .selection import SelectionState
from .status import LoadStatus, SubmitStatus
from .submission import SubmissionController
from .view_state import LoadState, SubmitState, ViewState

if TYPE_CHECKING:
    from services import RequestService, TaskCatalog

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load maintenance tasks"


class MaintenanceRequestWorkflow:
    """
    Select a maintenance task for a fleet and submit a request for it.

    States:
        INIT --(fleet id)--> LOADING --> LOADED | EMPTY | FAILED
        LOADED --(select)--> LOADED
        LOADED --(submit)--> SUBMITTING --> SUCCEEDED (terminal)
                                        --> FAILED (retry allowed)

    Each fleet context gets a fresh selection. A load or submit result
    that resolves after the context changed is dropped.
    """

    def __init__(
        self,
        catalog: "TaskCatalog",
        request_service: "RequestService",
        on_completed: Optional[Callable[[SubmitState], None]] = None,
    ):
        self.catalog = catalog
        self.on_completed = on_completed
        self.fleet_id: Optional[str] = None
        self.load_state: Optional[LoadState] = None
        self.selection = SelectionState()
        self.submission = SubmissionController(request_service, self._completed)
        self._generation = 0
        self._submit_generation: Optional[int] = None

    # -------------------------------------------------------------------------
    # Task loading
    # -------------------------------------------------------------------------

    async def initialize(self, fleet_id: Optional[str]) -> Optional[LoadState]:
        """Activate the workflow for a fleet. Alias of load_tasks."""
        return await self.load_tasks(fleet_id)

    async def load_tasks(self, fleet_id: Optional[str]) -> Optional[LoadState]:
        """
        Fetch candidate tasks for a fleet and select the first one.

        Without a fleet id nothing is fetched and the load state stays
        unset. Returns the load state in effect once this call resolves,
        which is the newer context's state if this fetch was superseded.
        """
        self._generation += 1
        generation = self._generation
        self.fleet_id = fleet_id
        self.selection = SelectionState()
        self.submission.reset()

        if not fleet_id:
            self.load_state = None
            return None

        self.load_state = LoadState.loading()
        try:
            tasks = await self.catalog.fetch_tasks_for_fleet(fleet_id)
        except TaskLookupError as e:
            logger.error("Error fetching maintenance tasks for %s: %s", fleet_id, e)
            return self._load_failed(fleet_id, generation, e)
        except Exception as e:
            logger.exception("Unexpected error fetching maintenance tasks for %s", fleet_id)
            return self._load_failed(fleet_id, generation, e)

        if not self._is_current(fleet_id, generation):
            self._discard("load", fleet_id, tasks)
            return self.load_state

        logger.debug("Fetched %d maintenance tasks for %s", len(tasks), fleet_id)
        if not tasks:
            self.load_state = LoadState.empty()
            return self.load_state

        self.selection = SelectionState.from_candidates(tasks)
        self.load_state = LoadState.loaded(self.selection.candidates)
        return self.load_state

    def _load_failed(self, fleet_id: str, generation: int, error: Exception) -> LoadState:
        # The raw error stays in the log; the user sees a fixed message
        if not self._is_current(fleet_id, generation):
            self._discard("load", fleet_id, error)
            return self.load_state
        self.load_state = LoadState.failed(LOAD_FAILED_MESSAGE)
        return self.load_state

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    def select_task(self, task_id: str) -> bool:
        """Select a candidate by id. Returns False if the selection was rejected."""
        task = self.selection.find(task_id)
        if task is None:
            logger.warning("Unknown maintenance task %r for fleet %s", task_id, self.fleet_id)
            return False
        return self.select(task)

    def select(self, task) -> bool:
        if self._load_status != LoadStatus.LOADED:
            return False
        if self.submission.state.in_flight:
            return False
        return self.selection.select(task)

    # -------------------------------------------------------------------------
    # Submission
    # -------------------------------------------------------------------------

    async def submit(self) -> SubmitState:
        """
        Submit a maintenance request for the selected task.

        Only reachable once tasks are LOADED; otherwise the current submit
        state is returned and nothing is sent.
        """
        if self._load_status != LoadStatus.LOADED:
            logger.debug("Submit unavailable while tasks are %s", self._load_status.name)
            return self.submission.state

        generation = self._generation
        fleet_id = self.fleet_id
        if not self.submission.state.in_flight:
            self._submit_generation = generation
        state = await self.submission.submit(self.selection, fleet_id)

        if generation != self._generation and not state.in_flight:
            self._discard("submit", fleet_id, state.status.name)
            self.submission.reset()
        return state

    def _completed(self, state: SubmitState) -> None:
        if self._submit_generation != self._generation:
            return
        if self.on_completed is not None:
            self.on_completed(state)

    # -------------------------------------------------------------------------
    # View state
    # -------------------------------------------------------------------------

    @property
    def _load_status(self) -> LoadStatus:
        return self.load_state.status if self.load_state else LoadStatus.EMPTY

    @property
    def can_submit(self) -> bool:
        return (
            self._load_status == LoadStatus.LOADED
            and self.selection.selected_id is not None
            and self.submission.state.status
            not in (SubmitStatus.SUBMITTING, SubmitStatus.SUCCEEDED)
        )

    def get_view_state(self) -> ViewState:
        """Snapshot of load, selection, and submit state for rendering."""
        return ViewState(
            load=self.load_state or LoadState.empty(),
            selection=self.selection.copy(),
            submit=self.submission.state,
            can_submit=self.can_submit,
        )

    def _is_current(self, fleet_id: str, generation: int) -> bool:
        return fleet_id == self.fleet_id and generation == self._generation

    def _discard(self, kind: str, fleet_id: Optional[str], result) -> None:
        stale = StaleResponse(f"{kind} result for fleet {fleet_id} superseded")
        logger.debug("%s: %r", stale, result)
