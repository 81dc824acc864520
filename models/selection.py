"""SelectionState class for the chosen maintenance task."""

from typing import Iterable, Optional, Tuple

from .maintenance_task import MaintenanceTask

PLACEHOLDER_LABEL = "Select a maintenance task"


class SelectionState:
    """
    Candidate tasks for a fleet plus the currently selected one.

    Invariants:
    - If candidates is non-empty and nothing was picked by the user,
      the first candidate is selected.
    - selected_id, when set, is always the id of one of the candidates.
    """

    def __init__(self, candidates: Iterable[MaintenanceTask] = ()):
        self.candidates: Tuple[MaintenanceTask, ...] = tuple(candidates)
        self.selected_id: Optional[str] = None
        self.selected_label: str = PLACEHOLDER_LABEL

    @classmethod
    def from_candidates(cls, candidates: Iterable[MaintenanceTask]) -> "SelectionState":
        """Create a fresh selection with the first candidate selected."""
        state = cls(candidates)
        if state.candidates:
            state._apply(state.candidates[0])
        return state

    @property
    def selected(self) -> Optional[MaintenanceTask]:
        if self.selected_id is None:
            return None
        return self.find(self.selected_id)

    def find(self, task_id: str) -> Optional[MaintenanceTask]:
        """Find a candidate by its id."""
        for task in self.candidates:
            if task.id == task_id:
                return task
        return None

    def select(self, task: MaintenanceTask) -> bool:
        """
        Select a candidate task.

        Returns False and leaves the state untouched if the task's id is
        not one of the candidates.
        """
        candidate = self.find(task.id)
        if candidate is None:
            return False
        self._apply(candidate)
        return True

    def copy(self) -> "SelectionState":
        """Return an independent copy with the same candidates and selection."""
        other = SelectionState(self.candidates)
        other.selected_id = self.selected_id
        other.selected_label = self.selected_label
        return other

    def _apply(self, task: MaintenanceTask) -> None:
        self.selected_id = task.id
        self.selected_label = task.label

    def __repr__(self) -> str:
        return (
            f"SelectionState(candidates={len(self.candidates)}, "
            f"selected_id={self.selected_id!r})"
        )
