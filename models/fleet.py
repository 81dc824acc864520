"""Fleet class - a vehicle with its task catalog and submitted requests."""

from typing import List, Optional

from .maintenance_task import MaintenanceTask
from .request_draft import RequestRecord


class Fleet:
    """A fleet vehicle record: identification, eligible tasks, and requests."""

    def __init__(
        self,
        fleet_id: str,
        name: Optional[str] = None,
        make: Optional[str] = None,
        model: Optional[str] = None,
        year: Optional[int] = None,
        tasks: Optional[List[MaintenanceTask]] = None,
        requests: Optional[List[RequestRecord]] = None,
    ):
        self.fleet_id = fleet_id
        self.name = name
        self.make = make
        self.model = model
        self.year = year
        self.tasks = tasks or []
        self.requests = requests or []

    @property
    def display_name(self) -> str:
        """Human-readable vehicle name, falling back to the fleet id."""
        if self.name:
            return self.name
        parts = [str(p) for p in (self.year, self.make, self.model) if p]
        return " ".join(parts) if parts else self.fleet_id

    def get_task(self, task_id: str) -> Optional[MaintenanceTask]:
        """Find a task by its id."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def get_requests_for_task(self, task_id: str) -> List[RequestRecord]:
        """Get all requests that reference a task."""
        return [r for r in self.requests if r.maintenance_task_id == task_id]
