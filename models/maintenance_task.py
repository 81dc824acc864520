"""MaintenanceTask dataclass for catalog entries."""

from dataclasses import dataclass

from .formatting import format_task_label


@dataclass(frozen=True)
class MaintenanceTask:
    """A predefined maintenance task a request can reference."""

    id: str
    task_name: str
    interval_description: str

    @property
    def label(self) -> str:
        """Display label, e.g. 'Oil Change (Every 5000 mi)'."""
        return format_task_label(self.task_name, self.interval_description)
