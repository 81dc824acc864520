"""State snapshots for the maintenance request workflow."""

from dataclasses import dataclass, field
from typing import Optional, Tuple, TYPE_CHECKING

from .status import LoadStatus, SubmitStatus

if TYPE_CHECKING:
    from .maintenance_task import MaintenanceTask
    from .request_draft import RequestRecord
    from .selection import SelectionState


@dataclass(frozen=True)
class LoadState:
    """Result of loading the task list for a fleet."""

    status: LoadStatus
    candidates: Tuple["MaintenanceTask", ...] = ()
    message: Optional[str] = None

    @classmethod
    def loading(cls) -> "LoadState":
        return cls(LoadStatus.LOADING)

    @classmethod
    def loaded(cls, candidates) -> "LoadState":
        return cls(LoadStatus.LOADED, tuple(candidates))

    @classmethod
    def empty(cls) -> "LoadState":
        return cls(LoadStatus.EMPTY)

    @classmethod
    def failed(cls, message: str) -> "LoadState":
        return cls(LoadStatus.FAILED, message=message)


@dataclass(frozen=True)
class SubmitState:
    """Outcome of the latest submit attempt."""

    status: SubmitStatus = SubmitStatus.IDLE
    message: Optional[str] = None
    record: Optional["RequestRecord"] = None

    @classmethod
    def idle(cls) -> "SubmitState":
        return cls()

    @classmethod
    def submitting(cls) -> "SubmitState":
        return cls(SubmitStatus.SUBMITTING)

    @classmethod
    def succeeded(cls, record: Optional["RequestRecord"] = None) -> "SubmitState":
        return cls(SubmitStatus.SUCCEEDED, record=record)

    @classmethod
    def failed(cls, message: str) -> "SubmitState":
        return cls(SubmitStatus.FAILED, message=message)

    @property
    def in_flight(self) -> bool:
        return self.status == SubmitStatus.SUBMITTING


@dataclass(frozen=True)
class ViewState:
    """Everything the presentation layer needs to render the request form."""

    load: LoadState
    selection: "SelectionState"
    submit: SubmitState = field(default_factory=SubmitState)
    can_submit: bool = False
