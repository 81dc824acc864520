"""RequestDraft and RequestRecord for maintenance requests."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

PENDING = "pending"


@dataclass(frozen=True)
class RequestDraft:
    """A maintenance request about to be created. Built per submit attempt."""

    fleet_id: str
    maintenance_task_id: str
    status: str = PENDING

    def to_record(self) -> Dict[str, Any]:
        """Serialize to the storage/wire format (fleet, maintenance, status)."""
        return {
            "fleet": self.fleet_id,
            "maintenance": self.maintenance_task_id,
            "status": self.status,
        }


@dataclass(frozen=True)
class RequestRecord:
    """A maintenance request as stored by the request service."""

    id: str
    fleet_id: str
    maintenance_task_id: str
    status: str = PENDING
    created: Optional[datetime] = None
