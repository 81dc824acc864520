"""
Collaborators of the maintenance request workflow.

- TaskCatalog: looks up the maintenance tasks eligible for a fleet
- RequestService: creates maintenance requests

Two backends are provided: YAML fleet files (yaml_store) and a
PocketBase server (pocketbase).
"""

from pathlib import Path
from typing import List, Optional, Protocol, Union

from models import MaintenanceTask, RequestDraft, RequestRecord


class TaskCatalog(Protocol):
    async def fetch_tasks_for_fleet(self, fleet_id: str) -> List[MaintenanceTask]:
        """Return candidate tasks in display order. Raises TaskLookupError."""
        ...


class RequestService(Protocol):
    async def create_maintenance_request(self, draft: RequestDraft) -> RequestRecord:
        """Create a request. Not idempotent. Raises SubmissionError."""
        ...


def make_backend(
    fleet_dir: Union[str, Path], pocketbase_url: Optional[str] = None, timeout: float = 10
):
    """Return (catalog, request_service) for the configured backend."""
    if pocketbase_url:
        from .pocketbase import PocketBaseClient

        client = PocketBaseClient(pocketbase_url, timeout=timeout)
        return client, client

    from .yaml_store import YamlTaskCatalog, YamlRequestService

    return YamlTaskCatalog(fleet_dir), YamlRequestService(fleet_dir)


__all__ = ["TaskCatalog", "RequestService", "make_backend"]
