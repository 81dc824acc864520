"""PocketBase REST client for maintenance tasks and requests."""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import requests

from models import (
    MaintenanceTask,
    RequestDraft,
    RequestRecord,
    SubmissionError,
    TaskLookupError,
)
from models.loader import parse_request, parse_task

logger = logging.getLogger(__name__)

TASKS_COLLECTION = "maintenance"
REQUESTS_COLLECTION = "maintenance_request"
PER_PAGE = 200


def _quote(value: str) -> str:
    """Quote a string for a PocketBase filter expression."""
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _error_message(resp: requests.Response) -> Optional[str]:
    """Pull the human-readable 'message' out of a PocketBase error body."""
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("message") or None
    return None


class PocketBaseClient:
    """
    Task catalog and request service backed by a PocketBase server.

    Tasks come from the 'maintenance' collection, filtered by fleet.
    Requests are created in 'maintenance_request'. Calls are blocking
    and run in a worker thread so the event loop stays responsive.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _records_url(self, collection: str) -> str:
        return f"{self.base_url}/api/collections/{collection}/records"

    # -------------------------------------------------------------------------
    # Task catalog
    # -------------------------------------------------------------------------

    def fetch_tasks(self, fleet_id: str) -> List[MaintenanceTask]:
        """Fetch all tasks for a fleet, following pagination."""
        tasks: List[MaintenanceTask] = []
        page = 1
        while True:
            params = {
                "filter": f"fleet={_quote(fleet_id)}",
                "sort": "created",
                "page": page,
                "perPage": PER_PAGE,
            }
            try:
                resp = self.session.get(
                    self._records_url(TASKS_COLLECTION), params=params, timeout=self.timeout
                )
            except requests.RequestException as e:
                raise TaskLookupError(f"Could not reach PocketBase: {e}") from e

            if resp.status_code != 200:
                raise TaskLookupError(
                    f"PocketBase returned {resp.status_code} for fleet {fleet_id}: "
                    f"{_error_message(resp) or resp.text[:200]}"
                )

            try:
                data = resp.json()
                tasks.extend(parse_task(item) for item in data.get("items", []))
            except (ValueError, KeyError) as e:
                raise TaskLookupError(f"Malformed task list for fleet {fleet_id}: {e}") from e

            if page >= (data.get("totalPages") or 1):
                break
            page += 1

        return tasks

    async def fetch_tasks_for_fleet(self, fleet_id: str) -> List[MaintenanceTask]:
        return await asyncio.to_thread(self.fetch_tasks, fleet_id)

    # -------------------------------------------------------------------------
    # Request service
    # -------------------------------------------------------------------------

    def create_request(self, draft: RequestDraft) -> RequestRecord:
        """Create one maintenance_request record. Never retried."""
        try:
            resp = self.session.post(
                self._records_url(REQUESTS_COLLECTION),
                json=draft.to_record(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise SubmissionError(f"Could not reach PocketBase: {e}") from e

        if resp.status_code not in (200, 201):
            message = _error_message(resp)
            raise SubmissionError(
                f"PocketBase returned {resp.status_code}: {message or resp.text[:200]}",
                reason=message,
            )

        try:
            body: Dict[str, Any] = resp.json()
            record = parse_request(body)
        except (ValueError, KeyError) as e:
            raise SubmissionError(f"Malformed request record: {e}") from e

        logger.info("Created maintenance_request %s", record.id)
        return record

    async def create_maintenance_request(self, draft: RequestDraft) -> RequestRecord:
        return await asyncio.to_thread(self.create_request, draft)
