"""YAML fleet files as the task catalog and request store."""

import asyncio
import logging
from pathlib import Path
from typing import List, Union

import yaml

from models import (
    MaintenanceTask,
    RequestDraft,
    RequestRecord,
    SubmissionError,
    TaskLookupError,
    load_fleet,
    save_request,
)

logger = logging.getLogger(__name__)


def fleet_path(fleet_dir: Union[str, Path], fleet_id: str) -> Path:
    """Get full path for a fleet id."""
    return Path(fleet_dir) / f"{fleet_id}.yaml"


def list_fleet_ids(fleet_dir: Union[str, Path]) -> List[str]:
    """Fleet ids of all YAML files in a directory, sorted."""
    return [p.stem for p in sorted(Path(fleet_dir).glob("*.yaml"))]


class YamlTaskCatalog:
    """Reads the tasks list of <fleet_dir>/<fleet_id>.yaml."""

    def __init__(self, fleet_dir: Union[str, Path]):
        self.fleet_dir = Path(fleet_dir)

    def _fetch(self, fleet_id: str) -> List[MaintenanceTask]:
        path = fleet_path(self.fleet_dir, fleet_id)
        if not path.exists():
            raise TaskLookupError(f"Fleet file not found: {path}")
        try:
            return load_fleet(path).tasks
        except (OSError, yaml.YAMLError, KeyError, ValueError) as e:
            raise TaskLookupError(f"Could not read tasks from {path}: {e}") from e

    async def fetch_tasks_for_fleet(self, fleet_id: str) -> List[MaintenanceTask]:
        return await asyncio.to_thread(self._fetch, fleet_id)


class YamlRequestService:
    """Appends maintenance requests to <fleet_dir>/<fleet_id>.yaml."""

    def __init__(self, fleet_dir: Union[str, Path]):
        self.fleet_dir = Path(fleet_dir)

    def _create(self, draft: RequestDraft) -> RequestRecord:
        path = fleet_path(self.fleet_dir, draft.fleet_id)
        if not path.exists():
            raise SubmissionError(
                f"Fleet file not found: {path}",
                reason=f"Unknown truck '{draft.fleet_id}'",
            )
        try:
            fleet = load_fleet(path)
            if fleet.get_task(draft.maintenance_task_id) is None:
                raise SubmissionError(
                    f"Task {draft.maintenance_task_id!r} not in {path}",
                    reason="Selected maintenance task no longer exists",
                )
            record = save_request(path, draft)
        except (OSError, yaml.YAMLError, KeyError, ValueError) as e:
            raise SubmissionError(f"Could not save request to {path}: {e}") from e

        logger.info("Saved maintenance request %s to %s", record.id, path)
        return record

    async def create_maintenance_request(self, draft: RequestDraft) -> RequestRecord:
        return await asyncio.to_thread(self._create, draft)
