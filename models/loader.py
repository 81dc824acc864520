"""YAML loading and saving utilities for fleet data."""

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from dateutil.parser import isoparse

from .fleet import Fleet
from .formatting import format_interval
from .maintenance_task import MaintenanceTask
from .request_draft import RequestDraft, RequestRecord


def _parse_created(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return isoparse(str(value))


def parse_task(dct: Dict[str, Any]) -> MaintenanceTask:
    """
    Build a MaintenanceTask from a task record.

    A preformatted 'interval' (or 'formattedInterval') wins; otherwise the
    description is derived from intervalMiles/intervalMonths.
    """
    interval = dct.get("interval") or dct.get("formattedInterval")
    if not interval:
        interval = format_interval(dct.get("intervalMiles"), dct.get("intervalMonths"))
    if not interval:
        raise ValueError(f"Task {dct.get('id')!r} has no interval")
    return MaintenanceTask(str(dct["id"]), dct["taskName"], str(interval))


def parse_request(dct: Dict[str, Any]) -> RequestRecord:
    """Build a RequestRecord from a stored request."""
    return RequestRecord(
        str(dct["id"]),
        str(dct["fleet"]),
        str(dct["maintenance"]),
        dct.get("status") or "pending",
        _parse_created(dct.get("created")),
    )


def _parse_object(dct: Dict[str, Any]) -> Union[MaintenanceTask, RequestRecord, dict]:
    """Parse dictionary into appropriate object type."""
    # Task object
    if "taskName" in dct and "id" in dct:
        return parse_task(dct)
    # Request object
    elif "maintenance" in dct and "fleet" in dct:
        return parse_request(dct)
    else:
        # Return dict as-is for unknown structures (like 'fleet')
        return dct


def _read_raw(filename: Union[str, Path]) -> Dict[str, Any]:
    with open(filename, "r") as fp:
        data = yaml.load(fp, Loader=yaml.SafeLoader)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{filename}: expected a mapping at the top level")
    return data


def _write_raw(filename: Union[str, Path], data: Dict[str, Any]) -> None:
    with open(filename, "w") as fp:
        yaml.dump(
            data,
            fp,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )


def load_fleet(filename: Union[str, Path]) -> Fleet:
    """Load a fleet vehicle from a YAML file. The fleet id is the file stem."""
    with open(filename, "rb") as fp:
        json_data = json.dumps(yaml.load(fp, Loader=yaml.SafeLoader) or {}, default=str)
        data = json.loads(json_data, object_hook=_parse_object)

    info = data.get("fleet") or {}
    return Fleet(
        Path(filename).stem,
        info.get("name"),
        info.get("make"),
        info.get("model"),
        info.get("year"),
        data.get("tasks"),
        data.get("requests"),
    )


def load_tasks(filename: Union[str, Path]) -> List[MaintenanceTask]:
    """Load the maintenance tasks of a fleet file, in file order."""
    return load_fleet(filename).tasks


def load_requests(filename: Union[str, Path]) -> List[RequestRecord]:
    """Load the maintenance requests recorded in a fleet file."""
    return load_fleet(filename).requests


def save_request(
    filename: Union[str, Path],
    draft: RequestDraft,
    request_id: Optional[str] = None,
    created: Optional[datetime] = None,
) -> RequestRecord:
    """
    Append a maintenance request to a fleet YAML file.

    Loads the raw YAML, appends the request to the requests list,
    and writes back to the file. Returns the stored record.
    """
    data = _read_raw(filename)

    if data.get("requests") is None:
        data["requests"] = []

    record = RequestRecord(
        request_id or uuid.uuid4().hex[:15],
        draft.fleet_id,
        draft.maintenance_task_id,
        draft.status,
        created or datetime.now(timezone.utc),
    )
    request_dict = {"id": record.id}
    request_dict.update(draft.to_record())
    request_dict["created"] = record.created.isoformat()

    data["requests"].append(request_dict)

    _write_raw(filename, data)
    return record
