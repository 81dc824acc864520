"""Shared fixtures: in-memory task catalog and request service."""

import asyncio

import pytest

from models import MaintenanceTask, RequestRecord


class FakeCatalog:
    """Task catalog returning canned results, optionally held on an event."""

    def __init__(self, results=None):
        self.results = results or {}
        self.gates = {}
        self.calls = []

    def hold(self, fleet_id):
        """Make fetches for fleet_id wait until release(fleet_id)."""
        self.gates[fleet_id] = asyncio.Event()

    def release(self, fleet_id):
        self.gates[fleet_id].set()

    async def fetch_tasks_for_fleet(self, fleet_id):
        self.calls.append(fleet_id)
        gate = self.gates.get(fleet_id)
        if gate is not None:
            await gate.wait()
        result = self.results.get(fleet_id, [])
        if isinstance(result, Exception):
            raise result
        return list(result)


class FakeRequestService:
    """Request service recording drafts; can fail or be held."""

    def __init__(self, error=None):
        self.error = error
        self.drafts = []
        self.gate = None

    def hold(self):
        self.gate = asyncio.Event()

    def release(self):
        self.gate.set()

    async def create_maintenance_request(self, draft):
        self.drafts.append(draft)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return RequestRecord(
            f"req{len(self.drafts)}", draft.fleet_id, draft.maintenance_task_id, draft.status
        )


@pytest.fixture
def truck_tasks():
    return [
        MaintenanceTask("t1", "Oil Change", "5000 mi"),
        MaintenanceTask("t2", "Tire Rotation", "6000 mi"),
    ]


@pytest.fixture
def catalog(truck_tasks):
    return FakeCatalog({"truck-1": truck_tasks, "truck-2": []})


@pytest.fixture
def request_service():
    return FakeRequestService()


FLEET_YAML = """
fleet:
  name: Truck 1
  make: Freightliner
  model: Cascadia
  year: 2019

tasks:
  - id: t1
    taskName: Oil Change
    interval: 5000 mi
  - id: t2
    taskName: Tire Rotation
    interval: 6000 mi
  - id: t3
    taskName: Brake Inspection
    intervalMiles: 25000
    intervalMonths: 12
"""


@pytest.fixture
def fleet_dir(tmp_path):
    """A fleet directory with truck-1 (three tasks) and truck-2 (no tasks)."""
    (tmp_path / "truck-1.yaml").write_text(FLEET_YAML)
    (tmp_path / "truck-2.yaml").write_text("fleet:\n  name: Truck 2\ntasks: []\n")
    return tmp_path
