#!/usr/bin/env python3
"""Tests for YAML loading and saving utilities."""

from datetime import datetime, timezone

import pytest
import yaml

from models import (
    Fleet,
    MaintenanceTask,
    RequestDraft,
    RequestRecord,
    load_fleet,
    load_requests,
    load_tasks,
    save_request,
)
from models.loader import parse_request, parse_task

# =============================================================================
# load_fleet tests
# =============================================================================


class TestLoadFleet:
    """Tests for load_fleet function."""

    def test_loads_fleet_info(self, fleet_dir):
        fleet = load_fleet(fleet_dir / "truck-1.yaml")

        assert isinstance(fleet, Fleet)
        assert fleet.fleet_id == "truck-1"
        assert fleet.display_name == "Truck 1"
        assert fleet.make == "Freightliner"
        assert fleet.year == 2019
        assert fleet.requests == []

    def test_tasks_keep_file_order(self, fleet_dir):
        tasks = load_tasks(fleet_dir / "truck-1.yaml")

        assert [t.id for t in tasks] == ["t1", "t2", "t3"]
        assert all(isinstance(t, MaintenanceTask) for t in tasks)
        assert tasks[0].label == "Oil Change (Every 5000 mi)"

    def test_interval_derived_from_miles_and_months(self, fleet_dir):
        tasks = load_tasks(fleet_dir / "truck-1.yaml")
        assert tasks[2].interval_description == "25,000 mi / 12 mo"

    def test_numeric_task_id_becomes_string(self, tmp_path):
        path = tmp_path / "truck-9.yaml"
        path.write_text("tasks:\n  - id: 42\n    taskName: Grease\n    intervalMonths: 3\n")
        assert load_tasks(path)[0].id == "42"

    def test_numeric_request_ids_match_tasks(self, tmp_path):
        path = tmp_path / "truck-9.yaml"
        path.write_text(
            "tasks:\n  - id: 42\n    taskName: Grease\n    intervalMonths: 3\n"
            "requests:\n  - id: 7\n    fleet: 9\n    maintenance: 42\n"
        )
        fleet = load_fleet(path)

        record = fleet.requests[0]
        assert record.fleet_id == "9"
        assert record.maintenance_task_id == "42"
        assert fleet.get_requests_for_task("42") == [record]

    def test_display_name_falls_back(self, tmp_path):
        path = tmp_path / "truck-9.yaml"
        path.write_text("fleet:\n  make: Volvo\n  model: VNL\n  year: 2020\ntasks: []\n")
        assert load_fleet(path).display_name == "2020 Volvo VNL"

        bare = tmp_path / "truck-10.yaml"
        bare.write_text("tasks: []\n")
        assert load_fleet(bare).display_name == "truck-10"

    def test_empty_file_loads_empty_fleet(self, tmp_path):
        path = tmp_path / "truck-9.yaml"
        path.write_text("")
        fleet = load_fleet(path)
        assert fleet.tasks == []
        assert fleet.requests == []

    def test_task_without_interval_raises(self, tmp_path):
        path = tmp_path / "truck-9.yaml"
        path.write_text("tasks:\n  - id: t1\n    taskName: Grease\n")
        with pytest.raises(ValueError):
            load_tasks(path)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_fleet(tmp_path / "nope.yaml")


class TestParse:
    """Tests for parse_task and parse_request."""

    def test_formatted_interval_key(self):
        task = parse_task({"id": "x", "taskName": "Wash", "formattedInterval": "2 weeks"})
        assert task.interval_description == "2 weeks"

    def test_request_created_parsed(self):
        record = parse_request(
            {
                "id": "abc",
                "fleet": "truck-1",
                "maintenance": "t1",
                "status": "pending",
                "created": "2026-10-19 08:30:00.123Z",
            }
        )
        assert record.created == datetime(2026, 10, 19, 8, 30, 0, 123000, tzinfo=timezone.utc)

    def test_request_without_created(self):
        record = parse_request({"id": "abc", "fleet": "truck-1", "maintenance": "t1"})
        assert record.created is None
        assert record.status == "pending"


# =============================================================================
# save_request tests
# =============================================================================


class TestSaveRequest:
    """Tests for save_request function."""

    def test_appends_request(self, fleet_dir):
        path = fleet_dir / "truck-1.yaml"
        created = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)

        record = save_request(path, RequestDraft("truck-1", "t2"), "req1", created)

        assert record == RequestRecord("req1", "truck-1", "t2", "pending", created)
        with open(path) as f:
            data = yaml.safe_load(f)
        assert data["requests"] == [
            {
                "id": "req1",
                "fleet": "truck-1",
                "maintenance": "t2",
                "status": "pending",
                "created": "2026-10-19T09:00:00+00:00",
            }
        ]

    def test_round_trips_through_load(self, fleet_dir):
        path = fleet_dir / "truck-1.yaml"
        save_request(path, RequestDraft("truck-1", "t1"))
        save_request(path, RequestDraft("truck-1", "t2"))

        requests = load_requests(path)
        assert [r.maintenance_task_id for r in requests] == ["t1", "t2"]
        assert requests[0].id != requests[1].id
        assert requests[0].created is not None

    def test_preserves_tasks_and_key_order(self, fleet_dir):
        path = fleet_dir / "truck-1.yaml"
        save_request(path, RequestDraft("truck-1", "t1"))

        with open(path) as f:
            data = yaml.safe_load(f)
        assert list(data.keys()) == ["fleet", "tasks", "requests"]
        assert len(data["tasks"]) == 3
