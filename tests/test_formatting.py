#!/usr/bin/env python3
"""Tests for task display formatting."""

from models import MaintenanceTask, format_interval, format_task_label


class TestFormatInterval:
    """Tests for format_interval."""

    def test_miles_only(self):
        assert format_interval(5000, None) == "5,000 mi"

    def test_months_only(self):
        assert format_interval(None, 6) == "6 mo"

    def test_fractional_months(self):
        assert format_interval(None, 1.5) == "1.5 mo"

    def test_miles_and_months(self):
        assert format_interval(25000, 12) == "25,000 mi / 12 mo"

    def test_neither_returns_none(self):
        assert format_interval(None, None) is None
        assert format_interval(0, 0) is None


class TestTaskLabel:
    """Tests for format_task_label and MaintenanceTask.label."""

    def test_format_task_label(self):
        assert format_task_label("Oil Change", "5000 mi") == "Oil Change (Every 5000 mi)"

    def test_task_label_property(self):
        task = MaintenanceTask("t2", "Tire Rotation", "6000 mi")
        assert task.label == "Tire Rotation (Every 6000 mi)"
