#!/usr/bin/env python3
"""Tests for SelectionState."""

import pytest

from models import MaintenanceTask, SelectionState, PLACEHOLDER_LABEL


class TestDefaultSelection:
    """The first candidate is selected until the user picks another."""

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_first_candidate_selected(self, count):
        tasks = [MaintenanceTask(f"t{i}", f"Task {i}", f"{i}000 mi") for i in range(count)]
        state = SelectionState.from_candidates(tasks)
        assert state.selected_id == tasks[0].id
        assert state.selected_label == tasks[0].label

    def test_empty_candidates_select_nothing(self):
        state = SelectionState.from_candidates([])
        assert state.selected_id is None
        assert state.selected is None
        assert state.selected_label == PLACEHOLDER_LABEL

    def test_candidates_are_copied(self, truck_tasks):
        state = SelectionState.from_candidates(truck_tasks)
        truck_tasks.append(MaintenanceTask("t9", "Wash", "1 mo"))
        assert len(state.candidates) == 2


class TestSelect:
    """Tests for SelectionState.select."""

    def test_select_second_candidate(self, truck_tasks):
        state = SelectionState.from_candidates(truck_tasks)
        assert state.select(truck_tasks[1])
        assert state.selected_id == "t2"
        assert state.selected_label == "Tire Rotation (Every 6000 mi)"
        assert state.selected == truck_tasks[1]

    def test_unknown_task_rejected(self, truck_tasks):
        state = SelectionState.from_candidates(truck_tasks)
        unknown = MaintenanceTask("t9", "Wash", "1 mo")
        assert not state.select(unknown)
        assert state.selected_id == "t1"
        assert state.selected_label == "Oil Change (Every 5000 mi)"

    def test_reselect_is_idempotent(self, truck_tasks):
        state = SelectionState.from_candidates(truck_tasks)
        state.select(truck_tasks[1])
        before = (state.selected_id, state.selected_label)
        assert state.select(truck_tasks[1])
        assert (state.selected_id, state.selected_label) == before

    def test_label_comes_from_candidate(self, truck_tasks):
        """A task with a known id but different fields adopts the candidate's label."""
        state = SelectionState.from_candidates(truck_tasks)
        assert state.select(MaintenanceTask("t2", "Renamed", "1 mi"))
        assert state.selected_label == "Tire Rotation (Every 6000 mi)"

    def test_find(self, truck_tasks):
        state = SelectionState.from_candidates(truck_tasks)
        assert state.find("t2") is truck_tasks[1]
        assert state.find("missing") is None
