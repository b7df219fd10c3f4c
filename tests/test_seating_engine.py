"""Tests for the seating generation pipeline."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.student import StudentRecord
from models.classroom import Classroom, ClassroomConfig
from engine.seating_engine import (
    ASSIGNERS, find_unseated, generate_seating, get_placement_utilization,
)
from engine.errors import (
    CapacityExceeded, EmptyClassroomSet, EmptyRoster, InsufficientSeats,
    InvalidClassroomConfig, UnknownClassroom, UnknownExamType,
)


def make_student(roll, dept="CSE", year=1):
    return StudentRecord(roll, dept, "A", year)


def make_classroom(no="A101", capacity=40):
    return Classroom(no, capacity, capacity // 2, 2)


def make_roster():
    return [
        make_student("CSE001", "CSE", 3), make_student("CSE002", "CSE", 1),
        make_student("IT001", "IT", 4), make_student("IT002", "IT", 2),
    ]


class TestGenerateSeating:
    def test_semester_result(self):
        result = generate_seating(
            "semester", make_roster(), [make_classroom()], [ClassroomConfig("A101", 2, 2)],
            created_by="EMP01",
        )

        assert result.exam_type == "semester"
        assert result.total_students == 4
        assert result.total_capacity == 4
        assert result.created_by == "EMP01"
        assert result.placements[0].grid == [["CSE001", "IT001"], ["CSE002", "IT002"]]
        assert result.seated_count == 4
        assert result.pdf_path is None

    def test_mid_result(self):
        result = generate_seating(
            "mid", make_roster(), [make_classroom()], [ClassroomConfig("A101", 2, 2)],
        )
        # Seniors: CSE001 (y3), IT001 (y4); juniors: CSE002 (y1), IT002 (y2)
        assert result.placements[0].grid == [["CSE001", "CSE002"], ["IT001", "IT002"]]

    def test_placements_follow_config_order(self):
        classrooms = [make_classroom("A101"), make_classroom("B202")]
        configs = [ClassroomConfig("B202", 1, 2), ClassroomConfig("A101", 1, 2)]
        result = generate_seating("semester", make_roster(), classrooms, configs)

        assert [p.classroom_no for p in result.placements] == ["B202", "A101"]

    def test_result_ids_are_unique(self):
        args = ("semester", make_roster(), [make_classroom()], [ClassroomConfig("A101", 2, 2)])
        assert generate_seating(*args).result_id != generate_seating(*args).result_id

    def test_explicit_result_id(self):
        result = generate_seating(
            "semester", make_roster(), [make_classroom()], [ClassroomConfig("A101", 2, 2)],
            result_id="plan-1",
        )
        assert result.result_id == "plan-1"

    def test_identical_inputs_identical_grids(self):
        args = ("semester", make_roster(), [make_classroom()], [ClassroomConfig("A101", 3, 3)])
        assert [p.grid for p in generate_seating(*args).placements] == \
               [p.grid for p in generate_seating(*args).placements]

    def test_unknown_exam_type(self):
        with pytest.raises(UnknownExamType):
            generate_seating("final", make_roster(), [make_classroom()], [ClassroomConfig("A101", 2, 2)])

    def test_empty_roster(self):
        with pytest.raises(EmptyRoster):
            generate_seating("semester", [], [make_classroom()], [ClassroomConfig("A101", 2, 2)])

    def test_empty_classroom_set(self):
        with pytest.raises(EmptyClassroomSet):
            generate_seating("semester", make_roster(), [], [ClassroomConfig("A101", 2, 2)])

    def test_no_configs(self):
        with pytest.raises(EmptyClassroomSet):
            generate_seating("mid", make_roster(), [make_classroom()], [])

    def test_missing_configs_reported_before_empty_roster(self):
        with pytest.raises(EmptyClassroomSet, match="configuration"):
            generate_seating("semester", [], [make_classroom()], [])

    def test_grid_bounds_reported_before_empty_roster(self):
        with pytest.raises(InvalidClassroomConfig):
            generate_seating("semester", [], [], [ClassroomConfig("A101", 0, 2)])

    def test_insufficient_seats_rejected(self):
        roster = [make_student(f"S{i}") for i in range(5)]
        with pytest.raises(InsufficientSeats):
            generate_seating("semester", roster, [make_classroom(capacity=1)], [ClassroomConfig("A101", 1, 1)])

    def test_unknown_classroom_rejected(self):
        with pytest.raises(UnknownClassroom):
            generate_seating("semester", make_roster(), [make_classroom()], [ClassroomConfig("Z9", 2, 2)])

    def test_capacity_exceeded_rejected(self):
        with pytest.raises(CapacityExceeded):
            generate_seating("mid", make_roster(), [make_classroom(capacity=4)], [ClassroomConfig("A101", 3, 2)])

    def test_grid_bounds_rejected(self):
        with pytest.raises(InvalidClassroomConfig):
            generate_seating("mid", make_roster(), [make_classroom(capacity=200)], [ClassroomConfig("A101", 21, 2)])

    def test_assigner_registry(self):
        assert set(ASSIGNERS) == {"semester", "mid"}


class TestFindUnseated:
    def test_reports_stranded_students(self):
        roster = [make_student(f"C{i}", "CSE") for i in range(3)] + [make_student("I1", "IT")]
        result = generate_seating("semester", roster, [make_classroom()], [ClassroomConfig("A101", 1, 4)])

        # k: CSE, IT, CSE, IT(empty): C2 is stranded despite 4 seats
        assert find_unseated(roster, result.placements) == ["C2"]

    def test_everyone_seated(self):
        roster = make_roster()
        result = generate_seating("semester", roster, [make_classroom()], [ClassroomConfig("A101", 2, 2)])
        assert find_unseated(roster, result.placements) == []


class TestPlacementUtilization:
    def test_utilization_rows(self):
        classrooms = [make_classroom("A101", capacity=10)]
        result = generate_seating("semester", make_roster(), classrooms, [ClassroomConfig("A101", 2, 3)])

        util = get_placement_utilization(result, classrooms)
        assert len(util) == 1
        assert util[0]["configured_seats"] == 6
        assert util[0]["occupied_seats"] == 4
        assert util[0]["empty_seats"] == 2
        assert util[0]["classroom_capacity"] == 10
        assert abs(util[0]["utilization_pct"] - 4 / 6) < 0.001


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
