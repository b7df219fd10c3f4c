"""Tests for mid-term (senior-junior pairing) seating."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.student import StudentRecord
from models.classroom import ClassroomConfig
from engine.midterm import assign_midterm_seating, build_pairs


def make_student(roll, year, dept="CSE"):
    return StudentRecord(roll, dept, "A", year)


class TestBuildPairs:
    def test_seniors_and_juniors_concatenate_year_blocks(self):
        students = [
            make_student("Y4A", 4), make_student("Y3B", 3), make_student("Y3A", 3),
            make_student("Y2A", 2), make_student("Y1B", 1), make_student("Y1A", 1),
        ]
        pairs, leftovers = build_pairs(students)

        # Year 3 block before year 4, year 1 block before year 2
        assert pairs == [("Y3A", "Y1A"), ("Y3B", "Y1B"), ("Y4A", "Y2A")]
        assert leftovers == []

    def test_extra_juniors_become_leftovers(self):
        students = [make_student("S1", 3)] + [make_student(f"J{i}", 1) for i in range(1, 4)]
        pairs, leftovers = build_pairs(students)

        assert pairs == [("S1", "J1")]
        assert leftovers == ["J2", "J3"]

    def test_extra_seniors_become_leftovers(self):
        students = [make_student("S1", 3), make_student("S2", 4), make_student("J1", 2)]
        pairs, leftovers = build_pairs(students)

        assert pairs == [("S1", "J1")]
        assert leftovers == ["S2"]

    def test_no_juniors(self):
        pairs, leftovers = build_pairs([make_student("S2", 4), make_student("S1", 3)])
        assert pairs == []
        assert leftovers == ["S1", "S2"]


class TestMidtermSeating:
    def test_pairs_fill_benches_across_classrooms(self):
        students = [
            make_student("S1", 3), make_student("S2", 3),
            make_student("J1", 1), make_student("J2", 1),
        ]
        configs = [ClassroomConfig("A101", 1, 2), ClassroomConfig("A102", 1, 2)]

        placements = assign_midterm_seating(students, configs)
        assert placements[0].grid == [["S1", "J1"]]
        assert placements[1].grid == [["S2", "J2"]]

    def test_leftovers_fill_after_pairs(self):
        students = [make_student("S1", 3)] + [make_student(f"J{i}", 1) for i in range(1, 5)]
        placements = assign_midterm_seating(students, [ClassroomConfig("A101", 2, 4)])

        assert placements[0].grid == [
            ["S1", "J1", "J2", "J3"],
            ["J4", None, None, None],
        ]

    def test_odd_columns_drop_junior_at_row_end(self):
        students = [make_student(f"S{i}", 3) for i in range(1, 4)] + \
                   [make_student(f"J{i}", 1) for i in range(1, 4)]
        placements = assign_midterm_seating(students, [ClassroomConfig("A101", 2, 3)])

        # Bench at col 2 has no right neighbour: the pair's junior is not placed
        assert placements[0].grid == [
            ["S1", "J1", "S2"],
            ["S3", "J3", None],
        ]
        seated = placements[0].roll_numbers()
        assert "J2" not in seated

    def test_odd_columns_single_leftover_in_last_column(self):
        students = [make_student(f"J{i}", 2) for i in range(1, 5)]
        placements = assign_midterm_seating(students, [ClassroomConfig("A101", 2, 3)])

        assert placements[0].grid == [
            ["J1", "J2", "J3"],
            ["J4", None, None],
        ]

    def test_single_column_grid(self):
        students = [make_student("S1", 4), make_student("J1", 1), make_student("J2", 1)]
        placements = assign_midterm_seating(students, [ClassroomConfig("A101", 3, 1)])

        # Pair seats only its senior; leftover J2 takes the next bench
        assert placements[0].grid == [["S1"], ["J2"], [None]]

    def test_no_duplicates(self):
        students = [make_student(f"Y{y}-{i:02d}", y) for y in range(1, 5) for i in range(9)]
        configs = [ClassroomConfig("A101", 4, 5), ClassroomConfig("A102", 3, 6)]

        placements = assign_midterm_seating(students, configs)
        seated = [r for p in placements for r in p.roll_numbers()]
        assert len(seated) == len(set(seated))
        for p, cfg in zip(placements, configs):
            assert p.occupied_seats <= cfg.cell_count

    def test_deterministic(self):
        students = [make_student(f"Y{y}-{i}", y) for y in range(1, 5) for i in range(4)]
        configs = [ClassroomConfig("A101", 3, 4)]
        first = assign_midterm_seating(students, configs)
        second = assign_midterm_seating(list(reversed(students)), configs)
        assert first[0].grid == second[0].grid


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
