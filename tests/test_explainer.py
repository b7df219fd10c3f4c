"""Tests for seating explanations."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.student import StudentRecord
from models.classroom import Classroom, ClassroomConfig
from engine.seating_engine import generate_seating, find_unseated
from engine.explainer import explain_seating


def make_student(roll, dept="CSE", year=1):
    return StudentRecord(roll, dept, "A", year)


def run(exam_type, students, rows, cols):
    classrooms = [Classroom("A101", 40, 20, 2)]
    result = generate_seating(exam_type, students, classrooms, [ClassroomConfig("A101", rows, cols)])
    return result, find_unseated(students, result.placements)


class TestExplainSeating:
    def test_semester_steps(self):
        students = [make_student("I1", "IT"), make_student("C1", "CSE")]
        result, unseated = run("semester", students, 1, 2)
        steps = explain_seating(result, students, unseated)

        assert steps[0].startswith("Step 1 - Departments: 2 students")
        assert "CSE > IT" in steps[1]
        assert steps[-1].startswith("Fill: 2 of 2 students seated")

    def test_semester_notes_unseated(self):
        students = [make_student(f"C{i}", "CSE") for i in range(3)] + [make_student("I1", "IT")]
        result, unseated = run("semester", students, 1, 4)
        steps = explain_seating(result, students, unseated)

        assert unseated == ["C2"]
        assert steps[-1].startswith("Note: 1 students could not be seated")

    def test_midterm_steps(self):
        students = [make_student("S1", year=3)] + [make_student(f"J{i}", year=1) for i in range(3)]
        result, unseated = run("mid", students, 2, 2)
        steps = explain_seating(result, students, unseated)

        assert "Seniors (years 3, 4): 1; juniors (years 1, 2): 3" in steps[1]
        assert "=> 1 bench pairs" in steps[1]
        assert steps[2] == "Step 3 - Leftovers: 2 unpaired juniors seated after all pairs"


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
