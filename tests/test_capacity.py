"""Tests for the capacity validator."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.classroom import Classroom, ClassroomConfig
from engine.capacity import validate_capacity, validate_config_bounds
from engine.errors import (
    CapacityExceeded, InsufficientSeats, InvalidClassroomConfig, SeatingError, UnknownClassroom,
)


def make_classroom(no="A101", benches=10, per_bench=2):
    return Classroom(no, benches * per_bench, benches, per_bench)


def make_config(no="A101", rows=2, cols=2):
    return ClassroomConfig(no, rows, cols)


class TestValidateCapacity:
    def test_returns_total_configured_capacity(self):
        classrooms = [make_classroom("A101"), make_classroom("A102")]
        configs = [make_config("A101", 2, 3), make_config("A102", 4, 4)]

        assert validate_capacity(20, configs, classrooms) == 22

    def test_exact_fit_is_accepted(self):
        classrooms = [make_classroom("A101", benches=2, per_bench=2)]
        assert validate_capacity(4, [make_config("A101", 2, 2)], classrooms) == 4

    def test_unknown_classroom(self):
        classrooms = [make_classroom("A101")]
        with pytest.raises(UnknownClassroom) as exc:
            validate_capacity(1, [make_config("Z9", 1, 1)], classrooms)

        assert exc.value.classroom_no == "Z9"
        assert "Z9" in str(exc.value)

    def test_config_exceeds_classroom_capacity(self):
        classrooms = [make_classroom("A101", benches=3, per_bench=2)]  # capacity 6
        with pytest.raises(CapacityExceeded) as exc:
            validate_capacity(1, [make_config("A101", 3, 3)], classrooms)

        assert exc.value.classroom_no == "A101"
        assert exc.value.capacity == 6
        assert exc.value.requested == 9
        assert "Maximum capacity: 6, configured: 9" in str(exc.value)

    def test_insufficient_seats(self):
        classrooms = [make_classroom("A101", benches=1, per_bench=1)]
        with pytest.raises(InsufficientSeats) as exc:
            validate_capacity(5, [make_config("A101", 1, 1)], classrooms)

        assert exc.value.student_count == 5
        assert exc.value.total_capacity == 1

    def test_unknown_classroom_checked_before_aggregate(self):
        classrooms = [make_classroom("A101")]
        configs = [make_config("A101", 1, 1), make_config("Z9", 1, 1)]
        with pytest.raises(UnknownClassroom):
            validate_capacity(100, configs, classrooms)

    def test_errors_share_base_class(self):
        classrooms = [make_classroom("A101")]
        with pytest.raises(SeatingError):
            validate_capacity(1, [make_config("B1", 1, 1)], classrooms)
        with pytest.raises(ValueError):
            validate_capacity(1, [make_config("B1", 1, 1)], classrooms)


class TestValidateConfigBounds:
    def test_valid_bounds(self):
        validate_config_bounds([make_config(rows=1, cols=1), make_config(rows=20, cols=20)])

    def test_rows_too_large(self):
        with pytest.raises(InvalidClassroomConfig) as exc:
            validate_config_bounds([make_config(rows=21, cols=2)])
        assert exc.value.field == "rows"

    def test_cols_zero(self):
        with pytest.raises(InvalidClassroomConfig) as exc:
            validate_config_bounds([make_config(rows=2, cols=0)])
        assert exc.value.field == "cols"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
