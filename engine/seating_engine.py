"""Seating generation pipeline: preconditions, capacity validation, assigner dispatch."""

import logging
import uuid
from typing import Callable, Dict, List, Optional

from models.classroom import Classroom, ClassroomConfig
from models.seating import Placement, SeatingResult
from models.student import StudentRecord
from engine.capacity import validate_capacity, validate_config_bounds
from engine.errors import EmptyClassroomSet, EmptyRoster, UnknownExamType
from engine.midterm import assign_midterm_seating
from engine.semester import assign_semester_seating

logger = logging.getLogger(__name__)

Assigner = Callable[[List[StudentRecord], List[ClassroomConfig]], List[Placement]]

ASSIGNERS: Dict[str, Assigner] = {
    "semester": assign_semester_seating,
    "mid": assign_midterm_seating,
}


def generate_seating(
    exam_type: str,
    students: List[StudentRecord],
    classrooms: List[Classroom],
    configs: List[ClassroomConfig],
    created_by: str = "",
    result_id: Optional[str] = None,
) -> SeatingResult:
    """Full pipeline: check inputs, validate capacity, then run the exam type's assigner.

    Raises a SeatingError subclass before any grid is built when the request
    cannot be satisfied; no partial result is ever returned.
    """
    assigner = ASSIGNERS.get(exam_type)
    if assigner is None:
        raise UnknownExamType(exam_type)
    if not configs:
        raise EmptyClassroomSet("At least one classroom configuration is required")
    validate_config_bounds(configs)

    if not students:
        raise EmptyRoster()
    if not classrooms:
        raise EmptyClassroomSet()
    total_capacity = validate_capacity(len(students), configs, classrooms)

    placements = assigner(list(students), list(configs))

    result = SeatingResult(
        result_id=result_id or uuid.uuid4().hex[:12],
        exam_type=exam_type,
        placements=placements,
        total_students=len(students),
        total_capacity=total_capacity,
        created_by=created_by,
    )

    logger.info(
        "Generated %s seating %s: %d students, %d classrooms, %d seats, %d seated",
        exam_type, result.result_id, result.total_students, len(placements),
        total_capacity, result.seated_count,
    )
    unseated = find_unseated(students, placements)
    if unseated:
        logger.warning(
            "%d students left unseated by %s seating (skewed roster): %s",
            len(unseated), exam_type, ", ".join(unseated[:10]),
        )
    return result


def find_unseated(students: List[StudentRecord], placements: List[Placement]) -> List[str]:
    """Roll numbers from the roster that appear in no grid, sorted."""
    seated = {roll for p in placements for roll in p.roll_numbers()}
    return sorted(s.roll_no for s in students if s.roll_no not in seated)


def get_placement_utilization(
    result: SeatingResult,
    classrooms: List[Classroom],
) -> List[dict]:
    """Compute occupancy stats per placement."""
    classroom_map = {c.classroom_no: c for c in classrooms}

    rows = []
    for p in result.placements:
        classroom = classroom_map.get(p.classroom_no)
        occupied = p.occupied_seats
        rows.append({
            "classroom_no": p.classroom_no,
            "rows": p.rows,
            "cols": p.cols,
            "configured_seats": p.cell_count,
            "occupied_seats": occupied,
            "empty_seats": p.cell_count - occupied,
            "classroom_capacity": classroom.capacity if classroom else None,
            "utilization_pct": occupied / p.cell_count if p.cell_count > 0 else 0,
        })
    return rows
