"""Generates human-readable explanations for seating results."""

from typing import Dict, List

from models.seating import SeatingResult
from models.student import StudentRecord
from engine.grid import bucket_roll_numbers
from engine.midterm import build_pairs
from engine.semester import department_order


def explain_semester_seating(
    result: SeatingResult,
    students: List[StudentRecord],
    unseated: List[str],
) -> List[str]:
    """Produce step-by-step explanation for a semester (department alternation) result."""
    steps = []
    buckets = bucket_roll_numbers(students, key=lambda s: s.dept)
    departments = department_order(buckets)
    sizes = ", ".join(f"{d}: {len(buckets[d])}" for d in departments)

    steps.append(
        f"Step 1 - Departments: {len(students)} students grouped into "
        f"{len(departments)} departments ({sizes}), roll numbers sorted ascending"
    )
    steps.append(
        f"Step 2 - Alternation order: {' > '.join(departments)} (alphabetical), "
        f"repeating every {len(departments)} seats in row-major order"
    )
    steps.append(_fill_summary(result))
    steps.extend(_unseated_notes(unseated))
    return steps


def explain_midterm_seating(
    result: SeatingResult,
    students: List[StudentRecord],
    unseated: List[str],
) -> List[str]:
    """Produce step-by-step explanation for a mid-term (senior-junior pairing) result."""
    steps = []
    pairs, leftovers = build_pairs(students)
    by_year = bucket_roll_numbers(students, key=lambda s: s.year)
    counts = ", ".join(f"Year {y}: {len(by_year.get(y, []))}" for y in (1, 2, 3, 4))
    seniors = sum(1 for s in students if s.is_senior)
    juniors = len(students) - seniors

    steps.append(f"Step 1 - Years: {counts}")
    steps.append(
        f"Step 2 - Seniors (years 3, 4): {seniors}; juniors (years 1, 2): {juniors} "
        f"=> {len(pairs)} bench pairs"
    )
    side = "seniors" if seniors > juniors else "juniors"
    if leftovers:
        steps.append(f"Step 3 - Leftovers: {len(leftovers)} unpaired {side} seated after all pairs")
    else:
        steps.append("Step 3 - Leftovers: none, every student is paired")
    steps.append(_fill_summary(result))
    steps.extend(_unseated_notes(unseated))
    return steps


def explain_seating(
    result: SeatingResult,
    students: List[StudentRecord],
    unseated: List[str],
) -> List[str]:
    if result.exam_type == "mid":
        return explain_midterm_seating(result, students, unseated)
    return explain_semester_seating(result, students, unseated)


def _fill_summary(result: SeatingResult) -> str:
    per_room: Dict[str, int] = {p.classroom_no: p.occupied_seats for p in result.placements}
    detail = ", ".join(f"{room}: {n}" for room, n in per_room.items())
    return (
        f"Fill: {result.seated_count} of {result.total_students} students seated in "
        f"{result.total_capacity} configured seats ({detail})"
    )


def _unseated_notes(unseated: List[str]) -> List[str]:
    if not unseated:
        return []
    preview = ", ".join(unseated[:5]) + (" ..." if len(unseated) > 5 else "")
    return [
        f"Note: {len(unseated)} students could not be seated because their group ran "
        f"out of matching seats ({preview}). Add seats or rebalance the layout."
    ]
