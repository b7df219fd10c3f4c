"""Semester seating: round-robin department alternation across each classroom grid."""

import logging
from typing import Dict, List

from models.classroom import ClassroomConfig
from models.seating import Placement
from models.student import StudentRecord
from engine.grid import bucket_roll_numbers, empty_grid

logger = logging.getLogger(__name__)


def department_order(buckets: Dict[str, List[str]]) -> List[str]:
    """Departments present in the roster, alphabetically by code.

    This order fixes the alternation pattern, so it must not depend on
    dict insertion order or on how the roster was sorted upstream.
    """
    return sorted(buckets)


def assign_semester_seating(
    students: List[StudentRecord],
    configs: List[ClassroomConfig],
) -> List[Placement]:
    """Fill each grid row-major, cycling through departments by cell index.

    A cell whose department bucket is exhausted stays empty; no other
    department takes its place. Students left once every grid is filled are
    dropped, so capacity must be validated first.
    """
    buckets = bucket_roll_numbers(students, key=lambda s: s.dept)
    departments = department_order(buckets)
    cursors = {dept: 0 for dept in departments}

    placements = []
    for config in configs:
        grid = empty_grid(config.rows, config.cols)
        placed = 0
        if departments:
            for row in range(config.rows):
                for col in range(config.cols):
                    dept = departments[(row * config.cols + col) % len(departments)]
                    if cursors[dept] < len(buckets[dept]):
                        grid[row][col] = buckets[dept][cursors[dept]]
                        cursors[dept] += 1
                        placed += 1

        logger.debug("Classroom %s: placed %d of %d cells", config.classroom_no, placed, config.cell_count)
        placements.append(Placement(classroom_no=config.classroom_no, grid=grid))

    return placements
