"""Capacity checks that gate both seating assigners."""

import logging
from typing import Dict, List

from models.classroom import Classroom, ClassroomConfig
from engine.errors import (
    CapacityExceeded, InsufficientSeats, InvalidClassroomConfig, UnknownClassroom,
)
from config.defaults import MIN_GRID_DIM, MAX_GRID_DIM

logger = logging.getLogger(__name__)


def validate_config_bounds(configs: List[ClassroomConfig]) -> None:
    """Reject layouts whose rows or cols fall outside the allowed grid size."""
    for config in configs:
        for field_name in ("rows", "cols"):
            value = getattr(config, field_name)
            if not isinstance(value, int) or not MIN_GRID_DIM <= value <= MAX_GRID_DIM:
                raise InvalidClassroomConfig(
                    config.classroom_no, field_name, value, MIN_GRID_DIM, MAX_GRID_DIM,
                )


def validate_capacity(
    roster_size: int,
    configs: List[ClassroomConfig],
    classrooms: List[Classroom],
) -> int:
    """Check every config against its classroom and the roster. Returns total configured capacity.

    Checks run in config order: unknown classroom, per-classroom capacity, then
    aggregate capacity against the roster size.
    """
    classroom_map: Dict[str, Classroom] = {c.classroom_no: c for c in classrooms}

    total_capacity = 0
    for config in configs:
        classroom = classroom_map.get(config.classroom_no)
        if classroom is None:
            logger.info("Rejected config: classroom %s not found", config.classroom_no)
            raise UnknownClassroom(config.classroom_no)

        requested = config.cell_count
        if requested > classroom.capacity:
            logger.info(
                "Rejected config: classroom %s requested %d cells, capacity %d",
                config.classroom_no, requested, classroom.capacity,
            )
            raise CapacityExceeded(config.classroom_no, classroom.capacity, requested)

        total_capacity += requested

    if roster_size > total_capacity:
        logger.info("Rejected request: %d students, %d seats", roster_size, total_capacity)
        raise InsufficientSeats(roster_size, total_capacity)

    return total_capacity
