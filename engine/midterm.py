"""Mid-term seating: senior-junior pairs share a bench, leftovers fill in after."""

import logging
from typing import List, Tuple

from models.classroom import ClassroomConfig
from models.seating import Placement
from models.student import StudentRecord
from engine.grid import bucket_roll_numbers, empty_grid
from config.defaults import BENCH_WIDTH, JUNIOR_YEARS, SENIOR_YEARS

logger = logging.getLogger(__name__)


def build_pairs(students: List[StudentRecord]) -> Tuple[List[Tuple[str, str]], List[str]]:
    """Pair seniors with juniors index for index. Returns (pairs, leftovers).

    Seniors are year 3 followed by year 4, juniors year 1 followed by year 2,
    each year block sorted by roll number. Leftovers are the unpaired tail of
    whichever side is longer.
    """
    by_year = bucket_roll_numbers(students, key=lambda s: s.year)
    seniors = [roll for year in SENIOR_YEARS for roll in by_year.get(year, [])]
    juniors = [roll for year in JUNIOR_YEARS for roll in by_year.get(year, [])]

    pair_count = min(len(seniors), len(juniors))
    pairs = list(zip(seniors[:pair_count], juniors[:pair_count]))
    leftovers = seniors[pair_count:] + juniors[pair_count:]
    return pairs, leftovers


def assign_midterm_seating(
    students: List[StudentRecord],
    configs: List[ClassroomConfig],
) -> List[Placement]:
    """Walk each grid bench by bench (column pairs c, c+1), pairs first then leftovers.

    On an odd-width grid the last column has no right neighbour: a pair
    placed there seats only its senior.
    """
    pairs, leftovers = build_pairs(students)
    pair_idx = 0
    left_idx = 0

    placements = []
    for config in configs:
        grid = empty_grid(config.rows, config.cols)
        for row in range(config.rows):
            for col in range(0, config.cols, BENCH_WIDTH):
                has_neighbour = col + 1 < config.cols
                if pair_idx < len(pairs):
                    senior, junior = pairs[pair_idx]
                    grid[row][col] = senior
                    if has_neighbour:
                        grid[row][col + 1] = junior
                    pair_idx += 1
                elif left_idx < len(leftovers):
                    grid[row][col] = leftovers[left_idx]
                    left_idx += 1
                    if has_neighbour and left_idx < len(leftovers):
                        grid[row][col + 1] = leftovers[left_idx]
                        left_idx += 1

        placement = Placement(classroom_no=config.classroom_no, grid=grid)
        logger.debug(
            "Classroom %s: placed %d of %d cells",
            config.classroom_no, placement.occupied_seats, config.cell_count,
        )
        placements.append(placement)

    return placements
