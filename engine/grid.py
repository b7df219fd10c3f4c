"""Shared helpers for bucket-filling assigners."""

from collections import defaultdict
from typing import Callable, Dict, Hashable, List

from models.seating import SeatGrid
from models.student import StudentRecord


def empty_grid(rows: int, cols: int) -> SeatGrid:
    return [[None] * cols for _ in range(rows)]


def bucket_roll_numbers(
    students: List[StudentRecord],
    key: Callable[[StudentRecord], Hashable],
) -> Dict[Hashable, List[str]]:
    """Group roll numbers by key, each bucket sorted ascending."""
    buckets: Dict[Hashable, List[str]] = defaultdict(list)
    for s in students:
        buckets[key(s)].append(s.roll_no)
    for rolls in buckets.values():
        rolls.sort()
    return dict(buckets)
