from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

SeatGrid = List[List[Optional[str]]]


@dataclass
class Placement:
    """Seating grid produced for one classroom in one generation run."""
    classroom_no: str
    grid: SeatGrid

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols

    @property
    def occupied_seats(self) -> int:
        return sum(1 for row in self.grid for cell in row if cell is not None)

    def roll_numbers(self) -> List[str]:
        """Occupants in row-major (seating) order."""
        return [cell for row in self.grid for cell in row if cell is not None]


@dataclass
class SeatingResult:
    result_id: str
    exam_type: str                 # "semester" or "mid"
    placements: List[Placement]
    total_students: int
    total_capacity: int
    created_by: str = ""
    created_at: datetime = field(default_factory=datetime.now)
    pdf_path: Optional[str] = None  # Set after PDF export

    @property
    def seated_count(self) -> int:
        return sum(p.occupied_seats for p in self.placements)

    @property
    def pdf_generated(self) -> bool:
        return self.pdf_path is not None
