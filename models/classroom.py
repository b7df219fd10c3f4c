from dataclasses import dataclass


@dataclass
class Classroom:
    """Persisted classroom record as uploaded."""
    classroom_no: str
    capacity: int            # Always benches * persons_per_bench
    benches: int
    persons_per_bench: int


@dataclass
class ClassroomConfig:
    """Caller-specified layout for one classroom, used for a single generation request."""
    classroom_no: str
    rows: int
    cols: int

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols
