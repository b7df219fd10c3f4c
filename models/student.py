from dataclasses import dataclass

from config.defaults import SENIOR_YEARS


@dataclass(frozen=True)
class StudentRecord:
    roll_no: str     # Unique, uppercase
    dept: str        # One of config.defaults.DEPARTMENTS
    section: str     # Single uppercase letter
    year: int        # 1-4

    @property
    def is_senior(self) -> bool:
        return self.year in SENIOR_YEARS
