"""Schema and row validation for uploaded student and classroom files."""

import re
from dataclasses import dataclass, field
from typing import List, Optional
import pandas as pd

from config.defaults import (
    DEPARTMENTS, MIN_YEAR, MAX_YEAR, SECTION_PATTERN,
    MIN_CLASSROOM_CAPACITY, MAX_CLASSROOM_CAPACITY, MAX_BENCHES, MAX_PERSONS_PER_BENCH,
)
from data.loader import cell_text


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def fail(self, message: str):
        self.is_valid = False
        self.errors.append(message)


STUDENT_REQUIRED_COLUMNS = ["rollNo", "dept", "section", "year"]

CLASSROOM_REQUIRED_COLUMNS = ["classroomNo", "capacity", "benches", "personsPerBench"]


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.fail(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.fail(f"{file_label}: File is empty or has no valid data.")
    return result


def _is_blank(value) -> bool:
    return value is None or (not isinstance(value, str) and pd.isna(value)) or str(value).strip() == ""


def _to_int(value) -> Optional[int]:
    """Parse spreadsheet cell values like 3, 3.0 or "3". Non-integral values give None."""
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return None
    if not number.is_integer():
        return None
    return int(number)


def _duplicates(values: List[str]) -> List[str]:
    seen = set()
    dupes = []
    for v in values:
        if v in seen and v not in dupes:
            dupes.append(v)
        seen.add(v)
    return dupes


def validate_students(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, STUDENT_REQUIRED_COLUMNS, "Students")
    if not result.is_valid:
        return result

    roll_numbers = []
    # Header is spreadsheet row 1
    for row_num, (_, row) in enumerate(df.iterrows(), start=2):
        if _is_blank(row["rollNo"]):
            result.fail(f"Row {row_num}: Roll number is required")
            continue
        if _is_blank(row["dept"]):
            result.fail(f"Row {row_num}: Department is required")
            continue
        if _is_blank(row["section"]):
            result.fail(f"Row {row_num}: Section is required")
            continue
        if _is_blank(row["year"]):
            result.fail(f"Row {row_num}: Year is required")
            continue

        year = _to_int(row["year"])
        if year is None or year < MIN_YEAR or year > MAX_YEAR:
            result.fail(f"Row {row_num}: Year must be between {MIN_YEAR} and {MAX_YEAR}")
            continue

        dept = str(row["dept"]).strip().upper()
        if dept not in DEPARTMENTS:
            result.fail(
                f'Row {row_num}: Invalid department "{dept}". '
                f"Valid departments are: {', '.join(DEPARTMENTS)}"
            )
            continue

        section = str(row["section"]).strip().upper()
        if not re.match(SECTION_PATTERN, section):
            result.fail(f"Row {row_num}: Section must be a single uppercase letter")
            continue

        roll_numbers.append(cell_text(row["rollNo"]).upper())

    dupes = _duplicates(roll_numbers)
    if dupes:
        result.fail(f"Students: Duplicate roll numbers found: {', '.join(dupes)}")

    return result


def validate_classrooms(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, CLASSROOM_REQUIRED_COLUMNS, "Classrooms")
    if not result.is_valid:
        return result

    bounds = [
        ("capacity", "Capacity", MIN_CLASSROOM_CAPACITY, MAX_CLASSROOM_CAPACITY),
        ("benches", "Benches", 1, MAX_BENCHES),
        ("personsPerBench", "Persons per bench", 1, MAX_PERSONS_PER_BENCH),
    ]

    classroom_numbers = []
    for row_num, (_, row) in enumerate(df.iterrows(), start=2):
        if _is_blank(row["classroomNo"]):
            result.fail(f"Row {row_num}: Classroom number is required")
            continue

        values = {}
        for column, label, low, high in bounds:
            if _is_blank(row[column]):
                result.fail(f"Row {row_num}: {label} is required")
                break
            value = _to_int(row[column])
            if value is None or value < low or value > high:
                result.fail(f"Row {row_num}: {label} must be between {low} and {high}")
                break
            values[column] = value
        else:
            expected = values["benches"] * values["personsPerBench"]
            if values["capacity"] != expected:
                result.fail(
                    f"Row {row_num}: Capacity ({values['capacity']}) must equal benches "
                    f"({values['benches']}) x persons per bench ({values['personsPerBench']}) = {expected}"
                )
                continue
            classroom_numbers.append(cell_text(row["classroomNo"]).upper())

    dupes = _duplicates(classroom_numbers)
    if dupes:
        result.fail(f"Classrooms: Duplicate classroom numbers found: {', '.join(dupes)}")

    return result


def validate_roster_against_classrooms(student_count: int, total_capacity: int) -> ValidationResult:
    """Warn early when the uploaded classroom set cannot hold the roster at all."""
    result = ValidationResult()
    if student_count > total_capacity:
        result.warnings.append(
            f"Uploaded classrooms hold {total_capacity} seats in total but the roster has "
            f"{student_count} students. Generation will fail until more classrooms are added."
        )
    return result
