"""File upload parsing — CSV/XLSX into typed model lists."""

import pandas as pd
from typing import Dict, List
from models.student import StudentRecord
from models.classroom import Classroom, ClassroomConfig


# Accepted header spellings, matched case-insensitively after stripping spaces/underscores
COLUMN_ALIASES = {
    "rollNo": ["rollno", "rollnumber", "roll", "registerno", "regno"],
    "dept": ["dept", "department", "branch"],
    "section": ["section", "sec"],
    "year": ["year", "studyyear", "academicyear"],
    "classroomNo": ["classroomno", "classroom", "roomno", "room", "classroomnumber"],
    "capacity": ["capacity", "seats", "totalseats"],
    "benches": ["benches", "benchcount", "noofbenches"],
    "personsPerBench": ["personsperbench", "perbench", "seatsperbench", "studentsperbench"],
}


def _header_key(name) -> str:
    return "".join(ch for ch in str(name).lower() if ch.isalnum())


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Rename recognised header variants (e.g. 'Roll No', 'Department') to canonical names."""
    lookup: Dict[str, str] = {}
    for canonical, aliases in COLUMN_ALIASES.items():
        for alias in aliases:
            lookup[alias] = canonical

    renames = {}
    for col in df.columns:
        canonical = lookup.get(_header_key(col))
        if canonical and canonical not in df.columns and canonical not in renames.values():
            renames[col] = canonical
    return df.rename(columns=renames)


def cell_text(value) -> str:
    """Stripped text of a cell; integral floats (21001.0) lose their decimal part."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def parse_students(df: pd.DataFrame) -> List[StudentRecord]:
    """Convert a validated students DataFrame into StudentRecord objects."""
    students = []
    for _, row in df.iterrows():
        students.append(StudentRecord(
            roll_no=cell_text(row["rollNo"]).upper(),
            dept=cell_text(row["dept"]).upper(),
            section=cell_text(row["section"]).upper(),
            year=int(float(row["year"])),
        ))
    return students


def parse_classrooms(df: pd.DataFrame) -> List[Classroom]:
    """Convert a validated classrooms DataFrame into Classroom objects."""
    classrooms = []
    for _, row in df.iterrows():
        classrooms.append(Classroom(
            classroom_no=cell_text(row["classroomNo"]).upper(),
            capacity=int(float(row["capacity"])),
            benches=int(float(row["benches"])),
            persons_per_bench=int(float(row["personsPerBench"])),
        ))
    return classrooms


def parse_configs(df: pd.DataFrame) -> List[ClassroomConfig]:
    """Convert the classroom layout editor table (Classroom, Rows, Cols) into configs.

    Rows with a blank classroom are skipped; the remaining order is preserved.
    """
    configs = []
    for _, row in df.iterrows():
        if pd.isna(row["Classroom"]) or not cell_text(row["Classroom"]):
            continue
        configs.append(ClassroomConfig(
            classroom_no=cell_text(row["Classroom"]).upper(),
            rows=int(row["Rows"]),
            cols=int(row["Cols"]),
        ))
    return configs


def students_to_df(students: List[StudentRecord]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"rollNo": s.roll_no, "dept": s.dept, "section": s.section, "year": s.year} for s in students],
        columns=["rollNo", "dept", "section", "year"],
    )


def classrooms_to_df(classrooms: List[Classroom]) -> pd.DataFrame:
    return pd.DataFrame(
        [{
            "classroomNo": c.classroom_no,
            "capacity": c.capacity,
            "benches": c.benches,
            "personsPerBench": c.persons_per_bench,
        } for c in classrooms],
        columns=["classroomNo", "capacity", "benches", "personsPerBench"],
    )


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame. Only the first sheet is read."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, sheet_name=0, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")
