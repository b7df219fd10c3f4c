"""Generate synthetic test datasets for the Exam Seating Planner."""

import pandas as pd
import random
import os


def generate_students_df(per_group: int = 6) -> pd.DataFrame:
    """Generate a roster: 4 departments x 4 years x `per_group` students, two sections each."""
    random.seed(42)
    rows = []
    departments = ["CSE", "IT", "ECE", "MECH"]
    for year in range(1, 5):
        batch = 25 - year  # Admission year suffix, e.g. 24 for current first-years
        for dept in departments:
            # Uneven group sizes so alternation and pairing leave realistic gaps
            count = per_group + random.randint(-2, 2)
            for i in range(1, count + 1):
                rows.append({
                    "rollNo": f"{batch}{dept}{i:03d}",
                    "dept": dept,
                    "section": "A" if i % 2 else "B",
                    "year": year,
                })
    return pd.DataFrame(rows)


def generate_classrooms_df() -> pd.DataFrame:
    """Generate classroom master data: 6 rooms across two blocks."""
    profiles = [
        {"classroomNo": "A101", "capacity": 60, "benches": 30, "personsPerBench": 2},
        {"classroomNo": "A102", "capacity": 48, "benches": 24, "personsPerBench": 2},
        {"classroomNo": "A201", "capacity": 40, "benches": 20, "personsPerBench": 2},
        {"classroomNo": "B101", "capacity": 72, "benches": 24, "personsPerBench": 3},
        {"classroomNo": "B102", "capacity": 36, "benches": 18, "personsPerBench": 2},
        {"classroomNo": "B201", "capacity": 30, "benches": 15, "personsPerBench": 2},
    ]
    return pd.DataFrame(profiles)


def generate_sample_csvs(output_dir: str):
    """Write sample CSV files to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    generate_students_df().to_csv(os.path.join(output_dir, "students.csv"), index=False)
    generate_classrooms_df().to_csv(os.path.join(output_dir, "classrooms.csv"), index=False)


def generate_sample_excel(output_dir: str):
    """Write one Excel workbook per dataset (uploads read the first sheet only)."""
    os.makedirs(output_dir, exist_ok=True)
    with pd.ExcelWriter(os.path.join(output_dir, "students.xlsx"), engine="openpyxl") as writer:
        generate_students_df().to_excel(writer, sheet_name="Students", index=False)
    with pd.ExcelWriter(os.path.join(output_dir, "classrooms.xlsx"), engine="openpyxl") as writer:
        generate_classrooms_df().to_excel(writer, sheet_name="Classrooms", index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csvs(out)
    generate_sample_excel(out)
    print("Sample CSV and Excel files generated in sample_files/")
