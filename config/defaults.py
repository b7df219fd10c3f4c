"""Default configuration constants for the Exam Seating Planner."""

import os

# Exam types: "semester" (department alternation) or "mid" (senior-junior pairing)
EXAM_TYPES = ["semester", "mid"]
DEFAULT_EXAM_TYPE = "semester"
EXAM_TYPE_LABELS = {
    "semester": "Semester Exam (department alternation)",
    "mid": "Mid-term Exam (senior-junior pairing)",
}

# Department codes accepted in the student roster
DEPARTMENTS = ["CSE", "IT", "ECE", "EEE", "MECH", "CIVIL", "CHEM", "BIO", "AERO", "AUTO"]

# Academic years
MIN_YEAR = 1
MAX_YEAR = 4
SENIOR_YEARS = [3, 4]  # Concatenated in this order, never interleaved
JUNIOR_YEARS = [1, 2]

# Section is a single uppercase letter
SECTION_PATTERN = r"^[A-Z]$"

# Per-request classroom layout bounds
MIN_GRID_DIM = 1
MAX_GRID_DIM = 20

# Persisted classroom record bounds
MIN_CLASSROOM_CAPACITY = 1
MAX_CLASSROOM_CAPACITY = 200
MAX_BENCHES = 100
MAX_PERSONS_PER_BENCH = 4

# Seats per bench in mid-term pairing (even column + odd column)
BENCH_WIDTH = 2

# History listing
HISTORY_PAGE_SIZE = 10

# Where generated PDFs are written
DEFAULT_EXPORT_DIR = os.environ.get(
    "SEATING_EXPORT_DIR",
    os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "exports"),
)

# Logging
LOG_LEVEL = os.environ.get("SEATING_LOG_LEVEL", "INFO")

# Chart colours
DEPARTMENT_COLORS = {
    "CSE": "#4A90D9",
    "IT": "#E8734A",
    "ECE": "#6AB187",
    "EEE": "#F5C542",
    "MECH": "#9B59B6",
    "CIVIL": "#1ABC9C",
    "CHEM": "#E74C3C",
    "BIO": "#95A5A6",
    "AERO": "#34495E",
    "AUTO": "#D35400",
}
YEAR_COLORS = {1: "#A8D5F2", 2: "#4A90D9", 3: "#F5B7A0", 4: "#E8734A"}
EMPTY_SEAT_COLOR = "#F0F2F6"
