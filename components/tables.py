"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import Dict

from models.seating import Placement
from models.student import StudentRecord
from config.defaults import DEPARTMENT_COLORS, YEAR_COLORS


def placement_frame(placement: Placement) -> pd.DataFrame:
    """Seat grid as a DataFrame with R1.. row labels and C1.. column labels."""
    return pd.DataFrame(
        [[roll or "" for roll in row] for row in placement.grid],
        index=[f"R{r + 1}" for r in range(placement.rows)],
        columns=[f"C{c + 1}" for c in range(placement.cols)],
    )


def styled_seat_grid(
    placement: Placement,
    students_by_roll: Dict[str, StudentRecord],
    color_by: str = "dept",
):
    """Seat grid Styler with cells tinted by the occupant's department or year."""
    palette = YEAR_COLORS if color_by == "year" else DEPARTMENT_COLORS

    def color_seat(roll):
        student = students_by_roll.get(roll) if roll else None
        if student is None:
            return ""
        return f"background-color: {palette.get(getattr(student, color_by), '')}; color: white"

    return placement_frame(placement).style.map(color_seat)


def render_seat_grid_table(
    placement: Placement,
    students_by_roll: Dict[str, StudentRecord],
    color_by: str = "dept",
):
    st.dataframe(styled_seat_grid(placement, students_by_roll, color_by), use_container_width=True)
