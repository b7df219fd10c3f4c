"""Tab 1: Upload — student roster and classroom master data."""

import logging
import streamlit as st
import pandas as pd

from data.loader import (
    load_file, normalize_columns, parse_students, parse_classrooms,
    students_to_df, classrooms_to_df,
)
from data.validator import validate_students, validate_classrooms, validate_roster_against_classrooms
from data.sample_data import generate_students_df, generate_classrooms_df
from data.session_store import (
    get_students, get_classrooms, set_students, set_classrooms, add_audit_entry,
)
from components.charts import roster_composition_bar

logger = logging.getLogger(__name__)


def _show_validation(result) -> bool:
    for e in result.errors:
        st.error(e)
    for w in result.warnings:
        st.warning(w)
    return result.is_valid


def _capacity_health_check():
    students = get_students()
    classrooms = get_classrooms()
    if not students or not classrooms:
        return
    total_capacity = sum(c.capacity for c in classrooms)
    _show_validation(validate_roster_against_classrooms(len(students), total_capacity))


def _load_students(df: pd.DataFrame, operator: str, source: str) -> bool:
    """Validate and store a roster, replacing the current one."""
    df = normalize_columns(df)
    if not _show_validation(validate_students(df)):
        return False

    students = parse_students(df)
    set_students(students)
    add_audit_entry("upload_students", f"{len(students)} students from {source}", performed_by=operator)
    logger.info("Loaded %d students from %s", len(students), source)
    st.success(f"Successfully uploaded {len(students)} students")
    _capacity_health_check()
    return True


def _load_classrooms(df: pd.DataFrame, operator: str, source: str) -> bool:
    """Validate and store the classroom set, replacing the current one."""
    df = normalize_columns(df)
    if not _show_validation(validate_classrooms(df)):
        return False

    classrooms = parse_classrooms(df)
    set_classrooms(classrooms)
    add_audit_entry("upload_classrooms", f"{len(classrooms)} classrooms from {source}", performed_by=operator)
    logger.info("Loaded %d classrooms from %s", len(classrooms), source)
    st.success(f"Successfully uploaded {len(classrooms)} classrooms")
    _capacity_health_check()
    return True


def render(sidebar_state):
    """Render the Upload tab."""
    st.header("Upload Data")
    st.caption("Uploading a file replaces the current roster or classroom set. Only the first sheet is read.")

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Students")
        st.caption("Columns: **rollNo**, **dept**, **section**, **year**")
        students_file = st.file_uploader("Student roster", type=["csv", "xlsx"], key="upload_students")
        if st.button("Upload & Validate Students", type="primary", key="btn_upload_students"):
            if students_file:
                try:
                    _load_students(load_file(students_file), sidebar_state.operator, students_file.name)
                except Exception as e:
                    logger.exception("Student upload failed")
                    st.error(f"Error processing file. Please ensure it's a valid Excel or CSV file. ({e})")
            else:
                st.warning("Please upload a student file.")

    with col2:
        st.subheader("Classrooms")
        st.caption("Columns: **classroomNo**, **capacity**, **benches**, **personsPerBench**")
        classrooms_file = st.file_uploader("Classroom master", type=["csv", "xlsx"], key="upload_classrooms")
        if st.button("Upload & Validate Classrooms", type="primary", key="btn_upload_classrooms"):
            if classrooms_file:
                try:
                    _load_classrooms(load_file(classrooms_file), sidebar_state.operator, classrooms_file.name)
                except Exception as e:
                    logger.exception("Classroom upload failed")
                    st.error(f"Error processing file. Please ensure it's a valid Excel or CSV file. ({e})")
            else:
                st.warning("Please upload a classroom file.")

    if st.button("Load Sample Data", key="btn_sample"):
        _load_students(generate_students_df(), sidebar_state.operator, "sample data")
        _load_classrooms(generate_classrooms_df(), sidebar_state.operator, "sample data")

    st.divider()

    # --- Current Data ---
    students = get_students()
    classrooms = get_classrooms()

    preview1, preview2 = st.tabs(["Students", "Classrooms"])
    with preview1:
        if students:
            st.plotly_chart(roster_composition_bar(students), use_container_width=True)
            df = students_to_df(students).sort_values("rollNo")
            st.dataframe(df, use_container_width=True, height=350, hide_index=True)
        else:
            st.info("No students uploaded yet.")
    with preview2:
        if classrooms:
            df = classrooms_to_df(classrooms).sort_values("classroomNo")
            st.dataframe(df, use_container_width=True, hide_index=True)
            st.caption(f"Total capacity: {sum(c.capacity for c in classrooms):,} seats")
        else:
            st.info("No classrooms uploaded yet.")
