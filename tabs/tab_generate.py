"""Tab 2: Generate — classroom layouts, seat assignment, and the resulting seat maps."""

import logging
import streamlit as st
import pandas as pd

from data.loader import parse_configs
from data.session_store import (
    get_students, get_classrooms, get_latest_result, add_result, add_audit_entry,
)
from data.exporter import export_pdf, default_pdf_path
from engine.errors import SeatingError
from engine.seating_engine import generate_seating
from components.result_view import render_result
from config.defaults import DEFAULT_EXPORT_DIR, EXAM_TYPE_LABELS, MAX_GRID_DIM, MIN_GRID_DIM

logger = logging.getLogger(__name__)


def _default_layout(classroom) -> tuple:
    """Rows x cols that fit the classroom: two benches per row, capped at the grid limit."""
    cols = min(MAX_GRID_DIM, 2 * classroom.persons_per_bench)
    rows = max(MIN_GRID_DIM, min(MAX_GRID_DIM, classroom.capacity // cols))
    return rows, cols


def _layout_editor(classrooms) -> pd.DataFrame:
    base = []
    for c in sorted(classrooms, key=lambda c: c.classroom_no):
        rows, cols = _default_layout(c)
        base.append({"Use": True, "Classroom": c.classroom_no, "Capacity": c.capacity, "Rows": rows, "Cols": cols})

    return st.data_editor(
        pd.DataFrame(base),
        column_config={
            "Use": st.column_config.CheckboxColumn("Use"),
            "Classroom": st.column_config.SelectboxColumn(
                "Classroom", options=[c.classroom_no for c in classrooms], required=True,
            ),
            "Capacity": st.column_config.NumberColumn("Capacity", disabled=True),
            "Rows": st.column_config.NumberColumn("Rows", min_value=MIN_GRID_DIM, max_value=MAX_GRID_DIM, step=1),
            "Cols": st.column_config.NumberColumn("Cols", min_value=MIN_GRID_DIM, max_value=MAX_GRID_DIM, step=1),
        },
        num_rows="dynamic",
        use_container_width=True,
        hide_index=True,
        key="layout_editor",
    )


def _attach_pdf(result):
    """Write the PDF next to the result. A rendering failure leaves the result without one."""
    try:
        path = default_pdf_path(result, DEFAULT_EXPORT_DIR)
        export_pdf(result, path)
        result.pdf_path = path
    except Exception:
        logger.exception("PDF generation failed for %s", result.result_id)
        st.warning("Seating generated, but the PDF could not be created.")


def render(sidebar_state):
    """Render the Generate tab."""
    st.header("Generate Seating")

    students = get_students()
    classrooms = get_classrooms()
    if not students or not classrooms:
        st.info("Upload students and classrooms in the Upload tab first.")
        return

    st.caption(
        f"**{EXAM_TYPE_LABELS[sidebar_state.exam_type]}** for {len(students)} students. "
        "Classrooms are filled in the order listed; untick a row to leave it out."
    )

    edited = _layout_editor(classrooms)
    selected = edited[edited["Use"].fillna(False).astype(bool)] if not edited.empty else edited
    configured = int((selected["Rows"].fillna(0) * selected["Cols"].fillna(0)).sum()) if not selected.empty else 0
    st.caption(f"Configured seats: {configured:,} · Students: {len(students):,}")

    if st.button("Generate Seating Plan", type="primary", key="btn_generate"):
        try:
            configs = parse_configs(selected) if not selected.empty else []
            result = generate_seating(
                sidebar_state.exam_type,
                students,
                classrooms,
                configs,
                created_by=sidebar_state.operator,
            )
        except SeatingError as e:
            st.error(str(e))
        except ValueError:
            st.error("Every selected classroom needs whole-number rows and columns.")
        else:
            _attach_pdf(result)
            add_result(result)
            add_audit_entry(
                "generate",
                f"{result.exam_type} seating, {result.seated_count}/{result.total_students} seated "
                f"in {len(result.placements)} classrooms",
                result_id=result.result_id,
                performed_by=sidebar_state.operator,
            )
            st.success("Seating arrangement generated successfully")

    st.divider()

    latest = get_latest_result()
    if latest:
        st.subheader("Latest Seating Plan")
        render_result(latest, key_prefix="latest")
