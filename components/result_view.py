"""Shared rendering of one seating result: metrics, explanation, seat maps, downloads."""

import logging
import os
import streamlit as st
import pandas as pd
from typing import List

from models.seating import SeatingResult
from data.session_store import get_students, get_classrooms
from data.exporter import export_csv, export_pdf
from engine.seating_engine import find_unseated, get_placement_utilization
from engine.explainer import explain_seating
from components.metrics_cards import render_result_metrics, render_alert_card
from components.charts import seat_grid_heatmap, occupancy_bar
from components.tables import render_seat_grid_table
from config.defaults import EXAM_TYPE_LABELS

logger = logging.getLogger(__name__)


def _pdf_bytes(result: SeatingResult) -> bytes:
    if result.pdf_path and os.path.exists(result.pdf_path):
        with open(result.pdf_path, "rb") as f:
            return f.read()
    return export_pdf(result)


def render_result(result: SeatingResult, key_prefix: str):
    """Render a seating result. `key_prefix` keeps widget keys unique across tabs."""
    students = get_students()
    students_by_roll = {s.roll_no: s for s in students}

    st.caption(
        f"{EXAM_TYPE_LABELS.get(result.exam_type, result.exam_type)} · "
        f"generated {result.created_at.strftime('%Y-%m-%d %H:%M:%S')}"
        + (f" by {result.created_by}" if result.created_by else "")
        + f" · id {result.result_id}"
    )

    # The roster may have been replaced since generation; only judge against the
    # roster the result was built from when the sizes still match.
    unseated = find_unseated(students, result.placements) if len(students) == result.total_students else []
    render_result_metrics(result, unseated)

    if unseated:
        render_alert_card(
            f"{len(unseated)} students were not seated: their department or year group ran out "
            f"of matching seats. Add classrooms or widen the layout and regenerate.",
            level="warning",
        )

    with st.expander("How this plan was built", expanded=False):
        for step in explain_seating(result, students, unseated):
            st.markdown(f"- {step}")

    utilization = get_placement_utilization(result, get_classrooms())
    chart_col, table_col = st.columns([3, 2])
    with chart_col:
        st.plotly_chart(occupancy_bar(utilization), use_container_width=True, key=f"{key_prefix}_occ")
    with table_col:
        st.dataframe(utilization_frame(utilization), use_container_width=True, hide_index=True)

    color_by = st.radio(
        "Colour seats by",
        ["dept", "year"],
        format_func=lambda x: "Department" if x == "dept" else "Year",
        horizontal=True,
        key=f"{key_prefix}_color_by",
    )

    room_tabs = st.tabs([p.classroom_no for p in result.placements])
    for room_tab, placement in zip(room_tabs, result.placements):
        with room_tab:
            st.plotly_chart(
                seat_grid_heatmap(placement, students_by_roll, color_by),
                use_container_width=True,
                key=f"{key_prefix}_map_{placement.classroom_no}",
            )
            render_seat_grid_table(placement, students_by_roll, color_by)

    col1, col2 = st.columns(2)
    with col1:
        try:
            st.download_button(
                "Download PDF",
                _pdf_bytes(result),
                file_name=f"seating-plan-{result.result_id}.pdf",
                mime="application/pdf",
                key=f"{key_prefix}_pdf",
            )
        except Exception:
            logger.exception("PDF rendering failed for %s", result.result_id)
            st.warning("PDF could not be generated for this seating plan.")
    with col2:
        st.download_button(
            "Download Seat List (CSV)",
            export_csv(result, students_by_roll),
            file_name=f"seating-plan-{result.result_id}.csv",
            mime="text/csv",
            key=f"{key_prefix}_csv",
        )


def utilization_frame(rows: List[dict]) -> pd.DataFrame:
    return pd.DataFrame([{
        "Classroom": r["classroom_no"],
        "Layout": f"{r['rows']} x {r['cols']}",
        "Configured": r["configured_seats"],
        "Occupied": r["occupied_seats"],
        "Empty": r["empty_seats"],
        "Capacity": r["classroom_capacity"],
        "Utilization": f"{r['utilization_pct']:.0%}",
    } for r in rows])
