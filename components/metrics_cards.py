"""Reusable KPI metric card widgets."""

import streamlit as st
from typing import List

from models.seating import SeatingResult


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
            )


def render_result_metrics(result: SeatingResult, unseated: List[str]):
    """KPI row for a seating result: students, seated, configured seats, empty seats."""
    empty = result.total_capacity - result.seated_count
    render_metric_row([
        {"label": "Students", "value": f"{result.total_students:,}"},
        {"label": "Seated", "value": f"{result.seated_count:,}",
         "delta": f"-{len(unseated)} unseated" if unseated else "All seated",
         "delta_color": "normal" if unseated else "off"},
        {"label": "Configured Seats", "value": f"{result.total_capacity:,}"},
        {"label": "Empty Seats", "value": f"{empty:,}"},
        {"label": "Classrooms", "value": str(len(result.placements))},
    ])


def render_alert_card(message: str, level: str = "warning"):
    """Render an alert card with appropriate styling."""
    if level == "error":
        st.error(message, icon="🔴")
    elif level == "warning":
        st.warning(message, icon="🟡")
    else:
        st.info(message, icon="🔵")
