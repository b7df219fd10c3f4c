"""Global sidebar controls for exam type and operator."""

import streamlit as st
from dataclasses import dataclass
from data.session_store import get_students, get_classrooms, get_results
from config.defaults import EXAM_TYPES, EXAM_TYPE_LABELS, DEFAULT_EXAM_TYPE


@dataclass
class SidebarState:
    exam_type: str
    operator: str


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Exam Seating Planner")
        st.divider()

        exam_type = st.radio(
            "Exam Type",
            options=EXAM_TYPES,
            format_func=lambda x: EXAM_TYPE_LABELS.get(x, x),
            index=EXAM_TYPES.index(st.session_state["sidebar_state"].get("exam_type", DEFAULT_EXAM_TYPE)),
            key="sidebar_exam_type",
        )

        operator = st.text_input(
            "Prepared by",
            value=st.session_state["sidebar_state"].get("operator", ""),
            placeholder="Employee ID or name",
            key="sidebar_operator",
        )

        st.session_state["sidebar_state"] = {"exam_type": exam_type, "operator": operator}

        st.divider()

        # Data status indicator
        students = get_students()
        classrooms = get_classrooms()
        if students:
            st.success(f"{len(students)} students loaded")
        else:
            st.warning("No students loaded — go to Upload tab")
        if classrooms:
            st.success(f"{len(classrooms)} classrooms loaded")
        else:
            st.warning("No classrooms loaded — go to Upload tab")

        results = get_results()
        if results:
            st.caption(f"Seating plans generated this session: {len(results)}")

    return SidebarState(exam_type=exam_type, operator=operator.strip())
