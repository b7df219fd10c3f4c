"""Tab 3: History — past seating plans, deletion, and the audit trail."""

import streamlit as st
import pandas as pd

from data.session_store import (
    list_results, count_pages, clamp_page, get_result, remove_result, get_audit_log, add_audit_entry,
)
from components.result_view import render_result
from config.defaults import EXAM_TYPE_LABELS


def render(sidebar_state):
    """Render the History tab."""
    st.header("Seating History")

    pages = count_pages()
    st.session_state["history_page"] = clamp_page(st.session_state.get("history_page", 1), pages)
    page = st.number_input("Page", min_value=1, max_value=pages, step=1, key="history_page")
    results = list_results(page)

    if not results:
        st.info("No seating plans generated yet.")
    else:
        summary = pd.DataFrame([{
            "ID": r.result_id,
            "Created": r.created_at.strftime("%Y-%m-%d %H:%M:%S"),
            "Exam Type": r.exam_type,
            "Students": r.total_students,
            "Seated": r.seated_count,
            "Capacity": r.total_capacity,
            "Classrooms": len(r.placements),
            "PDF": "Yes" if r.pdf_generated else "No",
            "Prepared By": r.created_by or "—",
        } for r in results])
        st.dataframe(summary, use_container_width=True, hide_index=True)
        st.caption(f"Page {page} of {pages}")

        selected_id = st.selectbox(
            "View seating plan",
            options=[r.result_id for r in results],
            format_func=lambda rid: f"{rid} · {EXAM_TYPE_LABELS.get(get_result(rid).exam_type, '')}",
            key="history_select",
        )
        selected = get_result(selected_id)
        if selected:
            render_result(selected, key_prefix=f"history_{selected_id}")

            if st.button("Delete Seating Plan", key=f"btn_delete_{selected_id}"):
                if remove_result(selected_id):
                    add_audit_entry(
                        "delete", "Seating result deleted", result_id=selected_id,
                        performed_by=sidebar_state.operator,
                    )
                    st.success("Seating result deleted successfully")
                    st.rerun()
                else:
                    st.error("Seating result not found")

    st.divider()

    # --- Audit Trail ---
    st.subheader("Audit Trail")

    audit_log = get_audit_log()
    if audit_log:
        audit_data = []
        for entry in reversed(audit_log):
            audit_data.append({
                "Timestamp": entry.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
                "Action": entry.action,
                "Result": entry.result_id or "—",
                "Detail": entry.detail,
                "By": entry.performed_by or "—",
            })
        audit_df = pd.DataFrame(audit_data)
        st.dataframe(audit_df, use_container_width=True, height=300)

        csv = audit_df.to_csv(index=False)
        st.download_button("Export Audit Log (CSV)", csv, "audit_log.csv", "text/csv")
    else:
        st.info("No audit entries yet.")
