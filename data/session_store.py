"""Typed wrapper around st.session_state for application data."""

import logging
import os
import streamlit as st
from typing import Dict, List, Optional
from datetime import datetime
from models.student import StudentRecord
from models.classroom import Classroom
from models.seating import SeatingResult
from models.audit import AuditEntry
from config.defaults import DEFAULT_EXAM_TYPE, HISTORY_PAGE_SIZE

logger = logging.getLogger(__name__)


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "students": [],
        "classrooms": [],
        "results": {},
        "latest_result_id": None,
        "audit_log": [],
        "sidebar_state": {
            "exam_type": DEFAULT_EXAM_TYPE,
            "operator": "",
        },
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_students() -> List[StudentRecord]:
    return st.session_state.get("students", [])


def get_classrooms() -> List[Classroom]:
    return st.session_state.get("classrooms", [])


def get_results() -> Dict[str, SeatingResult]:
    return st.session_state.get("results", {})


def get_result(result_id: str) -> Optional[SeatingResult]:
    return get_results().get(result_id)


def get_latest_result() -> Optional[SeatingResult]:
    result_id = st.session_state.get("latest_result_id")
    return get_result(result_id) if result_id else None


def get_audit_log() -> List[AuditEntry]:
    return st.session_state.get("audit_log", [])


# --- Setters ---

def set_students(students: List[StudentRecord]):
    """Replace the whole roster."""
    st.session_state["students"] = students


def set_classrooms(classrooms: List[Classroom]):
    """Replace the whole classroom set."""
    st.session_state["classrooms"] = classrooms


# --- Seating Results ---

def add_result(result: SeatingResult):
    st.session_state["results"][result.result_id] = result
    st.session_state["latest_result_id"] = result.result_id


def remove_result(result_id: str) -> bool:
    """Delete a result and its PDF file. Returns False if the result does not exist."""
    result = st.session_state["results"].pop(result_id, None)
    if result is None:
        return False

    if result.pdf_path and os.path.exists(result.pdf_path):
        try:
            os.remove(result.pdf_path)
        except OSError as e:
            logger.warning("Failed to delete PDF file %s: %s", result.pdf_path, e)

    if st.session_state.get("latest_result_id") == result_id:
        st.session_state["latest_result_id"] = None
    return True


def list_results(page: int = 1, page_size: int = HISTORY_PAGE_SIZE) -> List[SeatingResult]:
    """Results newest first, one page at a time (pages start at 1)."""
    ordered = sorted(get_results().values(), key=lambda r: r.created_at, reverse=True)
    start = (max(page, 1) - 1) * page_size
    return ordered[start:start + page_size]


def count_pages(page_size: int = HISTORY_PAGE_SIZE) -> int:
    total = len(get_results())
    return max(1, -(-total // page_size))


def clamp_page(page: int, pages: int) -> int:
    """Keep a stored page number within 1..pages after results are removed."""
    return min(max(int(page), 1), max(pages, 1))


# --- Audit ---

def add_audit_entry(
    action: str,
    detail: str,
    result_id: Optional[str] = None,
    performed_by: str = "",
):
    entry = AuditEntry(
        timestamp=datetime.now(),
        action=action,
        result_id=result_id,
        detail=detail,
        performed_by=performed_by,
    )
    st.session_state["audit_log"].append(entry)
