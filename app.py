"""Exam Seating Planner — Streamlit entry point."""

import logging
import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from config.defaults import LOG_LEVEL
from tabs import (
    tab_upload,
    tab_generate,
    tab_history,
)

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def main():
    st.set_page_config(
        page_title="Exam Seating Planner",
        page_icon="🪑",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3 = st.tabs([
        "📤 Upload",
        "🪑 Generate Seating",
        "🗂️ History",
    ])

    with tab1:
        tab_upload.render(sidebar_state)
    with tab2:
        tab_generate.render(sidebar_state)
    with tab3:
        tab_history.render(sidebar_state)


if __name__ == "__main__":
    main()
