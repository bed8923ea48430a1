"""Desk Move Planner — Streamlit entry point."""

import logging

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from config.defaults import LOG_FORMAT, LOG_LEVEL
from tabs import (
    tab_floor_view,
    tab_optimize,
    tab_move_plan,
    tab_data,
)

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


def main():
    st.set_page_config(
        page_title="Desk Move Planner",
        page_icon="🪑",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3, tab4 = st.tabs([
        "🗺️ Floor View",
        "⚡ Optimize",
        "📋 Move Plan",
        "⚙️ Data",
    ])

    with tab1:
        tab_floor_view.render(sidebar_state)
    with tab2:
        tab_optimize.render(sidebar_state)
    with tab3:
        tab_move_plan.render(sidebar_state)
    with tab4:
        tab_data.render(sidebar_state)


if __name__ == "__main__":
    main()
