"""Tab 3: Move Plan — ordered steps from the baseline seating to the current one."""

import streamlit as st
import pandas as pd

from data.session_store import (
    get_snapshot, get_baseline_seating, set_baseline_seating, is_data_loaded,
)
from engine.move_planner import compute_move_plan
from engine.explainer import explain_move_plan
from components.metrics_cards import render_plan_summary
from components.tables import render_move_plan_table


def render(sidebar_state):
    """Render the Move Plan tab."""
    st.header("Move Plan")

    with st.expander("How are moves ordered?", expanded=False):
        st.markdown("""
1. **Departures** — people leaving the floor go first and free their desk
2. **Relocations** — each move goes into a desk that is already free
3. **Swap groups** — people who need each other's desks; each group moves **together**
4. **Arrivals** — people getting a desk for the first time go last
        """)

    if not is_data_loaded():
        st.info("No data loaded. Please load an office in the Data tab.")
        return

    snapshot = get_snapshot()
    baseline = get_baseline_seating() or {}

    plan = compute_move_plan(baseline, snapshot.seating, snapshot.employees, snapshot.desk_names)
    render_plan_summary(plan.summary)

    if not plan.steps:
        st.success("Current seating matches the baseline — nothing to move.")
        return

    st.divider()
    render_move_plan_table(pd.DataFrame(plan.to_records()))

    for cycle_id, group in plan.cycle_groups().items():
        members = ", ".join(s.employee_name for s in group)
        st.warning(f"Swap group {cycle_id}: {members} must move at the same time.")

    with st.expander("Explanation", expanded=False):
        for line in explain_move_plan(plan):
            st.markdown(f"- {line}")

    st.download_button(
        "Download plan (CSV)",
        data=pd.DataFrame(plan.to_records()).to_csv(index=False),
        file_name="move_plan.csv",
        mime="text/csv",
        key="btn_download_plan",
    )

    st.divider()
    if st.button("Mark Moves Done (set current seating as baseline)", key="btn_set_baseline"):
        set_baseline_seating(snapshot.seating)
        st.rerun()
