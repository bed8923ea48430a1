"""Tab 2: Optimize — suggest a seating that clusters departments together."""

import logging

import streamlit as st
import pandas as pd

from data.session_store import (
    get_snapshot, get_rule_config, get_optimization_result,
    set_optimization_result, set_current_seating, is_data_loaded,
)
from engine.optimizer import optimize_seating, OptimizationMode
from engine.move_planner import get_desk_label
from models.seating import employee_desks
from components.metrics_cards import render_score_metrics
from components.charts import score_comparison_bar
from config.defaults import OPTIMIZATION_MODES, DEFAULT_OPTIMIZATION_MODE

log = logging.getLogger(__name__)

MODE_LABELS = {
    OptimizationMode.MINIMIZE_MOVES.value: "Minimize moves — improve the current seating with a few swaps",
    OptimizationMode.FULL.value: "Full re-pack — regroup every department from scratch",
}


def render(sidebar_state):
    """Render the Optimize tab."""
    st.header("Optimize Seating")

    if not is_data_loaded():
        st.info("No data loaded. Please load an office in the Data tab.")
        return

    snapshot = get_snapshot()
    config = get_rule_config()

    mode = st.radio(
        "Optimization mode",
        options=OPTIMIZATION_MODES,
        index=OPTIMIZATION_MODES.index(config.get("optimization_mode", DEFAULT_OPTIMIZATION_MODE)),
        format_func=lambda k: MODE_LABELS[k],
        key="opt_mode",
    )

    st.caption(
        f"{len(snapshot.pinned_desks)} pinned desk(s) keep their occupant; "
        f"{len(snapshot.unavailable_desks)} unavailable desk(s) stay empty."
    )

    if st.button("Run Optimization", type="primary", key="btn_run_opt"):
        with st.spinner("Optimizing..."):
            result = optimize_seating(
                snapshot.seating,
                snapshot.desks,
                snapshot.pinned_desks,
                snapshot.unavailable_desks,
                mode,
                snapshot.employees,
                rule_config=config,
            )
        set_optimization_result(result)

    result = get_optimization_result()
    if not result:
        return

    st.divider()
    st.subheader("Result")
    render_score_metrics(result.previous_score, result.cluster_score, result.moves)

    col1, col2 = st.columns([2, 3])
    with col1:
        st.plotly_chart(
            score_comparison_bar(result.previous_score, result.cluster_score),
            use_container_width=True,
        )
    with col2:
        for line in result.explanation_steps:
            st.markdown(f"- {line}")

    # --- Who moves ---
    names = {e.employee_id: e.name for e in snapshot.employees}
    before = employee_desks(snapshot.seating)
    moved_rows = []
    for desk_id, emp_id in result.seating.items():
        if emp_id and before.get(emp_id) != desk_id:
            moved_rows.append({
                "Employee": names.get(emp_id, emp_id),
                "From": get_desk_label(before.get(emp_id), snapshot.desk_names),
                "To": get_desk_label(desk_id, snapshot.desk_names),
            })
    if moved_rows:
        st.dataframe(pd.DataFrame(moved_rows), use_container_width=True, hide_index=True)
    else:
        st.success("Current seating is already well clustered — no moves suggested.")
        return

    st.divider()
    if st.button("Apply Optimized Seating", type="primary", key="btn_apply_opt"):
        set_current_seating(result.seating)
        log.info("Applied %s optimization (%d moves)", result.mode.value, result.moves)
        st.success("Seating updated. See the Move Plan tab for the step-by-step plan.")
        st.rerun()
