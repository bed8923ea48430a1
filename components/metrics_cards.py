"""KPI metric rows for optimization results and move plans."""

import streamlit as st

from models.move_plan import MovePlanSummary


def render_score_metrics(previous_score: float, new_score: float, moves: int):
    col1, col2, col3 = st.columns(3)
    col1.metric("Current Score", f"{previous_score:g}")
    col2.metric(
        "Optimized Score", f"{new_score:g}",
        delta=f"{new_score - previous_score:+g}",
    )
    col3.metric("People Moving", moves)


def render_plan_summary(summary: MovePlanSummary):
    """Render the move plan summary counts as one row of metric cards."""
    cols = st.columns(6)
    cols[0].metric("Total Steps", summary.total_steps)
    cols[1].metric("Moving", summary.people_moving)
    cols[2].metric("Swap Groups", summary.cycles_detected)
    cols[3].metric("Leaving", summary.removals)
    cols[4].metric("Arriving", summary.new_assignments)
    cols[5].metric("Unchanged", summary.unchanged)
