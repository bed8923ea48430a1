"""Tab 1: Floor View — current seating by zone and department clustering."""

import streamlit as st
import pandas as pd

from data.session_store import get_snapshot, is_data_loaded
from engine.clustering import cluster_score
from components.charts import zone_grid_heatmap, department_zone_bar
from components.tables import render_styled_table


def render(sidebar_state):
    """Render the Floor View tab."""
    st.header("Floor View")

    if not is_data_loaded():
        st.info("No data loaded. Please load an office in the Data tab.")
        return

    snapshot = get_snapshot()
    desks = snapshot.desks
    seating = snapshot.seating
    employee_map = {e.employee_id: e for e in snapshot.employees}

    zones = snapshot.zones
    if sidebar_state.zone_filter:
        zones = [z for z in zones if z.zone_id == sidebar_state.zone_filter]

    col1, col2, col3 = st.columns(3)
    col1.metric("Clustering Score", f"{cluster_score(seating, desks, snapshot.employees):g}")
    col2.metric("Seated", snapshot.seated_count)
    col3.metric("Unseated", len(snapshot.employees) - snapshot.seated_count)

    st.divider()

    for zone in zones:
        fig = zone_grid_heatmap(
            zone, desks, seating, snapshot.employees,
            unavailable_desks=snapshot.unavailable_desks,
            pinned_desks=snapshot.pinned_desks,
        )
        st.plotly_chart(fig, use_container_width=True)

    st.divider()

    # --- Department mix ---
    mix = {}
    zone_names = {z.zone_id: z.name for z in snapshot.zones}
    for d in desks:
        emp = employee_map.get(seating.get(d.desk_id))
        if emp:
            key = (zone_names[d.zone], emp.department)
            mix[key] = mix.get(key, 0) + 1
    mix_rows = [{"Zone": z, "Department": dept, "Seated": n} for (z, dept), n in mix.items()]
    if mix_rows:
        st.plotly_chart(department_zone_bar(mix_rows), use_container_width=True)

    # --- Unseated people ---
    seated = {emp_id for emp_id in seating.values() if emp_id}
    unseated = [e for e in snapshot.employees if e.employee_id not in seated]
    if unseated:
        render_styled_table(
            pd.DataFrame([{"Name": e.name, "Department": e.department} for e in unseated]),
            title="Unseated",
        )
