"""Global sidebar: data status, zone filter and optimizer settings."""

import streamlit as st
from dataclasses import dataclass
from typing import Optional

from data.session_store import get_snapshot, get_rule_config, set_rule_config, is_data_loaded
from config.defaults import MAX_REFINE_ITERATIONS


@dataclass
class SidebarState:
    zone_filter: Optional[str]


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Desk Move Planner")
        st.divider()

        snapshot = get_snapshot()
        zone_filter = None
        if snapshot and snapshot.zones:
            zone_names = {z.zone_id: z.name for z in snapshot.zones}
            selected = st.selectbox(
                "Zone",
                options=["All"] + list(zone_names.keys()),
                format_func=lambda x: zone_names.get(x, x),
                key="sidebar_zone",
            )
            zone_filter = None if selected == "All" else selected

        config = dict(get_rule_config())
        config["max_refine_iterations"] = st.number_input(
            "Max refinement iterations",
            min_value=1, max_value=1000,
            value=config.get("max_refine_iterations", MAX_REFINE_ITERATIONS),
            key="sidebar_max_iter",
        )
        set_rule_config(config)

        st.divider()

        if is_data_loaded():
            st.success("Data loaded")
            st.caption(f"Seated: {snapshot.seated_count} / {len(snapshot.employees)} people")
            st.caption(f"Pinned desks: {len(snapshot.pinned_desks)}")
            st.caption(f"Unavailable desks: {len(snapshot.unavailable_desks)}")
        else:
            st.warning("No data loaded — go to Data tab")

    return SidebarState(zone_filter=zone_filter)
