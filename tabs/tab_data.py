"""Tab 4: Data — office upload, sample data, and desk and people editors."""

import logging

import streamlit as st
import pandas as pd

from data.loader import (
    load_file, load_multi_sheet_excel, build_snapshot, parse_zones, parse_employees,
    desk_table, people_table, apply_desk_edits, apply_people_edits,
)
from data.validator import (
    validate_zones, validate_people, validate_seating, validate_cross_file,
)
from data.sample_data import generate_zones_df, generate_people_df, generate_seating_df
from data.session_store import get_snapshot, set_snapshot, update_snapshot, is_data_loaded
from models.layout import generate_desks

log = logging.getLogger(__name__)


def _load_and_validate(zones_df, people_df, seating_df):
    """Validate and store uploaded data."""
    errors = []
    warnings = []

    for r in [validate_zones(zones_df), validate_people(people_df), validate_seating(seating_df)]:
        errors.extend(r.errors)
        warnings.extend(r.warnings)

    if not errors:
        desks = generate_desks(parse_zones(zones_df))
        cross = validate_cross_file(desks, parse_employees(people_df), seating_df)
        warnings.extend(cross.warnings)

    if errors:
        for e in errors:
            st.error(e)
        return False

    for w in warnings:
        st.warning(w)

    snapshot = build_snapshot(zones_df, people_df, seating_df)
    set_snapshot(snapshot)
    log.info(
        "Loaded office: %d zones, %d people, %d seated",
        len(snapshot.zones), len(snapshot.employees), snapshot.seated_count,
    )

    st.success(
        f"Data loaded: {len(snapshot.zones)} zones, {len(snapshot.desks)} desks, "
        f"{len(snapshot.employees)} people ({snapshot.seated_count} seated)"
    )

    usable = len(snapshot.desks) - len(snapshot.unavailable_desks)
    if len(snapshot.employees) > usable:
        st.warning(
            f"{len(snapshot.employees)} people but only {usable} usable desks — "
            f"{len(snapshot.employees) - usable} will stay unseated."
        )
    return True


def render(sidebar_state):
    """Render the Data tab."""
    st.header("Office Data")

    upload_mode = st.radio(
        "Upload mode",
        ["Single Excel file (3 tabs)", "Three separate files"],
        horizontal=True,
        key="upload_mode",
    )

    if upload_mode == "Single Excel file (3 tabs)":
        st.caption(
            "Upload one `.xlsx` file with three sheets named: "
            "**Zones**, **People**, **Seating** "
            "(also accepts aliases like 'Layout', 'Employees', 'Desks', etc.)"
        )
        single_file = st.file_uploader("Excel workbook with 3 tabs", type=["xlsx"], key="upload_single")

        if st.button("Upload & Validate", type="primary", key="btn_upload_single"):
            if single_file:
                try:
                    z_df, p_df, s_df = load_multi_sheet_excel(single_file)
                    _load_and_validate(z_df, p_df, s_df)
                except ValueError as e:
                    st.error(f"Error loading file: {e}")
            else:
                st.warning("Please upload an Excel file.")
    else:
        col1, col2, col3 = st.columns(3)
        with col1:
            zones_file = st.file_uploader("Zones", type=["csv", "xlsx"], key="upload_zones")
        with col2:
            people_file = st.file_uploader("People", type=["csv", "xlsx"], key="upload_people")
        with col3:
            seating_file = st.file_uploader("Seating", type=["csv", "xlsx"], key="upload_seating")

        if st.button("Upload & Validate", type="primary", key="btn_upload_multi"):
            if zones_file and people_file and seating_file:
                try:
                    _load_and_validate(load_file(zones_file), load_file(people_file), load_file(seating_file))
                except ValueError as e:
                    st.error(f"Error loading files: {e}")
            else:
                st.warning("Please upload all three files.")

    if st.button("Load Sample Office", key="btn_sample"):
        _load_and_validate(generate_zones_df(), generate_people_df(), generate_seating_df())

    if not is_data_loaded():
        return

    st.divider()

    snapshot = get_snapshot()
    edit_tab1, edit_tab2 = st.tabs(["Edit Desks", "Edit People"])

    with edit_tab1:
        st.caption(
            "Change who sits where, name desks, pin desks the optimizer must not touch "
            "and mark desks unavailable. Marking an occupied desk unavailable unseats "
            "its occupant unless the desk is pinned."
        )
        edited_desks = st.data_editor(
            desk_table(snapshot),
            disabled=["Desk ID", "Name"],
            use_container_width=True,
            hide_index=True,
            key="desk_editor",
            num_rows="fixed",
        )

        if st.button("Save Desks", key="btn_save_desks"):
            raw_count = sum(
                1 for v in edited_desks["Employee ID"]
                if pd.notna(v) and str(v).strip()
            )
            edited, evicted = apply_desk_edits(snapshot, edited_desks)
            dropped = raw_count - edited.seated_count - len(evicted)
            if dropped:
                st.warning(f"{dropped} assignment(s) ignored: unknown employee or seated twice.")
            if evicted:
                names = {e.employee_id: e.name for e in snapshot.employees}
                st.warning(
                    "Unseated from unavailable desks: "
                    + ", ".join(names.get(emp_id, emp_id) for emp_id in evicted)
                )
            update_snapshot(edited)
            log.info("Desk edits saved: %d seated, %d evicted", edited.seated_count, len(evicted))
            st.success("Desks saved.")

    with edit_tab2:
        st.caption(
            "Add, rename or remove people. Leave Employee ID blank for new rows to get "
            "the next free id. Removed people lose their desk."
        )
        edited_people = st.data_editor(
            people_table(snapshot),
            use_container_width=True,
            hide_index=True,
            key="people_editor",
            num_rows="dynamic",
        )

        if st.button("Save People", key="btn_save_people"):
            try:
                edited = apply_people_edits(snapshot, edited_people)
            except ValueError as e:
                st.error(f"People not saved: {e}")
            else:
                update_snapshot(edited)
                log.info("People edits saved: %d people", len(edited.employees))
                st.success(f"Saved {len(edited.employees)} people.")
                st.rerun()
