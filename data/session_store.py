"""Typed wrapper around st.session_state for application data."""

import streamlit as st
from typing import Optional

from models.seating import SeatingMap, SeatingSnapshot
from config.defaults import DEFAULT_OPTIMIZATION_MODE, MAX_REFINE_ITERATIONS


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "snapshot": None,
        "baseline_seating": None,
        "data_loaded": False,
        "optimization_result": None,
        "rule_config": {
            "optimization_mode": DEFAULT_OPTIMIZATION_MODE,
            "max_refine_iterations": MAX_REFINE_ITERATIONS,
        },
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_snapshot() -> Optional[SeatingSnapshot]:
    return st.session_state.get("snapshot")


def get_baseline_seating() -> Optional[SeatingMap]:
    return st.session_state.get("baseline_seating")


def get_optimization_result():
    return st.session_state.get("optimization_result")


def get_rule_config() -> dict:
    return st.session_state.get("rule_config", {})


def is_data_loaded() -> bool:
    return st.session_state.get("data_loaded", False)


# --- Setters ---

def set_snapshot(snapshot: SeatingSnapshot):
    """Store a freshly loaded office; its seating becomes the move-plan baseline."""
    st.session_state["snapshot"] = snapshot
    st.session_state["baseline_seating"] = dict(snapshot.seating)
    st.session_state["optimization_result"] = None
    st.session_state["data_loaded"] = True


def set_current_seating(seating: SeatingMap):
    """Replace the current seating; any optimization computed from the old one is dropped."""
    st.session_state["snapshot"].seating = dict(seating)
    st.session_state["optimization_result"] = None


def update_snapshot(snapshot: SeatingSnapshot):
    """Store an edited office without touching the move-plan baseline."""
    st.session_state["snapshot"] = snapshot
    st.session_state["optimization_result"] = None


def set_baseline_seating(seating: SeatingMap):
    st.session_state["baseline_seating"] = dict(seating)


def set_optimization_result(result):
    st.session_state["optimization_result"] = result


def set_rule_config(config: dict):
    st.session_state["rule_config"] = config
