"""Tests for the session-state wrapper."""

import sys
import os
from types import SimpleNamespace
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

import data.session_store as session_store
from data.loader import build_snapshot
from data.sample_data import generate_zones_df, generate_people_df, generate_seating_df


@pytest.fixture
def state(monkeypatch):
    fake_st = SimpleNamespace(session_state={})
    monkeypatch.setattr(session_store, "st", fake_st)
    session_store.initialize_session_state()
    snapshot = build_snapshot(generate_zones_df(), generate_people_df(), generate_seating_df())
    session_store.set_snapshot(snapshot)
    return fake_st.session_state


class TestSessionStore:
    def test_snapshot_sets_baseline(self, state):
        assert session_store.is_data_loaded()
        assert session_store.get_baseline_seating() == session_store.get_snapshot().seating

    def test_new_seating_drops_stale_optimization(self, state):
        session_store.set_optimization_result("stale result")
        seating = dict(session_store.get_snapshot().seating)
        seating["z1-d0"] = None
        session_store.set_current_seating(seating)
        assert session_store.get_optimization_result() is None
        assert session_store.get_snapshot().seating["z1-d0"] is None
        assert session_store.get_baseline_seating()["z1-d0"] == "e1"

    def test_edited_snapshot_keeps_baseline(self, state):
        session_store.set_optimization_result("stale result")
        snapshot = session_store.get_snapshot()
        snapshot.desk_names["z1-d0"] = "Window"
        session_store.update_snapshot(snapshot)
        assert session_store.get_optimization_result() is None
        assert session_store.get_baseline_seating()["z1-d0"] == "e1"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
