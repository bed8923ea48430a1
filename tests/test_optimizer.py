"""Tests for the seating optimizer."""

import sys
import os
import random
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.employee import Employee
from models.layout import Zone, generate_desks
from models.seating import empty_seating
from engine.clustering import cluster_score, count_moves
from engine.optimizer import optimize_seating, OptimizationMode
from data.sample_data import ZONES, PEOPLE, DEFAULT_SEATING
from config.defaults import UNKNOWN_DEPARTMENT


def make_sample_office():
    zones = [Zone(z["Zone ID"], z["Zone Name"], z["Rows"], z["Cols"]) for z in ZONES]
    desks = generate_desks(zones)
    employees = [Employee(emp_id, name, dept) for emp_id, name, dept in PEOPLE]
    seating = empty_seating(desks)
    seating.update(DEFAULT_SEATING)
    return desks, employees, seating


def make_two_bays():
    """Two 1x2 zones with the departments crossed over."""
    desks = generate_desks([Zone("z1", "North", 1, 2), Zone("z2", "South", 1, 2)])
    employees = [
        Employee("e1", "Alice", "Engineering"),
        Employee("e2", "Bob", "Engineering"),
        Employee("d1", "Dana", "Design"),
        Employee("d2", "Eli", "Design"),
    ]
    seating = {"z1-d0": "e1", "z1-d1": "d1", "z2-d0": "e2", "z2-d1": "d2"}
    return desks, employees, seating


def make_random_office(rng):
    zones = [
        Zone(f"z{i}", f"Zone {i}", rng.randint(1, 3), rng.randint(1, 4))
        for i in range(1, rng.randint(1, 3) + 1)
    ]
    desks = generate_desks(zones)
    departments = ["Engineering", "Design", "Sales", UNKNOWN_DEPARTMENT]
    employees = [
        Employee(f"e{i}", f"Person {i}", rng.choice(departments))
        for i in range(1, len(desks) + 1)
    ]
    seating = empty_seating(desks)
    people = rng.sample(employees, rng.randint(0, len(desks)))
    for desk, emp in zip(rng.sample(desks, len(people)), people):
        seating[desk.desk_id] = emp.employee_id
    pinned = {d.desk_id for d in desks if rng.random() < 0.15}
    return desks, employees, seating, pinned


def seated(seating):
    return sorted(emp_id for emp_id in seating.values() if emp_id)


class TestConstraints:
    def test_same_people_seated_in_both_modes(self):
        desks, employees, seating = make_sample_office()
        for mode in ("full", "minimize-moves"):
            result = optimize_seating(seating, desks, set(), set(), mode, employees)
            assert seated(result.seating) == seated(seating), mode
            assert set(result.seating) == set(seating)

    def test_pinned_desks_keep_their_occupant(self):
        desks, employees, seating = make_sample_office()
        pinned = {"z1-d0", "z3-d5", "z2-d3"}  # z2-d3 pinned while empty
        for mode in ("full", "minimize-moves"):
            result = optimize_seating(seating, desks, pinned, set(), mode, employees)
            for desk_id in pinned:
                assert result.seating[desk_id] == seating[desk_id], (mode, desk_id)

    def test_unavailable_desks_end_up_empty(self):
        desks, employees, seating = make_sample_office()
        unavailable = {"z2-d1", "z3-d0"}
        for mode in ("full", "minimize-moves"):
            result = optimize_seating(seating, desks, set(), unavailable, mode, employees)
            for desk_id in unavailable:
                assert result.seating[desk_id] is None, (mode, desk_id)
            assert seated(result.seating) == seated(seating)

    def test_pinned_wins_over_unavailable(self):
        desks, employees, seating = make_sample_office()
        result = optimize_seating(
            seating, desks, {"z2-d1"}, {"z2-d1"}, "minimize-moves", employees,
        )
        assert result.seating["z2-d1"] == "e7"

    def test_no_free_desk_keeps_everyone_seated(self):
        desks = generate_desks([Zone("z1", "Tiny", 1, 2)])
        employees = [Employee("e1", "Alice", "Engineering"), Employee("e2", "Bob", "Engineering")]
        seating = {"z1-d0": "e1", "z1-d1": "e2"}
        for mode in ("full", "minimize-moves"):
            result = optimize_seating(seating, desks, set(), {"z1-d1"}, mode, employees)
            assert seated(result.seating) == ["e1", "e2"], mode

    def test_people_missing_from_directory_are_kept(self):
        desks, employees, seating = make_two_bays()
        seating["z2-d1"] = "ghost"
        for mode in ("full", "minimize-moves"):
            result = optimize_seating(seating, desks, set(), set(), mode, employees)
            assert "ghost" in result.seating.values(), mode


class TestScore:
    def test_score_never_decreases(self):
        desks, employees, seating = make_sample_office()
        before = cluster_score(seating, desks, employees)
        for mode in ("full", "minimize-moves"):
            result = optimize_seating(seating, desks, {"z1-d0"}, set(), mode, employees)
            assert result.previous_score == before
            assert result.cluster_score >= before, mode
            assert result.cluster_score == cluster_score(result.seating, desks, employees)

    def test_moves_match_count_moves(self):
        desks, employees, seating = make_sample_office()
        for mode in ("full", "minimize-moves"):
            result = optimize_seating(seating, desks, set(), set(), mode, employees)
            assert result.moves == count_moves(seating, result.seating)

    def test_sample_office_improves(self):
        desks, employees, seating = make_sample_office()
        result = optimize_seating(seating, desks, set(), set(), "full", employees)
        assert result.score_improvement > 0
        assert result.mode == OptimizationMode.FULL

    def test_deterministic(self):
        desks, employees, seating = make_sample_office()
        first = optimize_seating(seating, desks, set(), set(), "full", employees)
        second = optimize_seating(seating, desks, set(), set(), "full", employees)
        assert first.seating == second.seating

    def test_random_offices_never_lose_score(self):
        rng = random.Random(11)
        for _ in range(300):
            desks, employees, seating, pinned = make_random_office(rng)
            before = cluster_score(seating, desks, employees)
            for mode in ("full", "minimize-moves"):
                result = optimize_seating(seating, desks, pinned, set(), mode, employees)
                assert result.cluster_score >= before, (mode, seating, pinned)
                assert seated(result.seating) == seated(seating)
                for desk_id in pinned:
                    assert result.seating[desk_id] == seating[desk_id]

    def test_random_offices_with_unavailable_desks(self):
        rng = random.Random(23)
        for _ in range(100):
            desks, employees, seating, pinned = make_random_office(rng)
            unavailable = {d.desk_id for d in desks if rng.random() < 0.2}
            for mode in ("full", "minimize-moves"):
                result = optimize_seating(seating, desks, pinned, unavailable, mode, employees)
                assert seated(result.seating) == seated(seating)
                for desk_id in pinned:
                    assert result.seating[desk_id] == seating[desk_id]


class TestMinimizeMoves:
    def test_single_best_swap(self):
        desks, employees, seating = make_two_bays()
        result = optimize_seating(seating, desks, set(), set(), "minimize-moves", employees)
        # first pair with the best gain is (z1-d0, z2-d1)
        assert result.seating == {"z1-d0": "d2", "z1-d1": "d1", "z2-d0": "e2", "z2-d1": "e1"}
        assert result.cluster_score == 6
        assert result.moves == 2

    def test_mode_accepts_enum_or_string(self):
        desks, employees, seating = make_two_bays()
        by_enum = optimize_seating(
            seating, desks, set(), set(), OptimizationMode.MINIMIZE_MOVES, employees,
        )
        by_name = optimize_seating(seating, desks, set(), set(), "minimize-moves", employees)
        assert by_enum.mode == by_name.mode == OptimizationMode.MINIMIZE_MOVES
        assert by_enum.seating == by_name.seating

    def test_zero_iterations_leaves_seating_alone(self):
        desks, employees, seating = make_two_bays()
        result = optimize_seating(
            seating, desks, set(), set(), "minimize-moves", employees,
            rule_config={"max_refine_iterations": 0},
        )
        assert result.seating == seating
        assert result.moves == 0


class TestFullMode:
    def test_departments_packed_into_zones(self):
        desks, employees, seating = make_two_bays()
        result = optimize_seating(seating, desks, set(), set(), "full", employees)
        assert result.seating == {"z1-d0": "e1", "z1-d1": "e2", "z2-d0": "d1", "z2-d1": "d2"}
        assert result.cluster_score == 6
        assert result.moves == 2

    def test_department_follows_pinned_teammate(self):
        desks = generate_desks([Zone("z1", "North", 1, 3), Zone("z2", "South", 1, 3)])
        employees = [
            Employee("p1", "Pat", "Design"),
            Employee("d1", "Dana", "Design"),
            Employee("e1", "Alice", "Engineering"),
            Employee("e2", "Bob", "Engineering"),
            Employee("e3", "Carol", "Engineering"),
        ]
        seating = {
            "z1-d0": "d1", "z1-d1": "e2", "z1-d2": None,
            "z2-d0": "p1", "z2-d1": "e1", "z2-d2": "e3",
        }
        result = optimize_seating(seating, desks, {"z2-d0"}, set(), "full", employees)
        assert result.seating == {
            "z1-d0": "e1", "z1-d1": "e2", "z1-d2": "e3",
            "z2-d0": "p1", "z2-d1": "d1", "z2-d2": None,
        }
        assert result.cluster_score == 10
        assert not result.kept_refinement

    def test_keeps_refinement_when_repack_scores_lower(self):
        # The re-pack fills the 1x4 row first with the largest department, but the
        # current seating already has it in the 2x2 block where every pair touches.
        desks = generate_desks([Zone("z1", "Row", 1, 4), Zone("z2", "Block", 2, 2)])
        employees = [Employee(f"a{i}", f"Eng {i}", "Engineering") for i in range(1, 5)]
        employees += [
            Employee("b1", "Dana", "Design"),
            Employee("b2", "Eli", "Design"),
            Employee("c1", "Sam", "Sales"),
            Employee("c2", "Tina", "Sales"),
        ]
        seating = {
            "z1-d0": "b1", "z1-d1": "b2", "z1-d2": "c1", "z1-d3": "c2",
            "z2-d0": "a1", "z2-d1": "a2", "z2-d2": "a3", "z2-d3": "a4",
        }
        result = optimize_seating(seating, desks, set(), set(), "full", employees)
        assert result.kept_refinement
        assert result.seating == seating
        assert result.cluster_score == 24
        assert result.explanation_steps[0].startswith("Step 1 - Re-pack discarded")

    def test_overflow_spills_into_next_zone(self):
        desks = generate_desks([Zone("z1", "North", 1, 2), Zone("z2", "South", 1, 2)])
        employees = [Employee(f"e{i}", f"Eng {i}", "Engineering") for i in range(1, 4)]
        seating = {"z1-d0": "e1", "z1-d1": None, "z2-d0": "e2", "z2-d1": "e3"}
        result = optimize_seating(seating, desks, set(), set(), "full", employees)
        assert seated(result.seating) == ["e1", "e2", "e3"]
        assert result.cluster_score >= cluster_score(seating, desks, employees)


class TestDegenerate:
    def test_everything_pinned(self):
        desks, employees, seating = make_two_bays()
        pinned = {d.desk_id for d in desks}
        result = optimize_seating(seating, desks, pinned, set(), "full", employees)
        assert result.seating == seating
        assert result.moves == 0

    def test_nobody_seated(self):
        desks, employees, _ = make_two_bays()
        seating = empty_seating(desks)
        result = optimize_seating(seating, desks, set(), set(), "full", employees)
        assert result.seating == seating
        assert result.cluster_score == 0
        assert result.explanation_steps

    def test_input_not_mutated(self):
        desks, employees, seating = make_two_bays()
        original = dict(seating)
        optimize_seating(seating, desks, set(), set(), "full", employees)
        assert seating == original


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
