"""Generates human-readable explanations for optimization results and move plans."""

from typing import List

from models.move_plan import MoveKind, MovePlan


def explain_optimization(
    mode: str,
    previous_score: float,
    new_score: float,
    moves: int,
    pinned_count: int,
    unavailable_count: int,
    kept_refinement: bool = False,
) -> List[str]:
    """Produce step-by-step explanation for an optimization run.

    `kept_refinement` marks a full run whose re-pack scored below refining the
    current seating, so the refined current seating was returned instead.
    """
    steps = []

    if mode == "full" and kept_refinement:
        steps.append(
            "Step 1 - Re-pack discarded: it scored below refining the current seating, "
            "so the current seating was refined with swaps instead"
        )
    elif mode == "full":
        steps.append(
            "Step 1 - Re-pack: departments placed largest first, each into the zone "
            "with the most pinned teammates, then the zone with the most free desks"
        )
    else:
        steps.append(
            "Step 1 - Start from current seating: only individual swaps are considered"
        )

    steps.append(
        f"Step 2 - Constraints: {pinned_count} pinned desk(s) kept in place, "
        f"{unavailable_count} unavailable desk(s) left empty"
    )

    steps.append(
        "Step 3 - Refine: repeatedly applied the best desk swap that raises the "
        "clustering score until no swap helps"
    )

    delta = new_score - previous_score
    steps.append(
        f"Step 4 - Score: {previous_score:g} => {new_score:g} ({delta:+g}) "
        f"with {moves} employee(s) changing desk"
    )

    if moves == 0:
        steps.append("Note: Current seating is already at a local optimum")

    return steps


def explain_move_plan(plan: MovePlan) -> List[str]:
    """Produce phase-by-phase explanation for a move plan."""
    s = plan.summary
    if s.total_steps == 0:
        return [f"No moves needed: all {s.unchanged} seated employee(s) keep their desk."]

    relocations = sum(1 for st in plan.steps if st.kind == MoveKind.RELOCATION)
    swaps = sum(1 for st in plan.steps if st.kind == MoveKind.SWAP)

    steps = [
        f"Step 1 - Departures: {s.removals} employee(s) leave their desk first, freeing space",
        f"Step 2 - Relocations: {relocations} employee(s) move into desks that are already free",
    ]

    if s.cycles_detected:
        steps.append(
            f"Step 3 - Swaps: {swaps} employee(s) in {s.cycles_detected} swap group(s) "
            f"must move at the same time; no desk in a group is free beforehand"
        )
        for cycle_id, group in plan.cycle_groups().items():
            names = ", ".join(st.employee_name for st in group)
            steps.append(f"  Group {cycle_id}: {names}")
    else:
        steps.append("Step 3 - Swaps: none")

    steps.append(f"Step 4 - Arrivals: {s.new_assignments} employee(s) take their new desk last")
    steps.append(
        f"Total: {s.total_steps} step(s), {s.people_moving} moving, {s.unchanged} unchanged"
    )
    return steps
