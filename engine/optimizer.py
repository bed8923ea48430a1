"""Seating optimizer: department packing plus greedy swap refinement."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Collection, Dict, List, Optional, Tuple, Union

from models.employee import Employee
from models.layout import Desk
from models.seating import SeatingMap
from engine.clustering import ScoringContext, count_moves
from engine.explainer import explain_optimization
from config.defaults import MAX_REFINE_ITERATIONS, UNKNOWN_DEPARTMENT

log = logging.getLogger(__name__)


class OptimizationMode(str, Enum):
    FULL = "full"
    MINIMIZE_MOVES = "minimize-moves"


@dataclass
class OptimizationResult:
    mode: OptimizationMode
    seating: SeatingMap
    moves: int
    cluster_score: float
    previous_score: float
    explanation_steps: List[str] = field(default_factory=list)
    kept_refinement: bool = False  # full mode fell back to the in-place result

    @property
    def score_improvement(self) -> float:
        return self.cluster_score - self.previous_score


def _movable_desk_ids(
    desks: List[Desk],
    pinned: Collection[str],
    unavailable: Collection[str],
) -> List[str]:
    return [d.desk_id for d in desks if d.desk_id not in pinned and d.desk_id not in unavailable]


def refine_by_swapping(
    seating: SeatingMap,
    ctx: ScoringContext,
    movable_desk_ids: List[str],
    max_iterations: int,
) -> SeatingMap:
    """Greedy hill climb: apply the single best improving pair swap until none is left.

    Ties keep the first pair found. Empty desks take part, so a swap can move one
    employee into a free desk.
    """
    result = dict(seating)

    for iteration in range(1, max_iterations + 1):
        best_swap: Optional[Tuple[str, str]] = None
        best_gain = 0

        for i, desk_a in enumerate(movable_desk_ids):
            emp_a = result.get(desk_a)
            for desk_b in movable_desk_ids[i + 1:]:
                emp_b = result.get(desk_b)
                if not emp_a and not emp_b:
                    continue
                if emp_a == emp_b:
                    continue

                gain = ctx.swap_gain(result, desk_a, desk_b)
                if gain > best_gain:
                    best_gain = gain
                    best_swap = (desk_a, desk_b)

        if best_swap is None:
            log.debug("Refinement converged after %d iteration(s)", iteration - 1)
            break

        a, b = best_swap
        result[a], result[b] = result.get(b), result.get(a)
        log.debug("Swap %s <-> %s (gain %+d)", a, b, best_gain)
    else:
        log.debug("Refinement stopped at iteration cap (%d)", max_iterations)

    return result


def _vacate_unavailable(
    seating: SeatingMap,
    desks: List[Desk],
    pinned: Collection[str],
    unavailable: Collection[str],
) -> SeatingMap:
    """Move anyone sitting at an unavailable desk to the first free movable desk."""
    result = dict(seating)
    free = [
        desk_id for desk_id in _movable_desk_ids(desks, pinned, unavailable)
        if not result.get(desk_id)
    ]
    for d in desks:
        emp_id = result.get(d.desk_id)
        if not emp_id or d.desk_id not in unavailable or d.desk_id in pinned:
            continue
        if not free:
            log.warning("No free desk for %s; left at unavailable desk %s", emp_id, d.desk_id)
            continue
        target = free.pop(0)
        result[target] = emp_id
        result[d.desk_id] = None
    return result


def optimize_full(
    current_seating: SeatingMap,
    desks: List[Desk],
    pinned: Collection[str],
    unavailable: Collection[str],
    employees: List[Employee],
    ctx: ScoringContext,
    max_iterations: int,
) -> SeatingMap:
    """Re-pack every movable employee by department, then refine with swaps.

    Pinned employees stay put. Departments are placed largest first, each into the
    zone holding the most of its pinned members, then the zone with most free desks.
    """
    employee_map = {e.employee_id: e for e in employees}
    result: SeatingMap = dict(current_seating)
    for d in desks:
        result.setdefault(d.desk_id, None)

    # Lift everyone off non-pinned desks; keep each employee's origin for the fallback
    origin: Dict[str, str] = {}
    for d in desks:
        if d.desk_id in pinned:
            continue
        emp_id = result.get(d.desk_id)
        if emp_id:
            origin[emp_id] = d.desk_id
        result[d.desk_id] = None

    zones: List[str] = []
    for d in desks:
        if d.zone not in zones:
            zones.append(d.zone)

    # Free desks per zone, row-major for contiguous placement
    available_by_zone: Dict[str, List[Desk]] = {}
    for zone in zones:
        zone_available = [
            d for d in desks
            if d.zone == zone and d.desk_id not in pinned and d.desk_id not in unavailable
        ]
        zone_available.sort(key=lambda d: (d.row, d.col))
        available_by_zone[zone] = zone_available

    # Directory order first, then anyone seated but missing from the directory
    to_place = [e.employee_id for e in employees if e.employee_id in origin]
    to_place += [emp_id for emp_id in origin if emp_id not in employee_map]

    def group_of(emp_id: str) -> str:
        emp = employee_map.get(emp_id)
        return emp.department if emp and emp.is_clustered else UNKNOWN_DEPARTMENT

    dept_groups: Dict[str, List[str]] = {}
    for emp_id in to_place:
        dept_groups.setdefault(group_of(emp_id), []).append(emp_id)

    sorted_depts = sorted(dept_groups.items(), key=lambda kv: len(kv[1]), reverse=True)

    # Pinned same-department members already in each zone
    affinity: Dict[str, Dict[str, int]] = {}
    for d in desks:
        emp_id = result.get(d.desk_id)
        if d.desk_id in pinned and emp_id and emp_id in employee_map:
            zone_counts = affinity.setdefault(group_of(emp_id), {})
            zone_counts[d.zone] = zone_counts.get(d.zone, 0) + 1

    placed = set()
    for dept, emp_ids in sorted_depts:
        dept_affinity = affinity.get(dept, {})
        ranked_zones = sorted(
            zones,
            key=lambda z: (-dept_affinity.get(z, 0), -len(available_by_zone[z])),
        )

        remaining = list(emp_ids)
        for zone in ranked_zones:
            if not remaining:
                break
            available = available_by_zone[zone]
            while remaining and available:
                emp_id = remaining.pop(0)
                desk = available.pop(0)
                result[desk.desk_id] = emp_id
                placed.add(emp_id)
        log.debug("Placed %d/%d of %s", len(emp_ids) - len(remaining), len(emp_ids), dept)

    # Out of capacity is only possible when people sat on unavailable desks,
    # and those desks are still empty here.
    fallback_desks = [desk_id for desk_id in origin.values() if desk_id in unavailable]

    for emp_id in to_place:
        if emp_id in placed:
            continue
        for zone in zones:
            available = available_by_zone[zone]
            if available:
                result[available.pop(0).desk_id] = emp_id
                placed.add(emp_id)
                break
        else:
            desk_id = fallback_desks.pop(0)
            log.warning("No free desk for %s; left at unavailable desk %s", emp_id, desk_id)
            result[desk_id] = emp_id

    movable = _movable_desk_ids(desks, pinned, unavailable)
    return refine_by_swapping(result, ctx, movable, max_iterations)


def optimize_minimize_moves(
    current_seating: SeatingMap,
    desks: List[Desk],
    pinned: Collection[str],
    unavailable: Collection[str],
    ctx: ScoringContext,
    max_iterations: int,
) -> SeatingMap:
    """Refine the current seating in place with the fewest swaps that raise the score."""
    seating = _vacate_unavailable(current_seating, desks, pinned, unavailable)
    movable = _movable_desk_ids(desks, pinned, unavailable)
    return refine_by_swapping(seating, ctx, movable, max_iterations)


def optimize_seating(
    current_seating: SeatingMap,
    desks: List[Desk],
    pinned_desks: Collection[str],
    unavailable_desks: Collection[str],
    mode: Union[str, OptimizationMode],
    employees: List[Employee],
    rule_config: Optional[dict] = None,
) -> OptimizationResult:
    """
    Suggest a seating that clusters departments together.

    Modes:
    - full: re-pack all movable employees department by department, then refine
    - minimize-moves: refine the current seating with individual improving swaps

    Pinned desks keep their occupant, unavailable desks end up empty and the set of
    seated employees never changes. The returned score is never below the input's.
    """
    cfg = rule_config or {}
    max_iterations = cfg.get("max_refine_iterations", MAX_REFINE_ITERATIONS)
    mode = OptimizationMode(mode)
    pinned = set(pinned_desks or ())
    unavailable = set(unavailable_desks or ())

    ctx = ScoringContext(desks, employees, rule_config)
    previous_score = ctx.score(current_seating)

    movable = _movable_desk_ids(desks, pinned, unavailable)
    has_occupants = any(current_seating.values())
    if not movable or not has_occupants:
        log.info("Nothing to optimize (%d movable desks)", len(movable))
        return OptimizationResult(
            mode=mode,
            seating=dict(current_seating),
            moves=0,
            cluster_score=previous_score,
            previous_score=previous_score,
            explanation_steps=explain_optimization(
                mode.value, previous_score, previous_score, 0, len(pinned), len(unavailable),
            ),
        )

    optimized = optimize_minimize_moves(current_seating, desks, pinned, unavailable, ctx, max_iterations)
    kept_refinement = False
    if mode == OptimizationMode.FULL:
        repacked = optimize_full(
            current_seating, desks, pinned, unavailable, employees, ctx, max_iterations,
        )
        # A re-pack is a fresh start and can land on a worse local optimum
        if ctx.score(repacked) >= ctx.score(optimized):
            optimized = repacked
        else:
            kept_refinement = True
            log.info("Full re-pack scored below in-place refinement; keeping refinement")

    new_score = ctx.score(optimized)
    moves = count_moves(current_seating, optimized)
    log.info(
        "Optimization (%s): score %s -> %s, %d move(s)",
        mode.value, previous_score, new_score, moves,
    )

    return OptimizationResult(
        mode=mode,
        seating=optimized,
        moves=moves,
        cluster_score=new_score,
        previous_score=previous_score,
        explanation_steps=explain_optimization(
            mode.value, previous_score, new_score, moves, len(pinned), len(unavailable),
            kept_refinement=kept_refinement,
        ),
        kept_refinement=kept_refinement,
    )
