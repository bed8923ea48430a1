"""Ordered move plan between two seatings, with swap cycles grouped for atomic execution."""

import logging
from typing import Dict, List, Optional

from models.employee import Employee
from models.move_plan import MoveKind, MovePlan, MovePlanSummary, MoveStep
from models.seating import SeatingMap, employee_desks
from config.defaults import UNASSIGNED_LABEL

log = logging.getLogger(__name__)


class MoveConflictError(ValueError):
    """A plan step cannot be applied to the seating it is replayed on."""


def get_desk_label(desk_id: Optional[str], desk_names: Optional[Dict[str, str]] = None) -> str:
    """Custom desk name if set, else the id upper-cased part by part ("z1-d3" -> "Z1-D3")."""
    if desk_id is None:
        return UNASSIGNED_LABEL
    if desk_names and desk_names.get(desk_id):
        return desk_names[desk_id]
    return "-".join(part.upper() for part in desk_id.split("-"))


def _ordered_employee_ids(original: Dict[str, str], target: Dict[str, str]) -> List[str]:
    ids = list(original)
    ids += [emp_id for emp_id in target if emp_id not in original]
    return ids


def classify_moves(original_seating: SeatingMap, new_seating: SeatingMap) -> Dict[str, MoveKind]:
    """Tag every employee in either seating. Swap membership is refined in compute_move_plan."""
    current = employee_desks(original_seating)
    target = employee_desks(new_seating)

    kinds: Dict[str, MoveKind] = {}
    for emp_id in _ordered_employee_ids(current, target):
        cur = current.get(emp_id)
        tgt = target.get(emp_id)
        if cur and tgt:
            kinds[emp_id] = MoveKind.UNCHANGED if cur == tgt else MoveKind.RELOCATION
        elif tgt:
            kinds[emp_id] = MoveKind.ARRIVAL
        else:
            kinds[emp_id] = MoveKind.DEPARTURE
    return kinds


def _find_cycles(
    movers: List[str],
    occupant_at: Dict[str, str],
    target: Dict[str, str],
) -> List[List[str]]:
    """Trace "who sits at my target desk" links; a walk that closes on itself is a cycle.

    `occupant_at` maps each mover's origin desk to that mover. Every desk has at most
    one inbound and one outbound link, so walks never branch.
    """
    state: Dict[str, int] = {}  # 1 = on current walk, 2 = done
    cycles = []
    for start in movers:
        if start in state:
            continue
        path = []
        emp_id = start
        while emp_id is not None and emp_id not in state:
            state[emp_id] = 1
            path.append(emp_id)
            emp_id = occupant_at.get(target[emp_id])
        if emp_id is not None and state[emp_id] == 1:
            cycles.append(path[path.index(emp_id):])
        for p in path:
            state[p] = 2
    return cycles


def compute_move_plan(
    original_seating: SeatingMap,
    new_seating: SeatingMap,
    employees: List[Employee],
    desk_names: Optional[Dict[str, str]] = None,
) -> MovePlan:
    """
    Compute the ordered list of moves that turns one seating into another.

    Phases:
    1. Departures: employees leaving the floor, freeing their desk
    2. Relocations: chains resolved back from a desk that is already free
    3. Swap groups: closed cycles, each emitted as one contiguous atomic group
    4. Arrivals: employees taking a desk for the first time

    Every non-swap step's destination is free by the time it runs.
    """
    names = {e.employee_id: e.name for e in employees}
    current = employee_desks(original_seating)
    target = employee_desks(new_seating)
    kinds = classify_moves(original_seating, new_seating)

    departures = [e for e, k in kinds.items() if k == MoveKind.DEPARTURE]
    arrivals = [e for e, k in kinds.items() if k == MoveKind.ARRIVAL]
    movers = [e for e, k in kinds.items() if k == MoveKind.RELOCATION]
    unchanged = sum(1 for k in kinds.values() if k == MoveKind.UNCHANGED)

    # origin desk -> mover sitting there
    occupant_at = {current[e]: e for e in movers}

    cycles = _find_cycles(movers, occupant_at, target)
    cycle_of: Dict[str, int] = {}
    for cycle_id, members in enumerate(cycles, start=1):
        for e in members:
            cycle_of[e] = cycle_id
        log.debug("Swap group %d: %s", cycle_id, " -> ".join(members))

    # Chains: a head's target desk holds no mover. Walk back along who wants my origin.
    wants_desk = {target[e]: e for e in movers}
    chain_order: List[str] = []
    for e in movers:
        if e in cycle_of or target[e] in occupant_at:
            continue
        link: Optional[str] = e
        while link is not None:
            chain_order.append(link)
            link = wants_desk.get(current[link])

    steps: List[MoveStep] = []

    def add_step(emp_id, kind, from_desk, to_desk, cycle_id=None, swap_with=()):
        steps.append(MoveStep(
            step=len(steps) + 1,
            kind=kind,
            employee_id=emp_id,
            employee_name=names.get(emp_id, emp_id),
            from_desk_id=from_desk,
            to_desk_id=to_desk,
            from_desk_label=get_desk_label(from_desk, desk_names),
            to_desk_label=get_desk_label(to_desk, desk_names),
            cycle_id=cycle_id,
            swap_with=tuple(swap_with),
            swap_with_names=tuple(names.get(o, o) for o in swap_with),
        ))

    for e in departures:
        add_step(e, MoveKind.DEPARTURE, current[e], None)

    for e in chain_order:
        add_step(e, MoveKind.RELOCATION, current[e], target[e])

    for cycle_id, members in enumerate(cycles, start=1):
        for e in members:
            others = [o for o in members if o != e]
            add_step(e, MoveKind.SWAP, current[e], target[e], cycle_id, others)

    for e in arrivals:
        add_step(e, MoveKind.ARRIVAL, None, target[e])

    summary = MovePlanSummary(
        total_steps=len(steps),
        people_moving=len(movers),
        new_assignments=len(arrivals),
        removals=len(departures),
        unchanged=unchanged,
        cycles_detected=len(cycles),
    )
    log.info(
        "Move plan: %d step(s), %d moving, %d swap group(s)",
        summary.total_steps, summary.people_moving, summary.cycles_detected,
    )
    return MovePlan(steps=steps, summary=summary)


def apply_move_plan(seating: SeatingMap, plan: MovePlan) -> SeatingMap:
    """Replay a plan on a copy of `seating`; swap groups are applied all at once."""
    result = dict(seating)

    def vacate(s: MoveStep):
        if s.from_desk_id is None:
            return
        if result.get(s.from_desk_id) != s.employee_id:
            raise MoveConflictError(
                f"Step {s.step}: {s.employee_id} is not at {s.from_desk_id}"
            )
        result[s.from_desk_id] = None

    def occupy(s: MoveStep):
        if s.to_desk_id is None:
            return
        if result.get(s.to_desk_id):
            raise MoveConflictError(
                f"Step {s.step}: desk {s.to_desk_id} is occupied by {result[s.to_desk_id]}"
            )
        result[s.to_desk_id] = s.employee_id

    groups = plan.cycle_groups()
    applied = set()
    for s in plan.steps:
        if s.cycle_id is None:
            vacate(s)
            occupy(s)
        elif s.cycle_id not in applied:
            group = groups[s.cycle_id]
            for member in group:
                vacate(member)
            for member in group:
                occupy(member)
            applied.add(s.cycle_id)
    return result
