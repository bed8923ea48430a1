from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class MoveKind(str, Enum):
    UNCHANGED = "unchanged"
    DEPARTURE = "departure"    # leaves the floor, no destination
    ARRIVAL = "arrival"        # newly seated, no origin
    RELOCATION = "relocation"  # desk to desk, resolvable in sequence
    SWAP = "swap"              # desk to desk, part of an atomic cycle group


@dataclass(frozen=True)
class MoveStep:
    step: int
    kind: MoveKind
    employee_id: str
    employee_name: str
    from_desk_id: Optional[str]
    to_desk_id: Optional[str]
    from_desk_label: str
    to_desk_label: str
    cycle_id: Optional[int] = None
    swap_with: Tuple[str, ...] = ()
    swap_with_names: Tuple[str, ...] = ()

    @property
    def is_swap(self) -> bool:
        return self.kind == MoveKind.SWAP


@dataclass
class MovePlanSummary:
    total_steps: int
    people_moving: int      # desk-to-desk moves, swap participants included
    new_assignments: int
    removals: int
    unchanged: int
    cycles_detected: int


@dataclass
class MovePlan:
    steps: List[MoveStep] = field(default_factory=list)
    summary: MovePlanSummary = None

    def cycle_groups(self) -> Dict[int, List[MoveStep]]:
        """Swap steps keyed by cycle id, in plan order."""
        groups: Dict[int, List[MoveStep]] = {}
        for s in self.steps:
            if s.cycle_id is not None:
                groups.setdefault(s.cycle_id, []).append(s)
        return groups

    def to_records(self) -> List[dict]:
        return [{
            "Step": s.step,
            "Type": s.kind.value.capitalize(),
            "Employee": s.employee_name,
            "From": s.from_desk_label,
            "To": s.to_desk_label,
            "Swap Group": s.cycle_id if s.cycle_id is not None else "",
            "Swaps With": ", ".join(s.swap_with_names),
        } for s in self.steps]
