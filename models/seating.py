from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from models.employee import Employee
from models.layout import Desk, Zone, generate_desks

# desk_id -> employee_id (None = empty desk)
SeatingMap = Dict[str, Optional[str]]


def empty_seating(desks: List[Desk]) -> SeatingMap:
    return {d.desk_id: None for d in desks}


def employee_desks(seating: SeatingMap) -> Dict[str, str]:
    """Invert a seating map: employee_id -> desk_id."""
    return {emp_id: desk_id for desk_id, emp_id in seating.items() if emp_id}


@dataclass
class SeatingSnapshot:
    """Everything the hosting app knows about one office at one point in time."""
    zones: List[Zone] = field(default_factory=list)
    employees: List[Employee] = field(default_factory=list)
    seating: SeatingMap = field(default_factory=dict)
    desk_names: Dict[str, str] = field(default_factory=dict)
    pinned_desks: Set[str] = field(default_factory=set)
    unavailable_desks: Set[str] = field(default_factory=set)

    @property
    def desks(self) -> List[Desk]:
        return generate_desks(self.zones)

    @property
    def seated_count(self) -> int:
        return sum(1 for emp_id in self.seating.values() if emp_id)
