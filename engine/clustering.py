"""Department clustering score and the incremental swap gain used by the optimizer."""

from typing import Dict, List, Optional

from models.employee import Employee
from models.layout import Desk
from models.seating import SeatingMap, employee_desks
from config.defaults import ADJACENT_PAIR_SCORE, SAME_ZONE_PAIR_SCORE


class ScoringContext:
    """Lookups shared by every score evaluation for one desk layout and directory."""

    def __init__(
        self,
        desks: List[Desk],
        employees: List[Employee],
        rule_config: Optional[dict] = None,
    ):
        cfg = rule_config or {}
        self.adjacent_score = cfg.get("adjacent_pair_score", ADJACENT_PAIR_SCORE)
        self.same_zone_score = cfg.get("same_zone_pair_score", SAME_ZONE_PAIR_SCORE)

        self.desk_map: Dict[str, Desk] = {d.desk_id: d for d in desks}
        self.zone_desks: Dict[str, List[Desk]] = {}
        for d in desks:
            self.zone_desks.setdefault(d.zone, []).append(d)

        # Only clustered departments are comparable
        self.department: Dict[str, str] = {
            e.employee_id: e.department for e in employees if e.is_clustered
        }

    def pair_score(self, a: Desk, b: Desk) -> int:
        if a.is_adjacent(b):
            return self.adjacent_score
        return self.same_zone_score

    def contribution(
        self,
        seating: SeatingMap,
        desk_id: str,
        emp_id: Optional[str],
        exclude_desk_id: Optional[str] = None,
    ) -> int:
        """Score earned by `emp_id` sitting at `desk_id` against its zone neighbours."""
        dept = self.department.get(emp_id) if emp_id else None
        desk = self.desk_map.get(desk_id)
        if dept is None or desk is None:
            return 0

        total = 0
        for other in self.zone_desks[desk.zone]:
            if other.desk_id == desk_id or other.desk_id == exclude_desk_id:
                continue
            other_emp = seating.get(other.desk_id)
            if other_emp and self.department.get(other_emp) == dept:
                total += self.pair_score(desk, other)
        return total

    def score(self, seating: SeatingMap) -> int:
        total = 0
        for zone_desks in self.zone_desks.values():
            occupied = [
                (d, self.department[seating[d.desk_id]])
                for d in zone_desks
                if seating.get(d.desk_id) in self.department
            ]
            for i, (a, dept_a) in enumerate(occupied):
                for b, dept_b in occupied[i + 1:]:
                    if dept_a == dept_b:
                        total += self.pair_score(a, b)
        return total

    def swap_gain(self, seating: SeatingMap, desk_a: str, desk_b: str) -> int:
        """Score delta of exchanging the occupants of two desks.

        The a-b pair itself is unchanged by the swap, so each side excludes the other.
        """
        emp_a = seating.get(desk_a)
        emp_b = seating.get(desk_b)
        before = (
            self.contribution(seating, desk_a, emp_a, desk_b)
            + self.contribution(seating, desk_b, emp_b, desk_a)
        )
        after = (
            self.contribution(seating, desk_a, emp_b, desk_b)
            + self.contribution(seating, desk_b, emp_a, desk_a)
        )
        return after - before


def cluster_score(
    seating: SeatingMap,
    desks: List[Desk],
    employees: List[Employee],
    rule_config: Optional[dict] = None,
) -> int:
    """Clustering score: higher means departments sit closer together.

    Every unordered pair of desks in the same zone whose occupants share a
    department earns ADJACENT_PAIR_SCORE when the desks touch (including
    diagonally) and SAME_ZONE_PAIR_SCORE otherwise. Pairs across zones never score.
    """
    return ScoringContext(desks, employees, rule_config).score(seating)


def swap_gain(
    seating: SeatingMap,
    desk_a: str,
    desk_b: str,
    desks: List[Desk],
    employees: List[Employee],
    rule_config: Optional[dict] = None,
) -> int:
    return ScoringContext(desks, employees, rule_config).swap_gain(seating, desk_a, desk_b)


def count_moves(before: SeatingMap, after: SeatingMap) -> int:
    """Count employees seated in `after` at a different desk than in `before`."""
    before_desk = employee_desks(before)
    return sum(
        1 for desk_id, emp_id in after.items()
        if emp_id and before_desk.get(emp_id) != desk_id
    )
