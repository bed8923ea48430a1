from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Zone:
    zone_id: str
    name: str
    rows: int
    cols: int
    color: str = "#e5e7eb"

    @property
    def capacity(self) -> int:
        return self.rows * self.cols


@dataclass(frozen=True)
class Desk:
    desk_id: str
    row: int
    col: int
    zone: str  # zone_id

    def is_adjacent(self, other: "Desk") -> bool:
        """Same zone and within one row and one column."""
        return (
            self.zone == other.zone
            and abs(self.row - other.row) <= 1
            and abs(self.col - other.col) <= 1
        )


def desk_id_for(zone_id: str, row: int, col: int, cols: int) -> str:
    return f"{zone_id}-d{row * cols + col}"


def generate_desks(zones: List[Zone]) -> List[Desk]:
    """Lay out every zone's desks row-major."""
    desks = []
    for zone in zones:
        for r in range(zone.rows):
            for c in range(zone.cols):
                desks.append(Desk(
                    desk_id=desk_id_for(zone.zone_id, r, c, zone.cols),
                    row=r,
                    col=c,
                    zone=zone.zone_id,
                ))
    return desks
