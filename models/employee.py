from dataclasses import dataclass

from config.defaults import UNKNOWN_DEPARTMENT


@dataclass(frozen=True)
class Employee:
    employee_id: str
    name: str
    department: str
    avatar: str = ""  # initials shown on the desk chip

    @property
    def is_clustered(self) -> bool:
        """Unknown or blank departments never score toward clustering."""
        return bool(self.department) and self.department != UNKNOWN_DEPARTMENT
