"""Schema validation for uploaded data files and sanitization of imported seatings."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import pandas as pd

from models.employee import Employee
from models.layout import Desk
from models.seating import SeatingMap, empty_seating


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


ZONE_REQUIRED_COLUMNS = [
    "Zone ID",
    "Zone Name",
    "Rows",
    "Cols",
]

PEOPLE_REQUIRED_COLUMNS = [
    "Employee ID",
    "Name",
    "Department",
]

SEATING_REQUIRED_COLUMNS = [
    "Desk ID",
    "Employee ID",
]


def _check_required_columns(df: pd.DataFrame, required: List[str], file_label: str) -> ValidationResult:
    result = ValidationResult()
    missing = [col for col in required if col not in df.columns]
    if missing:
        result.is_valid = False
        result.errors.append(f"{file_label}: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.is_valid = False
        result.errors.append(f"{file_label}: File contains no data rows.")
    return result


def _stripped(series: pd.Series) -> pd.Series:
    return series.dropna().astype(str).str.strip()


def validate_zones(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, ZONE_REQUIRED_COLUMNS, "Zones")
    if not result.is_valid:
        return result

    for col in ["Rows", "Cols"]:
        values = pd.to_numeric(df[col], errors="coerce")
        if values.isna().any() or (values < 1).any() or (values % 1 != 0).any():
            result.is_valid = False
            result.errors.append(f"Zones: {col} must be a whole number of at least 1.")

    zone_ids = _stripped(df["Zone ID"])
    dupes = zone_ids[zone_ids.duplicated(keep=False)]
    if not dupes.empty:
        result.is_valid = False
        result.errors.append(f"Zones: Duplicate zone IDs: {sorted(dupes.unique().tolist())}")

    return result


def validate_people(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, PEOPLE_REQUIRED_COLUMNS, "People")
    if not result.is_valid:
        return result

    emp_ids = _stripped(df["Employee ID"])
    dupes = emp_ids[emp_ids.duplicated(keep=False)]
    if not dupes.empty:
        result.is_valid = False
        result.errors.append(f"People: Duplicate employee IDs: {sorted(dupes.unique().tolist())}")

    missing_dept = df["Department"].isna().sum()
    if missing_dept:
        result.warnings.append(
            f"People: {missing_dept} employee(s) without a department. "
            "They will be treated as Unknown and not clustered."
        )

    return result


def validate_seating(df: pd.DataFrame) -> ValidationResult:
    result = _check_required_columns(df, SEATING_REQUIRED_COLUMNS, "Seating")
    if not result.is_valid:
        return result

    desk_ids = _stripped(df["Desk ID"])
    dupes = desk_ids[desk_ids.duplicated(keep=False)]
    if not dupes.empty:
        result.is_valid = False
        result.errors.append(f"Seating: Duplicate desk entries: {sorted(dupes.unique().tolist())}")

    emp_ids = _stripped(df["Employee ID"])
    emp_ids = emp_ids[emp_ids != ""]
    seated_twice = emp_ids[emp_ids.duplicated(keep=False)]
    if not seated_twice.empty:
        result.is_valid = False
        result.errors.append(
            f"Seating: Employees assigned to more than one desk: "
            f"{sorted(seated_twice.unique().tolist())}"
        )

    return result


def validate_cross_file(
    desks: List[Desk],
    employees: List[Employee],
    seating_df: pd.DataFrame,
) -> ValidationResult:
    """Check that seating rows refer to desks in the zone grids and to known people."""
    result = ValidationResult()
    known_desks = {d.desk_id for d in desks}
    known_people = {e.employee_id for e in employees}

    seat_desks = set(_stripped(seating_df["Desk ID"]))
    seat_people = set(_stripped(seating_df["Employee ID"])) - {""}

    unknown_desks = seat_desks - known_desks
    unknown_people = seat_people - known_people

    if unknown_desks:
        result.warnings.append(
            f"Desks outside the zone grids: {', '.join(sorted(unknown_desks))}. "
            "These rows will be ignored."
        )
    if unknown_people:
        result.warnings.append(
            f"Seating refers to unknown employees: {', '.join(sorted(unknown_people))}. "
            "These assignments will be ignored."
        )
    return result


def sanitize_seating(
    raw: Dict[str, object],
    desks: List[Desk],
    employees: Optional[List[Employee]] = None,
) -> SeatingMap:
    """Return a total SeatingMap over `desks`, keeping only valid assignments.

    Entries for unknown desks, non-string or unknown employee ids are dropped, and
    an employee listed at a second desk keeps only the first.
    """
    valid_people = {e.employee_id for e in employees} if employees is not None else None
    seating = empty_seating(desks)
    seated = set()
    for desk_id, emp_id in raw.items():
        if desk_id not in seating or not isinstance(emp_id, str) or not emp_id:
            continue
        if valid_people is not None and emp_id not in valid_people:
            continue
        if emp_id in seated:
            continue
        seating[desk_id] = emp_id
        seated.add(emp_id)
    return seating
