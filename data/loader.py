"""File upload parsing — CSV/XLSX into typed model lists."""

import dataclasses

import pandas as pd
from typing import List, Optional, Tuple

from models.employee import Employee
from models.layout import Zone
from models.seating import SeatingSnapshot
from config.defaults import UNKNOWN_DEPARTMENT, TRUTHY_FLAGS
from data.validator import sanitize_seating, validate_people


def _text(row, column: str, df: pd.DataFrame) -> Optional[str]:
    """Stripped cell text, or None for a missing column / blank cell."""
    if column not in df.columns or pd.isna(row.get(column)):
        return None
    value = str(row[column]).strip()
    return value or None


def _flag(row, column: str, df: pd.DataFrame) -> bool:
    value = _text(row, column, df)
    return value is not None and value.lower() in TRUTHY_FLAGS


def _initials(name: str) -> str:
    return "".join(part[0] for part in name.split()[:2]).upper()


def parse_zones(df: pd.DataFrame) -> List[Zone]:
    """Convert a zones DataFrame into Zone objects."""
    zones = []
    for _, row in df.iterrows():
        color = _text(row, "Color", df)
        zones.append(Zone(
            zone_id=str(row["Zone ID"]).strip(),
            name=str(row["Zone Name"]).strip(),
            rows=int(float(row["Rows"])),
            cols=int(float(row["Cols"])),
            **({"color": color} if color else {}),
        ))
    return zones


def parse_employees(df: pd.DataFrame) -> List[Employee]:
    """Convert a people DataFrame into Employee objects."""
    employees = []
    for _, row in df.iterrows():
        name = str(row["Name"]).strip()
        employees.append(Employee(
            employee_id=str(row["Employee ID"]).strip(),
            name=name,
            department=_text(row, "Department", df) or UNKNOWN_DEPARTMENT,
            avatar=_initials(name),
        ))
    return employees


def parse_seating(
    df: pd.DataFrame,
    zones: List[Zone],
    employees: List[Employee],
) -> SeatingSnapshot:
    """Convert a seating DataFrame into a snapshot with desk names, pins and unavailable desks.

    Rows for unknown desks or employees are dropped; see sanitize_seating.
    """
    snapshot = SeatingSnapshot(zones=zones, employees=employees)
    raw = {}
    for _, row in df.iterrows():
        desk_id = str(row["Desk ID"]).strip()
        emp_id = _text(row, "Employee ID", df)
        if emp_id:
            raw[desk_id] = emp_id

        desk_name = _text(row, "Desk Name", df)
        if desk_name:
            snapshot.desk_names[desk_id] = desk_name
        if _flag(row, "Pinned", df):
            snapshot.pinned_desks.add(desk_id)
        if _flag(row, "Unavailable", df):
            snapshot.unavailable_desks.add(desk_id)

    snapshot.seating = sanitize_seating(raw, snapshot.desks, employees)
    return snapshot


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        return pd.read_csv(uploaded_file, dtype=str)
    elif name.endswith(".xlsx") or name.endswith(".xls"):
        return pd.read_excel(uploaded_file, engine="openpyxl", dtype=str)
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")


# Expected sheet names for multi-tab Excel (case-insensitive matching)
SHEET_ALIASES = {
    "zones": ["zones", "zone", "layout", "floor", "floor plan"],
    "people": ["people", "employees", "employee", "staff", "directory"],
    "seating": ["seating", "seats", "desks", "assignments", "seating chart"],
}


def _match_sheet(sheet_names: List[str], category: str) -> str:
    """Find a sheet name matching the given category. Returns the matched name or raises."""
    aliases = SHEET_ALIASES[category]
    lower_map = {s.lower().strip(): s for s in sheet_names}
    for alias in aliases:
        if alias in lower_map:
            return lower_map[alias]
    raise ValueError(
        f"Could not find a sheet for '{category}'. "
        f"Expected one of: {aliases}. "
        f"Found sheets: {sheet_names}"
    )


def load_multi_sheet_excel(uploaded_file) -> Tuple[pd.DataFrame, pd.DataFrame, pd.DataFrame]:
    """Load a single Excel file with 3 tabs: Zones, People, Seating.

    Sheet names are matched case-insensitively. Accepted names include:
    - Zones: 'Zones', 'Layout', 'Floor Plan', etc.
    - People: 'People', 'Employees', 'Directory', etc.
    - Seating: 'Seating', 'Desks', 'Assignments', etc.

    Returns (zones_df, people_df, seating_df).
    """
    xl = pd.ExcelFile(uploaded_file, engine="openpyxl")
    sheet_names = xl.sheet_names

    zones_df = pd.read_excel(xl, sheet_name=_match_sheet(sheet_names, "zones"), dtype=str)
    people_df = pd.read_excel(xl, sheet_name=_match_sheet(sheet_names, "people"), dtype=str)
    seating_df = pd.read_excel(xl, sheet_name=_match_sheet(sheet_names, "seating"), dtype=str)

    return zones_df, people_df, seating_df


def build_snapshot(
    zones_df: pd.DataFrame,
    people_df: pd.DataFrame,
    seating_df: pd.DataFrame,
) -> SeatingSnapshot:
    """Parse all three tables into one snapshot. Validate first with data.validator."""
    zones = parse_zones(zones_df)
    employees = parse_employees(people_df)
    return parse_seating(seating_df, zones, employees)


# --- In-app edits ---

def desk_table(snapshot: SeatingSnapshot) -> pd.DataFrame:
    """One editable row per desk, in the same columns parse_seating reads."""
    names = {e.employee_id: e.name for e in snapshot.employees}
    return pd.DataFrame([{
        "Desk ID": d.desk_id,
        "Employee ID": snapshot.seating.get(d.desk_id) or "",
        "Name": names.get(snapshot.seating.get(d.desk_id), ""),
        "Desk Name": snapshot.desk_names.get(d.desk_id, ""),
        "Pinned": d.desk_id in snapshot.pinned_desks,
        "Unavailable": d.desk_id in snapshot.unavailable_desks,
    } for d in snapshot.desks])


def people_table(snapshot: SeatingSnapshot) -> pd.DataFrame:
    return pd.DataFrame(
        [(e.employee_id, e.name, e.department) for e in snapshot.employees],
        columns=["Employee ID", "Name", "Department"],
    )


def next_employee_id(employee_ids: List[str]) -> str:
    """'e' plus one more than the highest numeric 'eN' id in use."""
    nums = [int(emp_id[1:]) for emp_id in employee_ids if emp_id[:1] == "e" and emp_id[1:].isdigit()]
    return f"e{max(nums, default=0) + 1}"


def apply_desk_edits(
    snapshot: SeatingSnapshot,
    desk_df: pd.DataFrame,
) -> Tuple[SeatingSnapshot, List[str]]:
    """Rebuild seating, desk names, pins and unavailable desks from the desk editor table.

    An unavailable desk that is not pinned cannot gain an occupant through an edit,
    and marking an occupied desk unavailable unseats its occupant. Returns the
    updated snapshot and the unseated ids.
    """
    edited = parse_seating(desk_df, snapshot.zones, snapshot.employees)
    blocked = edited.unavailable_desks - edited.pinned_desks

    evicted = []
    for d in edited.desks:
        emp_id = edited.seating.get(d.desk_id)
        if not emp_id or d.desk_id not in blocked:
            continue
        newly_unavailable = d.desk_id not in snapshot.unavailable_desks
        if newly_unavailable or snapshot.seating.get(d.desk_id) != emp_id:
            edited.seating[d.desk_id] = None
            evicted.append(emp_id)
    return edited, evicted


def apply_people_edits(snapshot: SeatingSnapshot, people_df: pd.DataFrame) -> SeatingSnapshot:
    """Replace the directory with the people editor table.

    Rows without a name are skipped and rows without an id get the next free 'eN' id.
    Removed people lose their desk. Raises ValueError when the table does not validate.
    """
    rows = []
    for _, row in people_df.iterrows():
        name = _text(row, "Name", people_df)
        if not name:
            continue
        rows.append({
            "Employee ID": _text(row, "Employee ID", people_df),
            "Name": name,
            "Department": _text(row, "Department", people_df),
        })

    taken = [r["Employee ID"] for r in rows if r["Employee ID"]]
    for r in rows:
        if not r["Employee ID"]:
            r["Employee ID"] = next_employee_id(taken)
            taken.append(r["Employee ID"])

    df = pd.DataFrame(rows, columns=["Employee ID", "Name", "Department"])
    result = validate_people(df)
    if not result.is_valid:
        raise ValueError("; ".join(result.errors))

    employees = parse_employees(df)
    seating = sanitize_seating(snapshot.seating, snapshot.desks, employees)
    return dataclasses.replace(snapshot, employees=employees, seating=seating)
