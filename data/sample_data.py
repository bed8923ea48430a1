"""Default office used for demos and first-run: 3 zones, 20 employees."""

import pandas as pd
import os


ZONES = [
    {"Zone ID": "z1", "Zone Name": "Engineering Bay", "Rows": 3, "Cols": 4, "Color": "#dbeafe"},
    {"Zone ID": "z2", "Zone Name": "Design Studio",   "Rows": 2, "Cols": 3, "Color": "#f3e8ff"},
    {"Zone ID": "z3", "Zone Name": "Business Wing",   "Rows": 2, "Cols": 4, "Color": "#dcfce7"},
]

PEOPLE = [
    ("e1", "Alice Chen", "Engineering"),
    ("e2", "Bob Martinez", "Engineering"),
    ("e3", "Carol Wu", "Design"),
    ("e4", "David Kim", "Marketing"),
    ("e5", "Eva Singh", "Sales"),
    ("e6", "Frank Lopez", "Engineering"),
    ("e7", "Grace Patel", "Design"),
    ("e8", "Henry Zhao", "HR"),
    ("e9", "Iris Johnson", "Finance"),
    ("e10", "Jack Brown", "Product"),
    ("e11", "Karen Lee", "Engineering"),
    ("e12", "Leo Nguyen", "Operations"),
    ("e13", "Mia Davis", "Marketing"),
    ("e14", "Noah Wilson", "Sales"),
    ("e15", "Olivia Taylor", "Engineering"),
    ("e16", "Paul Anderson", "Design"),
    ("e17", "Quinn Thomas", "Finance"),
    ("e18", "Rachel Garcia", "Product"),
    ("e19", "Sam Robinson", "HR"),
    ("e20", "Tina Clark", "Operations"),
]

DEFAULT_SEATING = {
    "z1-d0": "e1", "z1-d1": "e2", "z1-d2": "e6", "z1-d3": "e11", "z1-d4": "e15",
    "z2-d0": "e3", "z2-d1": "e7", "z2-d2": "e16",
    "z3-d0": "e4", "z3-d1": "e5", "z3-d2": "e8", "z3-d3": "e9",
    "z3-d4": "e10", "z3-d5": "e12", "z3-d6": "e13", "z3-d7": "e14",
}


def generate_zones_df() -> pd.DataFrame:
    return pd.DataFrame(ZONES)


def generate_people_df() -> pd.DataFrame:
    return pd.DataFrame(PEOPLE, columns=["Employee ID", "Name", "Department"])


def generate_seating_df() -> pd.DataFrame:
    """One row per desk in every zone grid, empty desks included."""
    rows = []
    for z in ZONES:
        for i in range(z["Rows"] * z["Cols"]):
            desk_id = f"{z['Zone ID']}-d{i}"
            rows.append({
                "Desk ID": desk_id,
                "Employee ID": DEFAULT_SEATING.get(desk_id),
                "Desk Name": "",
                "Pinned": "",
                "Unavailable": "",
            })
    return pd.DataFrame(rows)


def generate_sample_csvs(output_dir: str):
    """Write sample CSV files to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    generate_zones_df().to_csv(os.path.join(output_dir, "zones.csv"), index=False)
    generate_people_df().to_csv(os.path.join(output_dir, "people.csv"), index=False)
    generate_seating_df().to_csv(os.path.join(output_dir, "seating.csv"), index=False)


def generate_sample_excel(output_dir: str):
    """Write a single multi-tab Excel file with all three datasets."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "sample_office.xlsx")
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        generate_zones_df().to_excel(writer, sheet_name="Zones", index=False)
        generate_people_df().to_excel(writer, sheet_name="People", index=False)
        generate_seating_df().to_excel(writer, sheet_name="Seating", index=False)


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csvs(out)
    generate_sample_excel(out)
    print("Sample CSV and Excel files generated in sample_files/")
