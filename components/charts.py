"""Plotly chart builders for the Desk Move Planner."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import Dict, List, Optional, Set

from models.employee import Employee
from models.layout import Desk, Zone
from models.seating import SeatingMap
from config.defaults import get_department_color


def zone_grid_heatmap(
    zone: Zone,
    desks: List[Desk],
    seating: SeatingMap,
    employees: List[Employee],
    unavailable_desks: Optional[Set[str]] = None,
    pinned_desks: Optional[Set[str]] = None,
    department_colors: Optional[Dict[str, str]] = None,
) -> go.Figure:
    """Desk grid for one zone, colored by the occupant's department."""
    employee_map = {e.employee_id: e for e in employees}
    unavailable = unavailable_desks or set()
    pinned = pinned_desks or set()
    zone_desks = [d for d in desks if d.zone == zone.zone_id]

    departments = sorted({
        employee_map[seating[d.desk_id]].department
        for d in zone_desks
        if seating.get(d.desk_id) in employee_map
    })
    dept_index = {dept: i + 1 for i, dept in enumerate(departments)}

    z = [[0] * zone.cols for _ in range(zone.rows)]
    text = [[""] * zone.cols for _ in range(zone.rows)]
    for d in zone_desks:
        emp_id = seating.get(d.desk_id)
        if d.desk_id in unavailable:
            text[d.row][d.col] = "N/A"
            continue
        if not emp_id:
            continue
        emp = employee_map.get(emp_id)
        label = emp.name if emp else emp_id
        if d.desk_id in pinned:
            label += " (pinned)"
        text[d.row][d.col] = label
        z[d.row][d.col] = dept_index.get(emp.department, 0) if emp else 0

    # Discrete scale: 0 = empty, 1..n = departments
    n = len(departments)
    colorscale = [[0.0, "#f9fafb"], [1.0 / (n + 1), "#f9fafb"]]
    for dept, i in dept_index.items():
        color = get_department_color(dept, department_colors)
        colorscale.append([i / (n + 1), color])
        colorscale.append([(i + 1) / (n + 1), color])

    fig = go.Figure(data=go.Heatmap(
        z=z,
        text=text,
        texttemplate="%{text}",
        colorscale=colorscale,
        zmin=0,
        zmax=n + 1,
        showscale=False,
        xgap=3,
        ygap=3,
        hovertemplate="Row %{y}, Col %{x}<br>%{text}<extra></extra>",
    ))
    fig.update_layout(
        title=zone.name,
        height=max(200, zone.rows * 70),
        yaxis=dict(autorange="reversed", showticklabels=False),
        xaxis=dict(showticklabels=False),
        margin=dict(l=10, r=10, t=40, b=10),
    )
    return fig


def department_zone_bar(rows: List[dict]) -> go.Figure:
    """Stacked bar of seated employees per zone, split by department."""
    df = pd.DataFrame(rows)
    fig = px.bar(
        df, x="Zone", y="Seated", color="Department",
        title="Department Mix by Zone",
        color_discrete_map={d: get_department_color(d) for d in df["Department"].unique()} if not df.empty else None,
    )
    fig.update_layout(barmode="stack", height=350, legend_title_text="")
    return fig


def score_comparison_bar(previous_score: float, new_score: float) -> go.Figure:
    """Before/after clustering score."""
    fig = go.Figure(data=[go.Bar(
        x=["Current", "Optimized"],
        y=[previous_score, new_score],
        marker_color=["#4A90D9", "#E8734A"],
        text=[f"{previous_score:g}", f"{new_score:g}"],
        textposition="auto",
    )])
    fig.update_layout(title="Clustering Score", yaxis_title="Score", height=300)
    return fig
