"""Plotly chart builders for the Exam Seating Planner."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import Dict, List

from models.seating import Placement
from models.student import StudentRecord
from config.defaults import DEPARTMENT_COLORS, YEAR_COLORS, EMPTY_SEAT_COLOR


def seat_grid_heatmap(
    placement: Placement,
    students_by_roll: Dict[str, StudentRecord],
    color_by: str = "dept",
) -> go.Figure:
    """Seat map of one classroom, each cell coloured by the occupant's department or year."""
    if color_by == "year":
        categories = sorted(YEAR_COLORS)
        palette = [YEAR_COLORS[y] for y in categories]
        labels = [f"Year {y}" for y in categories]
    else:
        categories = sorted(DEPARTMENT_COLORS)
        palette = [DEPARTMENT_COLORS[d] for d in categories]
        labels = categories
    index = {cat: i + 1 for i, cat in enumerate(categories)}

    z, text = [], []
    for grid_row in placement.grid:
        z_row, text_row = [], []
        for roll in grid_row:
            student = students_by_roll.get(roll) if roll else None
            key = getattr(student, color_by) if student else None
            z_row.append(index.get(key, 0) + 0.5)
            text_row.append(roll or "")
        z.append(z_row)
        text.append(text_row)

    # Discrete colour scale: band 0 = empty seat, band i = category i; cells sit mid-band
    colors = [EMPTY_SEAT_COLOR] + palette
    n = len(colors)
    colorscale = []
    for i, c in enumerate(colors):
        colorscale.append([i / n, c])
        colorscale.append([(i + 1) / n, c])

    fig = go.Figure(data=go.Heatmap(
        z=z,
        x=[f"C{c + 1}" for c in range(placement.cols)],
        y=[f"R{r + 1}" for r in range(placement.rows)],
        text=text,
        texttemplate="%{text}",
        textfont={"size": 9},
        colorscale=colorscale,
        zmin=0,
        zmax=n,
        showscale=False,
        xgap=2,
        ygap=2,
        hovertemplate="Seat %{y}%{x}<br>%{text}<extra></extra>",
    ))
    fig.update_layout(
        title=f"Classroom {placement.classroom_no}: coloured by {'year' if color_by == 'year' else 'department'}",
        yaxis_autorange="reversed",
        height=max(250, placement.rows * 40 + 100),
        margin=dict(l=40, r=20, t=50, b=30),
    )
    fig.add_annotation(
        text=" · ".join(labels),
        xref="paper", yref="paper", x=0, y=-0.12,
        showarrow=False, font_size=10,
    )
    return fig


def occupancy_bar(utilization_data: List[dict], title: str = "Seat Occupancy by Classroom") -> go.Figure:
    """Stacked bar of occupied vs empty configured seats per classroom."""
    df = pd.DataFrame(utilization_data)
    fig = px.bar(
        df, x="classroom_no", y=["occupied_seats", "empty_seats"],
        labels={"value": "Seats", "classroom_no": "Classroom", "variable": ""},
        title=title,
        color_discrete_map={"occupied_seats": "#4A90D9", "empty_seats": "#D5DBE3"},
    )
    fig.update_layout(legend_title_text="", height=350, barmode="stack", xaxis_type="category")
    return fig


def roster_composition_bar(students: List[StudentRecord]) -> go.Figure:
    """Students per department, split by year."""
    df = pd.DataFrame([{"Department": s.dept, "Year": f"Year {s.year}"} for s in students])
    counts = df.groupby(["Department", "Year"]).size().reset_index(name="Students")
    fig = px.bar(
        counts, x="Department", y="Students", color="Year",
        title="Roster by Department and Year",
        color_discrete_map={f"Year {y}": c for y, c in YEAR_COLORS.items()},
        category_orders={"Year": [f"Year {y}" for y in sorted(YEAR_COLORS)]},
    )
    fig.update_layout(height=350, legend_title_text="")
    return fig
