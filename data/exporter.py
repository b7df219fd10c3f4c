"""
Seating Export Module

Turns a SeatingResult into a flat seat list (DataFrame / CSV) and into a PDF
with one seat-grid table per classroom, rendered with ReportLab.
"""

import io
import logging
import os
from typing import Dict, List, Optional

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from models.seating import Placement, SeatingResult
from models.student import StudentRecord
from config.defaults import EXAM_TYPE_LABELS

logger = logging.getLogger(__name__)

SEAT_LIST_COLUMNS = ["Classroom", "Row", "Column", "Seat", "Roll No", "Dept", "Year"]


def seat_label(row: int, col: int) -> str:
    """1-based seat label, e.g. R1C3."""
    return f"R{row + 1}C{col + 1}"


def placements_to_dataframe(
    result: SeatingResult,
    students_by_roll: Optional[Dict[str, StudentRecord]] = None,
) -> pd.DataFrame:
    """One row per occupied seat, in classroom order then seating order."""
    lookup = students_by_roll or {}
    rows = []
    for p in result.placements:
        for r, grid_row in enumerate(p.grid):
            for c, roll in enumerate(grid_row):
                if roll is None:
                    continue
                student = lookup.get(roll)
                rows.append({
                    "Classroom": p.classroom_no,
                    "Row": r + 1,
                    "Column": c + 1,
                    "Seat": seat_label(r, c),
                    "Roll No": roll,
                    "Dept": student.dept if student else "",
                    "Year": student.year if student else None,
                })
    return pd.DataFrame(rows, columns=SEAT_LIST_COLUMNS)


def export_csv(
    result: SeatingResult,
    students_by_roll: Optional[Dict[str, StudentRecord]] = None,
) -> str:
    return placements_to_dataframe(result, students_by_roll).to_csv(index=False)


def grid_table_data(placement: Placement) -> List[List[str]]:
    """Seat grid with a header row of column labels and a leading row-label column."""
    data = [[""] + [f"C{c + 1}" for c in range(placement.cols)]]
    for r, grid_row in enumerate(placement.grid):
        data.append([f"R{r + 1}"] + [roll or "" for roll in grid_row])
    return data


def _grid_table(placement: Placement) -> Table:
    font_size = 8 if placement.cols <= 10 else 6
    table = Table(grid_table_data(placement), repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#4F81BD")),
        ("BACKGROUND", (0, 1), (0, -1), colors.HexColor("#4F81BD")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ("TEXTCOLOR", (0, 1), (0, -1), colors.whitesmoke),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTNAME", (0, 1), (0, -1), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), font_size),
        ("ALIGN", (0, 0), (-1, -1), "CENTER"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]))
    return table


def export_pdf(result: SeatingResult, path: Optional[str] = None) -> bytes:
    """
    Renders the seating result to PDF and returns the document bytes.
    When a path is given the document is also written there; the caller is
    responsible for recording it on the result.
    """
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=landscape(A4),
        leftMargin=24, rightMargin=24, topMargin=24, bottomMargin=24,
        title=f"Seating Plan {result.result_id}",
    )
    styles = getSampleStyleSheet()
    elements = []

    elements.append(Paragraph("Exam Seating Plan", styles["Title"]))
    elements.append(Paragraph(EXAM_TYPE_LABELS.get(result.exam_type, result.exam_type), styles["Heading2"]))
    summary = [
        f"Generated: {result.created_at.strftime('%Y-%m-%d %H:%M')}",
        f"Students: {result.total_students}",
        f"Seated: {result.seated_count}",
        f"Configured seats: {result.total_capacity}",
        f"Classrooms: {', '.join(p.classroom_no for p in result.placements)}",
    ]
    if result.created_by:
        summary.append(f"Prepared by: {result.created_by}")
    for line in summary:
        elements.append(Paragraph(line, styles["Normal"]))

    for p in result.placements:
        elements.append(PageBreak())
        elements.append(Paragraph(f"Classroom {p.classroom_no}", styles["Heading2"]))
        elements.append(Paragraph(
            f"{p.rows} rows x {p.cols} columns, {p.occupied_seats} of {p.cell_count} seats occupied",
            styles["Normal"],
        ))
        elements.append(Spacer(1, 12))
        elements.append(_grid_table(p))

    doc.build(elements)
    pdf_bytes = buffer.getvalue()

    if path:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(path, "wb") as f:
            f.write(pdf_bytes)
        logger.info("Wrote seating PDF for %s to %s", result.result_id, path)

    return pdf_bytes


def default_pdf_path(result: SeatingResult, export_dir: str) -> str:
    return os.path.join(export_dir, f"seating-plan-{result.result_id}.pdf")
