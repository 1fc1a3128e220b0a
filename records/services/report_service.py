# /academic-records/records/services/report_service.py

"""Rendering and export of class reports and class listings."""

from typing import Iterable, List

import pandas as pd

from ..models.class_model import Class
from ..models.report_model import ClassReport

REPORT_COLUMNS = ['RA', 'Name', 'Score 1', 'Score 2', 'Score 3', 'Average', 'Status']

_RULE = "-" * 96


def format_class_list(classes: Iterable[Class]) -> str:
    lines = ["", "--- Active Classes ---"]
    found = False
    for turma in classes:
        lines.append(f"ID: {turma.id} | Name: {turma.name} | Seats: {turma.occupied}/{turma.capacity}")
        found = True
    if not found:
        lines.append("No active classes registered.")
    lines.append("-" * 22)
    return "\n".join(lines)


def format_report(report: ClassReport) -> str:
    lines: List[str] = [
        "",
        f"--- REPORT: Class {report.class_name} (ID {report.class_id}) ---",
        f"Total seats: {report.capacity} | Occupied: {report.occupied}",
        _RULE,
        f"| {'RA':<10} | {'Name':<40} | {'N1':>5} | {'N2':>5} | {'N3':>5} | {'Avg':>5} | {'Status':<8} |",
        _RULE,
    ]
    for row in report.rows:
        s1, s2, s3 = row.scores
        lines.append(
            f"| {row.registration_id:<10} | {row.name:<40} | {s1:5.2f} | {s2:5.2f} | {s3:5.2f} "
            f"| {row.average:5.2f} | {row.status.value:<8} |"
        )
    if not report.rows:
        lines.append(f"|{'No active students in this class.':^94}|")
    lines.append(_RULE)
    return "\n".join(lines)


def export_report_as_csv(report: ClassReport) -> str:
    """CSV text for one class report. An empty class still gets the header row."""
    export_data = [
        {
            'RA': row.registration_id,
            'Name': row.name,
            'Score 1': row.scores[0],
            'Score 2': row.scores[1],
            'Score 3': row.scores[2],
            'Average': row.average,
            'Status': row.status.value,
        } for row in report.rows
    ]

    df = pd.DataFrame(export_data) if export_data else pd.DataFrame(columns=REPORT_COLUMNS)

    return df.to_csv(index=False)
