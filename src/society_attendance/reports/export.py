"""Tabular exports of an event report (CSV, Excel)."""
from __future__ import annotations

import csv
import io

import pandas as pd

from .service import EventReport

CSV_FIELDS = ["school_id", "name", "program", "block", "session", "time_in", "time_out", "duration"]

_XLSX_HEADERS = {
    "school_id": "School ID",
    "name": "Name",
    "program": "Program",
    "block": "Block",
    "session": "Session",
    "time_in": "Time In",
    "time_out": "Time Out",
    "duration": "Duration",
}


def render_event_report_csv(report: EventReport) -> bytes:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
    writer.writeheader()
    for row in report.rows:
        writer.writerow(row)
    # BOM so Excel picks up UTF-8 names
    return out.getvalue().encode("utf-8-sig")


def render_event_report_xlsx(report: EventReport) -> io.BytesIO:
    df = pd.DataFrame(report.rows, columns=CSV_FIELDS).rename(columns=_XLSX_HEADERS)
    summary = pd.DataFrame(
        [("Program", s["program"], s["count"]) for s in report.by_program]
        + [("Block", s["block"], s["count"]) for s in report.by_block]
        + [("Total", "", report.total)],
        columns=["Group", "Value", "Attendees"],
    )

    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name="Attendance", index=False)
        summary.to_excel(writer, sheet_name="Summary", index=False)
    out.seek(0)
    return out
