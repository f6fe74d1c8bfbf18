from __future__ import annotations

import io

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from .service import EventReport

_COLUMNS = [
    ("School ID", 40, "school_id"),
    ("Name", 115, "name"),
    ("Program", 270, "program"),
    ("Block", 335, "block"),
    ("Session", 370, "session"),
    ("Time In", 430, "time_in"),
    ("Time Out", 480, "time_out"),
    ("Duration", 530, "duration"),
]


def _header(c: canvas.Canvas, y: float) -> float:
    c.setFont("Helvetica-Bold", 9)
    for title, x, _ in _COLUMNS:
        c.drawString(x, y, title)
    c.line(40, y - 4, 570, y - 4)
    c.setFont("Helvetica", 8)
    return y - 16


def render_event_report_pdf(report: EventReport) -> io.BytesIO:
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=A4)
    c.setTitle(f"Attendance - {report.event.name}")
    width, height = A4

    y = height - 50
    c.setFont("Helvetica-Bold", 14)
    c.drawString(40, y, "Attendance Report")
    y -= 20
    c.setFont("Helvetica", 10)
    c.drawString(40, y, f"Event: {report.event.name}")
    c.drawString(350, y, f"Date: {report.event.event_date.strftime('%Y-%m-%d')}")
    y -= 15
    c.drawString(40, y, f"Total attendees: {report.total}")
    y -= 15
    by_program = ", ".join(f"{s['program']}: {s['count']}" for s in report.by_program) or "-"
    by_block = ", ".join(f"Block {s['block']}: {s['count']}" for s in report.by_block) or "-"
    c.drawString(40, y, f"By program: {by_program}")
    y -= 15
    c.drawString(40, y, f"By block: {by_block}")
    y -= 25

    y = _header(c, y)
    for row in report.rows:
        if y < 50:
            c.showPage()
            y = _header(c, height - 50)
        for _, x, key in _COLUMNS:
            value = str(row[key])
            if key == "name" and len(value) > 30:
                value = value[:27] + "..."
            c.drawString(x, y, value)
        y -= 14

    c.save()
    buffer.seek(0)
    return buffer
