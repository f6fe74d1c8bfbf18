from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_duration, format_time, start_of_day
from ..events.model import Event
from ..events.repository import EventRepository
from ..members.repository import MemberRepository
from ..core.exceptions import NotFoundError


@dataclass(frozen=True)
class DashboardStats:
    total_members: int
    total_events: int
    today_attendance: int
    active_events: int


@dataclass(frozen=True)
class EventReport:
    event: Event
    rows: list[dict]
    by_program: list[dict]
    by_block: list[dict]

    @property
    def total(self) -> int:
        return len(self.rows)

    def chart_data(self) -> dict:
        return {
            "program": {
                "labels": [s["program"] for s in self.by_program],
                "data": [s["count"] for s in self.by_program],
            },
            "block": {
                "labels": [s["block"] for s in self.by_block],
                "data": [s["count"] for s in self.by_block],
            },
        }


def _count_by(values: list[str], key: str) -> list[dict]:
    # dicts keep first-seen order
    counts: dict[str, int] = {}
    for v in values:
        counts[v] = counts.get(v, 0) + 1
    return [{key: k, "count": n} for k, n in counts.items()]


class ReportService:
    def __init__(self, attendance: AttendanceRepository, members: MemberRepository, events: EventRepository):
        self._attendance = attendance
        self._members = members
        self._events = events

    def dashboard_stats(self, *, today: Optional[date] = None) -> DashboardStats:
        today = today or date.today()
        return DashboardStats(
            total_members=self._members.count(),
            total_events=self._events.count(),
            today_attendance=self._attendance.count_since(start_of_day(today)),
            active_events=self._events.count_on(today),
        )

    def build_event_report(self, event_id: int) -> EventReport:
        event = self._events.get_by_id(event_id)
        if not event:
            raise NotFoundError("Event not found")

        records = self._attendance.list_for_event(event_id)
        rows = [
            {
                "school_id": r.school_id,
                "name": r.name,
                "program": r.program.value,
                "block": r.block or "-",
                "session": r.session.value,
                "time_in": format_time(r.time_in),
                "time_out": format_time(r.time_out),
                "duration": format_duration(r.time_in, r.time_out),
            }
            for r in records
        ]

        return EventReport(
            event=event,
            rows=rows,
            by_program=_count_by([r["program"] for r in rows], "program"),
            by_block=_count_by([r["block"] for r in rows], "block"),
        )
