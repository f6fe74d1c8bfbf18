from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceSession
from .model import AttendanceRecord, AttendanceReportRow


class AttendanceRepository(Protocol):
    def get_for_slot(
        self,
        *,
        member_id: int,
        event_id: int,
        session: AttendanceSession,
    ) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_time_in(
        self,
        *,
        member_id: int,
        event_id: int,
        session: AttendanceSession,
        time_in: datetime,
    ) -> int:
        """Raises ``DuplicateError`` if the (member, event, session) slot already exists."""

        raise NotImplementedError

    def set_time_out(self, *, attendance_id: int, time_out: datetime) -> bool:
        """Only closes records that are still open."""

        raise NotImplementedError

    def list_for_event(self, event_id: int) -> Sequence[AttendanceReportRow]:
        """Rows ordered by ``time_in`` descending."""

        raise NotImplementedError

    def count_since(self, start: datetime) -> int:
        raise NotImplementedError
