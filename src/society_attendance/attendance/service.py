from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_AFTERNOON_START_HOUR
from ..core.enums import AttendanceSession, ScanAction
from ..core.exceptions import DuplicateError, NotFoundError, ValidationError
from ..events.repository import EventRepository
from ..members.model import Member
from ..members.repository import MemberRepository
from .model import AttendanceRecord, ScanResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Turns a decoded membership-card code into a time-in or time-out.

    Each (member, event, session) slot moves through two states: open after the
    first scan, closed after the second. A third scan is rejected. The unique
    key on the slot in the database settles concurrent first scans.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        members: MemberRepository,
        events: EventRepository,
        *,
        afternoon_start_hour: int = DEFAULT_AFTERNOON_START_HOUR,
    ):
        self._attendance = attendance
        self._members = members
        self._events = events
        self._afternoon_start_hour = int(afternoon_start_hour)

    def session_for(self, now: datetime) -> AttendanceSession:
        return AttendanceSession.for_hour(now.hour, afternoon_start_hour=self._afternoon_start_hour)

    def _resolve_session(self, session: Optional[str | AttendanceSession], now: datetime) -> AttendanceSession:
        if not session:
            return self.session_for(now)
        try:
            return AttendanceSession(session)
        except ValueError:
            raise ValidationError("Invalid session")

    def record_scan(
        self,
        decoded_text: str,
        *,
        event_id: Optional[int],
        session: Optional[str | AttendanceSession] = None,
        now: Optional[datetime] = None,
    ) -> ScanResult:
        now = now or now_local()
        school_id = (decoded_text or "").strip()
        if not school_id:
            raise ValidationError("Scanned code is empty")

        if not event_id or not self._events.get_by_id(int(event_id)):
            raise NotFoundError("Please select an event first")

        member = self._members.get_by_school_id(school_id)
        if not member:
            raise NotFoundError(f"Member not found: {school_id}")

        slot = self._resolve_session(session, now)
        existing = self._attendance.get_for_slot(member_id=member.member_id, event_id=int(event_id), session=slot)

        if existing is None:
            return self._time_in(member, int(event_id), slot, now)
        if existing.is_open:
            return self._time_out(member, existing, now)
        raise ValidationError(f"{member.name} already timed out for the {slot.value} session")

    def _time_in(self, member: Member, event_id: int, slot: AttendanceSession, now: datetime) -> ScanResult:
        try:
            self._attendance.create_time_in(member_id=member.member_id, event_id=event_id, session=slot, time_in=now)
        except DuplicateError:
            # Another scanner inserted the same slot between our read and write.
            logger.warning("Concurrent time-in for %s at event %s (%s)", member.school_id, event_id, slot.value)
            raise ValidationError(f"{member.name} is already timed in for the {slot.value} session")

        logger.info("Time-in %s event=%s session=%s", member.school_id, event_id, slot.value)
        return ScanResult(
            action=ScanAction.TIMED_IN,
            session=slot,
            member_name=member.name,
            school_id=member.school_id,
            timestamp=now,
            message=f"{member.name} - TIMED IN\n{member.program.value} {member.block}".rstrip(),
        )

    def _time_out(self, member: Member, record: AttendanceRecord, now: datetime) -> ScanResult:
        if not self._attendance.set_time_out(attendance_id=record.attendance_id, time_out=now):
            raise ValidationError(f"{member.name} already timed out for the {record.session.value} session")

        logger.info("Time-out %s event=%s session=%s", member.school_id, record.event_id, record.session.value)
        return ScanResult(
            action=ScanAction.TIMED_OUT,
            session=record.session,
            member_name=member.name,
            school_id=member.school_id,
            timestamp=now,
            message=f"{member.name} - TIMED OUT",
        )
