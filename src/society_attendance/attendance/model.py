from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceSession, Program, ScanAction


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one time-in/time-out cycle of a member at an event session."""

    attendance_id: int
    member_id: int
    event_id: int
    session: AttendanceSession
    time_in: datetime
    time_out: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.time_out is None


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for reports/exports (attendance joined with the member)."""

    attendance_id: int
    session: AttendanceSession
    time_in: datetime
    time_out: Optional[datetime]
    school_id: str
    name: str
    program: Program
    block: str


@dataclass(frozen=True)
class ScanResult:
    action: ScanAction
    session: AttendanceSession
    member_name: str
    school_id: str
    timestamp: datetime
    message: str

    def to_dict(self) -> dict:
        return {
            "success": True,
            "action": self.action.value,
            "session": self.session.value,
            "member": {"name": self.member_name, "school_id": self.school_id},
            "time": self.timestamp.strftime("%H:%M:%S"),
            "message": self.message,
        }
