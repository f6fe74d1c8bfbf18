from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_AFTERNOON_START_HOUR, DEFAULT_EMAIL_DOMAIN, DEFAULT_MEMBERS_PER_PAGE
from .database.connection import DatabaseConnection, DBConfig
from .events.mysql_event_repository import MySQLEventRepository
from .events.repository import EventRepository
from .events.service import EventService
from .members.mysql_member_repository import MySQLMemberRepository
from .members.repository import MemberRepository
from .members.service import MemberService
from .officers.mysql_officer_repository import MySQLOfficerRepository
from .officers.repository import OfficerRepository
from .officers.service import AuthService
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    officers_repo: OfficerRepository
    members_repo: MemberRepository
    events_repo: EventRepository
    attendance_repo: AttendanceRepository

    auth_service: AuthService
    member_service: MemberService
    event_service: EventService
    attendance_service: AttendanceService
    report_service: ReportService


def wire_container(
    *,
    officers_repo: OfficerRepository,
    members_repo: MemberRepository,
    events_repo: EventRepository,
    attendance_repo: AttendanceRepository,
    email_domain: str = DEFAULT_EMAIL_DOMAIN,
    members_per_page: int = DEFAULT_MEMBERS_PER_PAGE,
    afternoon_start_hour: int = DEFAULT_AFTERNOON_START_HOUR,
    academic_year: Optional[int] = None,
) -> Container:
    return Container(
        officers_repo=officers_repo,
        members_repo=members_repo,
        events_repo=events_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(officers_repo, email_domain=email_domain),
        member_service=MemberService(members_repo, per_page=members_per_page, academic_year=academic_year),
        event_service=EventService(events_repo),
        attendance_service=AttendanceService(
            attendance_repo,
            members_repo,
            events_repo,
            afternoon_start_hour=afternoon_start_hour,
        ),
        report_service=ReportService(attendance_repo, members_repo, events_repo),
    )


def build_container(*, db_config: dict, **options) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire_container(
        officers_repo=MySQLOfficerRepository(conn),
        members_repo=MySQLMemberRepository(conn),
        events_repo=MySQLEventRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        **options,
    )
