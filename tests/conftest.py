from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest

from society_attendance import create_app
from society_attendance.attendance.model import AttendanceRecord, AttendanceReportRow
from society_attendance.container import wire_container
from society_attendance.core.enums import AttendanceSession, Program
from society_attendance.core.exceptions import DuplicateError
from society_attendance.events.model import Event, EventInput
from society_attendance.members.model import Member, MemberInput
from society_attendance.officers.model import Officer


class InMemoryOfficers:
    def __init__(self):
        self._next_id = 1
        self.by_id: dict[int, Officer] = {}

    def get_by_email(self, email: str) -> Optional[Officer]:
        return next((o for o in self.by_id.values() if o.email == email), None)

    def create_officer(self, *, full_name: str, email: str, password_hash: str) -> int:
        if self.get_by_email(email):
            raise DuplicateError("An account with this email already exists")
        oid = self._next_id
        self._next_id += 1
        self.by_id[oid] = Officer(officer_id=oid, full_name=full_name, email=email, password_hash=password_hash)
        return oid


class InMemoryMembers:
    def __init__(self):
        self._next_id = 1
        self.by_id: dict[int, Member] = {}

    def _check_unique(self, school_id: str, *, exclude: Optional[int] = None) -> None:
        for m in self.by_id.values():
            if m.school_id == school_id and m.member_id != exclude:
                raise DuplicateError("A member with this school ID already exists")

    def list_all(self):
        return sorted(self.by_id.values(), key=lambda m: m.name)

    def get_by_id(self, member_id: int) -> Optional[Member]:
        return self.by_id.get(int(member_id))

    def get_by_school_id(self, school_id: str) -> Optional[Member]:
        return next((m for m in self.by_id.values() if m.school_id == school_id), None)

    def create_member(self, data: MemberInput) -> int:
        self._check_unique(data.school_id)
        mid = self._next_id
        self._next_id += 1
        self.by_id[mid] = Member(
            member_id=mid,
            school_id=data.school_id,
            name=data.name,
            program=data.program,
            block=data.block,
            year_level=data.year_level,
            created_at=datetime(2025, 6, 1, 8, 0, 0),
        )
        return mid

    def update_member(self, member_id: int, data: MemberInput) -> bool:
        current = self.by_id.get(int(member_id))
        if not current:
            return False
        self._check_unique(data.school_id, exclude=current.member_id)
        self.by_id[current.member_id] = replace(
            current,
            school_id=data.school_id,
            name=data.name,
            program=data.program,
            block=data.block,
            year_level=data.year_level,
        )
        return True

    def update_year_level(self, member_id: int, year_level: int) -> bool:
        current = self.by_id.get(int(member_id))
        if not current:
            return False
        self.by_id[current.member_id] = replace(current, year_level=year_level)
        return True

    def delete_by_id(self, member_id: int) -> bool:
        return self.by_id.pop(int(member_id), None) is not None

    def count(self) -> int:
        return len(self.by_id)

    # test helper
    def add(self, school_id, name, program=Program.BSCS, block="1", year_level=1) -> Member:
        mid = self.create_member(
            MemberInput(school_id=school_id, name=name, program=Program(program), block=block, year_level=year_level)
        )
        return self.by_id[mid]


class InMemoryEvents:
    def __init__(self):
        self._next_id = 1
        self.by_id: dict[int, Event] = {}

    def list_all(self):
        return sorted(self.by_id.values(), key=lambda e: (e.event_date, e.event_id), reverse=True)

    def get_by_id(self, event_id: int) -> Optional[Event]:
        return self.by_id.get(int(event_id))

    def create_event(self, data: EventInput, *, created_by: Optional[int]) -> int:
        eid = self._next_id
        self._next_id += 1
        self.by_id[eid] = Event(
            event_id=eid,
            name=data.name,
            description=data.description,
            event_date=data.event_date,
            created_by=created_by,
        )
        return eid

    def update_event(self, event_id: int, data: EventInput) -> bool:
        current = self.by_id.get(int(event_id))
        if not current:
            return False
        self.by_id[current.event_id] = replace(
            current, name=data.name, description=data.description, event_date=data.event_date
        )
        return True

    def delete_by_id(self, event_id: int) -> bool:
        return self.by_id.pop(int(event_id), None) is not None

    def count(self) -> int:
        return len(self.by_id)

    def count_on(self, day: date) -> int:
        return sum(1 for e in self.by_id.values() if e.event_date == day)

    # test helper
    def add(self, name, event_date, description=None) -> Event:
        eid = self.create_event(EventInput(name=name, description=description, event_date=event_date), created_by=1)
        return self.by_id[eid]


class InMemoryAttendance:
    def __init__(self, members: InMemoryMembers):
        self._members = members
        self._next_id = 1
        self.by_id: dict[int, AttendanceRecord] = {}

    def get_for_slot(self, *, member_id, event_id, session) -> Optional[AttendanceRecord]:
        for r in self.by_id.values():
            if (r.member_id, r.event_id, r.session) == (member_id, event_id, session):
                return r
        return None

    def create_time_in(self, *, member_id, event_id, session, time_in) -> int:
        if self.get_for_slot(member_id=member_id, event_id=event_id, session=session):
            raise DuplicateError("Attendance already recorded")
        aid = self._next_id
        self._next_id += 1
        self.by_id[aid] = AttendanceRecord(
            attendance_id=aid,
            member_id=member_id,
            event_id=event_id,
            session=AttendanceSession(session),
            time_in=time_in,
        )
        return aid

    def set_time_out(self, *, attendance_id, time_out) -> bool:
        current = self.by_id.get(int(attendance_id))
        if not current or not current.is_open:
            return False
        self.by_id[current.attendance_id] = replace(current, time_out=time_out)
        return True

    def list_for_event(self, event_id: int):
        rows = []
        for r in self.by_id.values():
            if r.event_id != event_id:
                continue
            m = self._members.get_by_id(r.member_id)
            rows.append(
                AttendanceReportRow(
                    attendance_id=r.attendance_id,
                    session=r.session,
                    time_in=r.time_in,
                    time_out=r.time_out,
                    school_id=m.school_id,
                    name=m.name,
                    program=m.program,
                    block=m.block,
                )
            )
        return sorted(rows, key=lambda row: row.time_in, reverse=True)

    def count_since(self, start: datetime) -> int:
        return sum(1 for r in self.by_id.values() if r.time_in >= start)


@pytest.fixture
def fixed_now():
    return datetime(2025, 9, 15, 9, 30, 0)


@pytest.fixture
def officers_repo():
    return InMemoryOfficers()


@pytest.fixture
def members_repo():
    return InMemoryMembers()


@pytest.fixture
def events_repo():
    return InMemoryEvents()


@pytest.fixture
def attendance_repo(members_repo):
    return InMemoryAttendance(members_repo)


@pytest.fixture
def container(officers_repo, members_repo, events_repo, attendance_repo):
    return wire_container(
        officers_repo=officers_repo,
        members_repo=members_repo,
        events_repo=events_repo,
        attendance_repo=attendance_repo,
        academic_year=2025,
    )


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def signed_in(client):
    with client.session_transaction() as sess:
        sess["officer_id"] = 1
        sess["name"] = "Test Officer"
    return client
