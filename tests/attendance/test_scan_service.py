from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from society_attendance.attendance.service import AttendanceService
from society_attendance.core.enums import AttendanceSession, ScanAction
from society_attendance.core.exceptions import DuplicateError, NotFoundError, ValidationError


@pytest.fixture
def scanner(attendance_repo, members_repo, events_repo):
    members_repo.add("25-197015", "Rexter Bailon", program="BSCS", block="2")
    events_repo.add("General Assembly", date(2025, 9, 15))
    return AttendanceService(attendance_repo, members_repo, events_repo, afternoon_start_hour=12)


def test_first_scan_times_in(scanner, attendance_repo, fixed_now):
    result = scanner.record_scan(" 25-197015 ", event_id=1, now=fixed_now)

    assert result.action is ScanAction.TIMED_IN
    assert result.session is AttendanceSession.MORNING
    assert result.message == "Rexter Bailon - TIMED IN\nBSCS 2"
    record = attendance_repo.get_for_slot(member_id=1, event_id=1, session=AttendanceSession.MORNING)
    assert record.time_in == fixed_now
    assert record.is_open


def test_second_scan_times_out(scanner, attendance_repo, fixed_now):
    scanner.record_scan("25-197015", event_id=1, now=fixed_now)
    later = fixed_now + timedelta(hours=2)

    result = scanner.record_scan("25-197015", event_id=1, session="morning", now=later)

    assert result.action is ScanAction.TIMED_OUT
    assert result.to_dict()["action"] == "TIMED OUT"
    record = attendance_repo.get_for_slot(member_id=1, event_id=1, session=AttendanceSession.MORNING)
    assert record.time_out == later


def test_third_scan_is_rejected(scanner, fixed_now):
    scanner.record_scan("25-197015", event_id=1, now=fixed_now)
    scanner.record_scan("25-197015", event_id=1, now=fixed_now + timedelta(minutes=5))

    with pytest.raises(ValidationError, match="already timed out for the morning session"):
        scanner.record_scan("25-197015", event_id=1, now=fixed_now + timedelta(minutes=10))


def test_time_out_lost_to_concurrent_scan(scanner, attendance_repo, monkeypatch, fixed_now):
    scanner.record_scan("25-197015", event_id=1, now=fixed_now)
    # another scanner closed the record between the lookup and the update
    monkeypatch.setattr(attendance_repo, "set_time_out", lambda **kwargs: False)

    with pytest.raises(ValidationError, match="Rexter Bailon already timed out for the morning session"):
        scanner.record_scan("25-197015", event_id=1, now=fixed_now + timedelta(minutes=5))

    record = attendance_repo.get_for_slot(member_id=1, event_id=1, session=AttendanceSession.MORNING)
    assert record.is_open


def test_sessions_are_independent(scanner, attendance_repo, fixed_now):
    scanner.record_scan("25-197015", event_id=1, now=fixed_now)
    afternoon = datetime(2025, 9, 15, 13, 0, 0)

    result = scanner.record_scan("25-197015", event_id=1, now=afternoon)

    assert result.action is ScanAction.TIMED_IN
    assert result.session is AttendanceSession.AFTERNOON
    assert len(attendance_repo.by_id) == 2


def test_session_boundary(scanner):
    assert scanner.session_for(datetime(2025, 9, 15, 11, 59)) is AttendanceSession.MORNING
    assert scanner.session_for(datetime(2025, 9, 15, 12, 0)) is AttendanceSession.AFTERNOON


@pytest.mark.parametrize(
    "code,event_id,exc,message",
    [
        ("   ", 1, ValidationError, "Scanned code is empty"),
        ("25-197015", None, NotFoundError, "Please select an event first"),
        ("25-197015", 42, NotFoundError, "Please select an event first"),
        ("99-999999", 1, NotFoundError, "Member not found: 99-999999"),
    ],
)
def test_scan_errors(scanner, fixed_now, code, event_id, exc, message):
    with pytest.raises(exc, match=message):
        scanner.record_scan(code, event_id=event_id, now=fixed_now)


def test_invalid_session(scanner, fixed_now):
    with pytest.raises(ValidationError, match="Invalid session"):
        scanner.record_scan("25-197015", event_id=1, session="evening", now=fixed_now)


def test_lost_insert_race_is_reported(scanner, attendance_repo, fixed_now, monkeypatch):
    def _raise(**kwargs):
        raise DuplicateError("Attendance already recorded")

    monkeypatch.setattr(attendance_repo, "create_time_in", _raise)

    with pytest.raises(ValidationError, match="already timed in for the morning session"):
        scanner.record_scan("25-197015", event_id=1, now=fixed_now)
