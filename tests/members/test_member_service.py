from __future__ import annotations

import pytest

from society_attendance.core.enums import Program
from society_attendance.core.exceptions import DuplicateError, NotFoundError, ValidationError
from society_attendance.members.model import MemberFilters
from society_attendance.members.roster import RosterRow
from society_attendance.members.service import MemberService, year_level_from_school_id


def _form(**overrides):
    form = {"school_id": "25-197015", "name": "Rexter Bailon", "program": "BSCS", "block": "2", "year_level": "1"}
    form.update(overrides)
    return form


def test_create_member_trims_and_stores(members_repo):
    svc = MemberService(members_repo)

    mid = svc.create_member(_form(school_id="  25-197015 ", name="  Rexter Bailon  "))

    member = members_repo.get_by_id(mid)
    assert member.school_id == "25-197015"
    assert member.name == "Rexter Bailon"
    assert member.program is Program.BSCS
    assert member.block == "2"
    assert member.year_level == 1
    assert member.year_level_label == "1st Year"


def test_create_member_collects_all_errors(members_repo):
    svc = MemberService(members_repo)

    with pytest.raises(ValidationError) as exc:
        svc.create_member({"school_id": " ", "name": "R", "program": "BSEE", "block": "9", "year_level": ""})

    assert str(exc.value) == (
        "School ID is required, Name must be at least 2 characters, Please select a valid program, "
        "Please select a block, Please select a year level"
    )
    assert members_repo.count() == 0


def test_create_member_duplicate_school_id(members_repo):
    svc = MemberService(members_repo)
    svc.create_member(_form())

    with pytest.raises(DuplicateError, match="A member with this school ID already exists"):
        svc.create_member(_form(name="Someone Else"))


def test_update_member_rejects_taken_school_id(members_repo):
    members_repo.add("25-000001", "Alpha")
    other = members_repo.add("25-000002", "Bravo")
    svc = MemberService(members_repo)

    with pytest.raises(DuplicateError):
        svc.update_member(other.member_id, _form(school_id="25-000001", name="Bravo"))


def test_update_and_delete_unknown_member(members_repo):
    svc = MemberService(members_repo)

    with pytest.raises(NotFoundError):
        svc.update_member(99, _form())
    with pytest.raises(NotFoundError):
        svc.delete_member(99)


def test_list_members_filters_and_paginates(members_repo):
    for i in range(25):
        members_repo.add(f"24-{i:06d}", f"Student {i:02d}", program="BSIT" if i % 2 else "BSCS", block=str(i % 5 + 1))
    svc = MemberService(members_repo, per_page=10)

    listing = svc.list_members(MemberFilters(), page=99)
    assert listing.page.number == 3
    assert listing.page.total_pages == 3
    assert len(listing.page.items) == 5

    listing = svc.list_members(MemberFilters(program="BSIT", name="student 1"))
    assert [m.name for m in listing.page.items] == ["Student 11", "Student 13", "Student 15", "Student 17", "Student 19"]

    listing = svc.list_members(MemberFilters(school_id="000003"))
    assert [m.school_id for m in listing.page.items] == ["24-000003"]


def test_empty_messages(members_repo):
    svc = MemberService(members_repo)
    assert svc.list_members(MemberFilters()).empty_message.startswith("No members yet")

    members_repo.add("25-000001", "Alpha")
    listing = svc.list_members(MemberFilters(name="zzz"))
    assert listing.page.total_items == 0
    assert listing.empty_message == "No members found matching your search criteria."


@pytest.mark.parametrize(
    "school_id,expected",
    [("25-197015", 1), ("24-000001", 2), ("22-000001", 4), ("19-000001", 4), ("26-000001", 1), ("AB-1234", None), ("2", None)],
)
def test_year_level_from_school_id(school_id, expected):
    assert year_level_from_school_id(school_id, 2025) == expected


def test_recalculate_year_levels_counts_skipped(members_repo):
    a = members_repo.add("23-000001", "Alpha", year_level=1)
    members_repo.add("XX-000002", "Bravo", year_level=2)
    svc = MemberService(members_repo, academic_year=2025)

    result = svc.recalculate_year_levels()

    assert result.updated == 1
    assert result.skipped == 1
    assert members_repo.get_by_id(a.member_id).year_level == 3


def test_import_roster_skips_duplicates(members_repo):
    members_repo.add("25-000001", "Existing Member")
    svc = MemberService(members_repo)
    rows = [
        RosterRow(line_no=1, school_id="25-000001", name="Existing Member", program="BSCS"),
        RosterRow(line_no=2, school_id="25-000002", name="New Member", program="BTVTED-CSS"),
    ]

    result = svc.import_roster(rows)

    assert result.inserted == 1
    assert result.skipped_duplicates == 1
    assert "Skipping duplicates" in result.message
    added = members_repo.get_by_school_id("25-000002")
    assert added.block == ""
    assert added.year_level is None
    assert added.year_level_label == "-"


def test_import_roster_rejects_unknown_program(members_repo):
    svc = MemberService(members_repo)
    rows = [
        RosterRow(line_no=1, school_id="25-000001", name="Good Row", program="BSCS"),
        RosterRow(line_no=2, school_id="25-000002", name="Bad Row", program="BSEE"),
    ]

    with pytest.raises(ValidationError, match="line\\(s\\): 2"):
        svc.import_roster(rows)
    assert members_repo.count() == 0


def test_import_roster_requires_rows(members_repo):
    with pytest.raises(ValidationError):
        MemberService(members_repo).import_roster([])


def test_create_member_rejects_long_school_id(members_repo):
    svc = MemberService(members_repo)

    with pytest.raises(ValidationError, match="School ID is too long"):
        svc.create_member(_form(school_id="2" * 33))
    assert members_repo.count() == 0


def test_import_roster_rejects_overlong_fields(members_repo):
    svc = MemberService(members_repo)
    rows = [
        RosterRow(line_no=1, school_id="25-000001", name="Good Row", program="BSCS"),
        RosterRow(line_no=2, school_id="25-000002", name="A" * 150, program="BSCS"),
        RosterRow(line_no=3, school_id="2" * 33, name="Long Id", program="BSIT"),
    ]

    with pytest.raises(ValidationError, match="line\\(s\\): 2, 3"):
        svc.import_roster(rows)
    assert members_repo.count() == 0
