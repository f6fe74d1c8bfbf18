from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional, Sequence

from ..common.pagination import Page, paginate
from ..common.validators import FormErrors, check_choice, check_length
from ..core.constants import (
    BLOCK_CHOICES,
    DEFAULT_MEMBERS_PER_PAGE,
    MAX_NAME_LENGTH,
    MAX_SCHOOL_ID_LENGTH,
    MAX_YEAR_LEVEL,
    MIN_YEAR_LEVEL,
    YEAR_LEVEL_CHOICES,
)
from ..core.enums import Program
from ..core.exceptions import DuplicateError, NotFoundError, ValidationError
from .model import ImportResult, Member, MemberFilters, MemberInput, RecalculateResult
from .repository import MemberRepository
from .roster import RosterRow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemberListing:
    page: Page[Member]
    filters: MemberFilters
    total_members: int

    @property
    def empty_message(self) -> str:
        if self.total_members == 0:
            return "No members yet. Add your first member to get started."
        return "No members found matching your search criteria."


def year_level_from_school_id(school_id: str, academic_year: int) -> Optional[int]:
    """Year level implied by the two-digit enrollment-year prefix, clamped to 1..4."""
    prefix = (school_id or "").strip()[:2]
    if len(prefix) != 2 or not prefix.isdigit():
        return None
    enrollment_year = 2000 + int(prefix)
    return min(MAX_YEAR_LEVEL, max(MIN_YEAR_LEVEL, academic_year - enrollment_year + 1))


def validate_member_form(form: Mapping[str, str]) -> MemberInput:
    errors = FormErrors()

    school_id = (form.get("school_id") or "").strip()
    if not school_id:
        errors.add("School ID is required")
    elif len(school_id) > MAX_SCHOOL_ID_LENGTH:
        errors.add("School ID is too long")

    name = (form.get("name") or "").strip()
    check_length(
        errors,
        name,
        min_len=2,
        max_len=MAX_NAME_LENGTH,
        too_short="Name must be at least 2 characters",
        too_long="Name is too long",
    )

    program = form.get("program") or ""
    check_choice(errors, program, Program.values(), "Please select a valid program")

    block = (form.get("block") or "").strip()
    check_choice(errors, block, BLOCK_CHOICES, "Please select a block")

    year_level = (form.get("year_level") or "").strip()
    check_choice(errors, year_level, YEAR_LEVEL_CHOICES, "Please select a year level")

    errors.raise_if_any()
    return MemberInput(
        school_id=school_id,
        name=name,
        program=Program(program),
        block=block,
        year_level=int(year_level),
    )


def _valid_roster_row(row: RosterRow) -> bool:
    return (
        row.program in Program.values()
        and 2 <= len(row.name) <= MAX_NAME_LENGTH
        and len(row.school_id) <= MAX_SCHOOL_ID_LENGTH
    )


class MemberService:
    """Use cases: manage the member roster."""

    def __init__(
        self,
        members: MemberRepository,
        *,
        per_page: int = DEFAULT_MEMBERS_PER_PAGE,
        academic_year: Optional[int] = None,
    ):
        self._members = members
        self._per_page = int(per_page)
        self._academic_year = academic_year

    def list_members(self, filters: MemberFilters, *, page: int = 1) -> MemberListing:
        members = self._members.list_all()
        matching = [m for m in members if filters.matches(m)]
        return MemberListing(
            page=paginate(matching, page, self._per_page),
            filters=filters,
            total_members=len(members),
        )

    def get_member(self, member_id: int) -> Member:
        member = self._members.get_by_id(member_id)
        if not member:
            raise NotFoundError("Member not found")
        return member

    def create_member(self, form: Mapping[str, str]) -> int:
        data = validate_member_form(form)
        member_id = self._members.create_member(data)
        logger.info("Added member %s (id=%s)", data.school_id, member_id)
        return member_id

    def update_member(self, member_id: int, form: Mapping[str, str]) -> None:
        data = validate_member_form(form)
        self.get_member(member_id)
        self._members.update_member(member_id, data)
        logger.info("Updated member id=%s", member_id)

    def delete_member(self, member_id: int) -> None:
        member = self.get_member(member_id)
        if not self._members.delete_by_id(member_id):
            raise ValidationError("Failed to delete member. Please try again.")
        logger.info("Deleted member %s (id=%s)", member.school_id, member_id)

    def recalculate_year_levels(self, *, academic_year: Optional[int] = None) -> RecalculateResult:
        year = academic_year or self._academic_year or date.today().year
        updated = skipped = 0
        for member in self._members.list_all():
            level = year_level_from_school_id(member.school_id, year)
            if level is None:
                skipped += 1
                continue
            if level != member.year_level:
                self._members.update_year_level(member.member_id, level)
            updated += 1
        logger.info("Recalculated year levels for %s (updated=%s, skipped=%s)", year, updated, skipped)
        return RecalculateResult(updated=updated, skipped=skipped)

    def import_roster(self, rows: Sequence[RosterRow]) -> ImportResult:
        if not rows:
            raise ValidationError("The roster file has no members")

        bad = [r for r in rows if not _valid_roster_row(r)]
        if bad:
            lines = ", ".join(str(r.line_no) for r in bad[:10])
            raise ValidationError(f"Invalid school ID, name or program on line(s): {lines}")

        inserted = skipped = 0
        for r in rows:
            data = MemberInput(
                school_id=r.school_id,
                name=r.name,
                program=Program(r.program),
                block="",
                year_level=None,
            )
            try:
                self._members.create_member(data)
                inserted += 1
            except DuplicateError:
                skipped += 1

        logger.info("Roster import finished (inserted=%s, skipped=%s)", inserted, skipped)
        return ImportResult(inserted=inserted, skipped_duplicates=skipped)
