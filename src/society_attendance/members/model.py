from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import FILTER_ALL
from ..core.enums import Program


@dataclass(frozen=True)
class Member:
    """Domain entity: a roster entry."""

    member_id: int
    school_id: str
    name: str
    program: Program
    block: str
    year_level: Optional[int]
    created_at: Optional[datetime] = None

    @property
    def year_level_label(self) -> str:
        if not self.year_level:
            return "-"
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(self.year_level, "th")
        return f"{self.year_level}{suffix} Year"


@dataclass(frozen=True)
class MemberInput:
    """Validated create/update payload."""

    school_id: str
    name: str
    program: Program
    block: str
    year_level: Optional[int]


@dataclass(frozen=True)
class MemberFilters:
    school_id: str = ""
    name: str = ""
    program: str = FILTER_ALL
    block: str = FILTER_ALL
    year_level: str = FILTER_ALL

    @classmethod
    def from_args(cls, args) -> "MemberFilters":
        return cls(
            school_id=(args.get("school_id") or "").strip(),
            name=(args.get("name") or "").strip(),
            program=args.get("program") or FILTER_ALL,
            block=args.get("block") or FILTER_ALL,
            year_level=args.get("year_level") or FILTER_ALL,
        )

    def matches(self, member: Member) -> bool:
        if self.school_id and self.school_id.lower() not in member.school_id.lower():
            return False
        if self.name and self.name.lower() not in member.name.lower():
            return False
        if self.program != FILTER_ALL and member.program.value != self.program:
            return False
        if self.block != FILTER_ALL and member.block != self.block:
            return False
        if self.year_level != FILTER_ALL and str(member.year_level or "") != self.year_level:
            return False
        return True


@dataclass(frozen=True)
class ImportResult:
    inserted: int
    skipped_duplicates: int

    @property
    def message(self) -> str:
        if self.skipped_duplicates:
            return (
                f"Uploaded {self.inserted} members. "
                f"Some members already exist. Skipping duplicates ({self.skipped_duplicates})."
            )
        return f"Successfully uploaded {self.inserted} members!"


@dataclass(frozen=True)
class RecalculateResult:
    updated: int
    skipped: int
