from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Member, MemberInput


class MemberRepository(Protocol):
    """Repository interface for the roster.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def list_all(self) -> Sequence[Member]:
        """All members ordered by name."""

        raise NotImplementedError

    def get_by_id(self, member_id: int) -> Optional[Member]:
        raise NotImplementedError

    def get_by_school_id(self, school_id: str) -> Optional[Member]:
        raise NotImplementedError

    def create_member(self, data: MemberInput) -> int:
        """Raises ``DuplicateError`` when the school ID is taken."""

        raise NotImplementedError

    def update_member(self, member_id: int, data: MemberInput) -> bool:
        """Raises ``DuplicateError`` when the school ID is taken."""

        raise NotImplementedError

    def update_year_level(self, member_id: int, year_level: int) -> bool:
        raise NotImplementedError

    def delete_by_id(self, member_id: int) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
