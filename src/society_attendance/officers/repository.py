from __future__ import annotations

from typing import Optional, Protocol

from .model import Officer


class OfficerRepository(Protocol):
    def get_by_email(self, email: str) -> Optional[Officer]:
        raise NotImplementedError

    def create_officer(self, *, full_name: str, email: str, password_hash: str) -> int:
        """Raises ``DuplicateError`` when the email is taken."""

        raise NotImplementedError
