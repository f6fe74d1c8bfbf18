from __future__ import annotations

import re
from typing import Iterable, Optional

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class FormErrors:
    """Collects every failing rule so a form reports all problems at once."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def add(self, message: str) -> None:
        self.messages.append(message)

    def raise_if_any(self) -> None:
        if self.messages:
            raise ValidationError(", ".join(self.messages))


def check_length(
    errors: FormErrors,
    value: str,
    *,
    min_len: int = 0,
    max_len: Optional[int] = None,
    too_short: str,
    too_long: str,
) -> None:
    if len(value) < min_len:
        errors.add(too_short)
    elif max_len is not None and len(value) > max_len:
        errors.add(too_long)


def check_choice(errors: FormErrors, value: Optional[str], choices: Iterable[str], message: str) -> None:
    if value not in set(choices):
        errors.add(message)


def check_email(errors: FormErrors, email: str, *, domain: str) -> None:
    if not _EMAIL_RE.match(email):
        errors.add("Invalid email format")
    if not email.endswith(f"@{domain}"):
        errors.add(f"Only @{domain} email addresses are allowed")
    if len(email) > 255:
        errors.add("Email is too long")
