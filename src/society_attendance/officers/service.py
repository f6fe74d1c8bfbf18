from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import FormErrors, check_email, check_length
from ..core.constants import DEFAULT_EMAIL_DOMAIN
from ..core.exceptions import AuthenticationError, DuplicateError
from .repository import OfficerRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionOfficer:
    """What we store into Flask session after sign-in."""

    officer_id: int
    full_name: str
    email: str


class AuthService:
    """Use cases: officer sign-up and sign-in."""

    def __init__(self, officers: OfficerRepository, *, email_domain: str = DEFAULT_EMAIL_DOMAIN):
        self._officers = officers
        self._email_domain = email_domain

    def _validate_email(self, errors: FormErrors, email: str) -> str:
        email = (email or "").strip().lower()
        check_email(errors, email, domain=self._email_domain)
        return email

    def sign_in(self, email: str, password: str) -> SessionOfficer:
        errors = FormErrors()
        email = self._validate_email(errors, email)
        password = password or ""
        check_length(
            errors,
            password,
            min_len=1,
            max_len=128,
            too_short="Password is required",
            too_long="Password is too long",
        )
        errors.raise_if_any()

        officer = self._officers.get_by_email(email)
        if not officer or not officer.is_active:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(officer.password_hash, password)
        except ValueError:
            # placeholder or corrupted hash values
            ok = False

        if not ok:
            logger.info("Rejected sign-in for %s", email)
            raise AuthenticationError("Invalid email or password")

        return SessionOfficer(officer_id=officer.officer_id, full_name=officer.full_name, email=officer.email)

    def sign_up(self, full_name: str, email: str, password: str) -> SessionOfficer:
        errors = FormErrors()
        full_name = (full_name or "").strip()
        check_length(
            errors,
            full_name,
            min_len=2,
            max_len=100,
            too_short="Name must be at least 2 characters",
            too_long="Name is too long",
        )
        email = self._validate_email(errors, email)

        password = password or ""
        check_length(
            errors,
            password,
            min_len=8,
            max_len=128,
            too_short="Password must be at least 8 characters",
            too_long="Password is too long",
        )
        if not re.search(r"[A-Z]", password):
            errors.add("Password must contain at least one uppercase letter")
        if not re.search(r"[a-z]", password):
            errors.add("Password must contain at least one lowercase letter")
        if not re.search(r"[0-9]", password):
            errors.add("Password must contain at least one number")
        errors.raise_if_any()

        if self._officers.get_by_email(email):
            raise DuplicateError("An account with this email already exists")

        officer_id = self._officers.create_officer(
            full_name=full_name,
            email=email,
            password_hash=generate_password_hash(password),
        )
        logger.info("Registered officer %s (id=%s)", email, officer_id)
        return SessionOfficer(officer_id=officer_id, full_name=full_name, email=email)
