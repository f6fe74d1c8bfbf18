from __future__ import annotations

from datetime import datetime

import pytest

from society_attendance.common.datetime_utils import format_duration, format_time
from society_attendance.common.validators import FormErrors, check_email
from society_attendance.core.exceptions import ValidationError


def test_form_errors_join_messages():
    errors = FormErrors()
    errors.raise_if_any()
    errors.add("First problem")
    errors.add("Second problem")

    with pytest.raises(ValidationError, match="^First problem, Second problem$"):
        errors.raise_if_any()


@pytest.mark.parametrize(
    "email,expected",
    [
        ("ana@sorsu.edu.ph", []),
        ("ana@gmail.com", ["Only @sorsu.edu.ph email addresses are allowed"]),
        ("not-an-email", ["Invalid email format", "Only @sorsu.edu.ph email addresses are allowed"]),
        ("a" * 250 + "@sorsu.edu.ph", ["Email is too long"]),
    ],
)
def test_check_email(email, expected):
    errors = FormErrors()
    check_email(errors, email, domain="sorsu.edu.ph")
    assert errors.messages == expected


def test_time_formatting():
    t_in = datetime(2025, 9, 15, 8, 5, 9)

    assert format_time(t_in) == "08:05:09"
    assert format_time(None) == "-"
    assert format_duration(t_in, None) == "-"
    assert format_duration(t_in, datetime(2025, 9, 15, 10, 4, 8)) == "1h 58m"
