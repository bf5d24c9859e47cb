"""Contact and identifier rules: email, phone, student id, login identifier."""

from __future__ import annotations

import re
from typing import Any

from recordkeeper.core.utils import as_text, is_blank
from ..models import ValidationResult

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
STUDENT_ID_RE = re.compile(r"^STU\d{6,8}$", re.IGNORECASE)
LOGIN_ID_RE = re.compile(r"^[A-Z0-9]{6,12}$", re.IGNORECASE)
_NON_DIGITS_RE = re.compile(r"\D")

PHONE_DIGITS = 10


def check_email(
    value: Any,
    *,
    label: str = "Email",
    invalid_message: str = "Please enter a valid email address",
) -> ValidationResult:
    """Required email address matching ``local@domain.tld``.

    Examples:
        >>> check_email("a@b.co").valid
        True
        >>> check_email("a@b").valid
        False
    """
    if is_blank(value):
        return ValidationResult.fail(f"{label} is required")
    if not EMAIL_RE.match(as_text(value)):
        return ValidationResult.fail(invalid_message)
    return ValidationResult.ok()


def check_phone(value: Any, *, label: str = "Phone Number") -> ValidationResult:
    """Required phone number with exactly ten digits once separators are removed.

    Examples:
        >>> check_phone("987-654-3210").valid
        True
        >>> check_phone("12345").message
        'Phone Number must be 10 digits'
    """
    if is_blank(value):
        return ValidationResult.fail(f"{label} is required")
    digits = _NON_DIGITS_RE.sub("", as_text(value))
    if len(digits) != PHONE_DIGITS:
        return ValidationResult.fail(f"{label} must be {PHONE_DIGITS} digits")
    return ValidationResult.ok()


def check_student_id(value: Any) -> ValidationResult:
    """Student id in ``STU`` + 6 to 8 digits form (case-insensitive)."""
    if is_blank(value):
        return ValidationResult.fail("Student ID is required")
    if not STUDENT_ID_RE.match(as_text(value).strip()):
        return ValidationResult.fail("Student ID must be in format STU000000")
    return ValidationResult.ok()


def check_login_identifier(value: Any) -> ValidationResult:
    """Login accepts either an email address or a 6-12 character alphanumeric id."""
    if is_blank(value):
        return ValidationResult.fail("Student ID or Email is required")
    text = as_text(value)
    if EMAIL_RE.match(text) or LOGIN_ID_RE.match(text):
        return ValidationResult.ok()
    return ValidationResult.fail("Please enter a valid Student ID or Email")
