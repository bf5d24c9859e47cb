"""Numeric rules: integer ranges, record ids and derived bounds."""

from __future__ import annotations

import re
from typing import Any, Optional

from recordkeeper.core.utils import as_text, is_blank, parse_leading_int
from ..config import HOURS_PER_DAY, RECORD_ID_MIN, STIPEND_RANGE, WORKING_HOURS_RANGE
from ..models import ValidationResult
from .dates import internship_duration

_STRICT_INT_RE = re.compile(r"^\s*[+-]?\d+\s*$")


def check_integer_between(
    value: Any,
    *,
    label: str,
    minimum: int,
    maximum: int,
    required: bool = True,
    range_message: Optional[str] = None,
) -> ValidationResult:
    """Integer within inclusive bounds.

    The value is read like a number input: its leading integer is used and
    anything without one is "not a number".

    Examples:
        >>> check_integer_between("9", label="Semester", minimum=1, maximum=8).message
        'Semester must be between 1 and 8'
    """
    if is_blank(value):
        if required:
            return ValidationResult.fail(f"{label} is required")
        return ValidationResult.ok()

    number = parse_leading_int(value)
    message = range_message or f"{label} must be between {minimum} and {maximum}"
    if number is None or number < minimum or number > maximum:
        return ValidationResult.fail(message)
    return ValidationResult.ok()


def check_record_id(
    value: Any,
    *,
    label: str,
    required: bool = True,
    minimum: int = RECORD_ID_MIN,
) -> ValidationResult:
    """Strict positive integer id (``"12abc"`` is rejected)."""
    if is_blank(value):
        if required:
            return ValidationResult.fail(f"{label} is required")
        return ValidationResult.ok()
    if isinstance(value, bool):
        return ValidationResult.fail(f"Invalid {label.lower()}")
    if isinstance(value, int):
        number: Optional[int] = value
    elif _STRICT_INT_RE.match(as_text(value)):
        number = int(as_text(value))
    else:
        number = None
    if number is None or number < minimum:
        return ValidationResult.fail(f"Invalid {label.lower()}")
    return ValidationResult.ok()


def check_stipend(value: Any) -> ValidationResult:
    """Optional stipend amount between 0 and the configured maximum."""
    if is_blank(value):
        return ValidationResult.ok()
    low, high = STIPEND_RANGE
    amount = parse_leading_int(value)
    if amount is None or amount < low:
        return ValidationResult.fail("Stipend must be a non-negative number")
    if amount > high:
        return ValidationResult.fail("Stipend amount seems too high")
    return ValidationResult.ok()


def check_working_hours(hours_value: Any, start_value: Any, end_value: Any) -> ValidationResult:
    """Total internship working hours.

    Required positive integer up to the configured maximum. When both dates
    are usable the upper bound tightens to ``duration_days * HOURS_PER_DAY``.

    Examples:
        >>> check_working_hours("2000", "2024-01-01", "2024-06-01").message
        'Working Hours cannot exceed 1216 hours for 152 days'
    """
    if is_blank(hours_value):
        return ValidationResult.fail("Total Working Hours is required")

    low, high = WORKING_HOURS_RANGE
    hours = parse_leading_int(hours_value)
    if hours is None or hours < low:
        return ValidationResult.fail("Working Hours must be a positive number")
    if hours > high:
        return ValidationResult.fail(f"Working Hours seems too high (max {high})")

    if not is_blank(start_value) and not is_blank(end_value):
        days = internship_duration(start_value, end_value)
        if days is not None:
            max_hours = days * HOURS_PER_DAY
            if hours > max_hours:
                return ValidationResult.fail(
                    f"Working Hours cannot exceed {max_hours} hours for {days} days"
                )
    return ValidationResult.ok()
