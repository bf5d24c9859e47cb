"""Date rules: ISO dates, start/end pairs and relative date windows.

Rules that depend on the current day take ``today`` explicitly so that a
verdict only depends on its arguments. Forms bind ``today`` when they are
built.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from recordkeeper.core.utils import add_months, duration_days, is_blank, parse_date
from ..config import MAX_INTERNSHIP_MONTHS, PROBLEM_DATE_MAX_AGE_MONTHS, START_DATE_MAX_AGE_YEARS
from ..models import ValidationResult


def _as_day(today: date) -> datetime:
    return datetime(today.year, today.month, today.day)


def check_iso_date(
    value: Any,
    *,
    label: str = "Date",
    required: bool = True,
    invalid_message: str = "Invalid date format",
) -> ValidationResult:
    """Check that a value is an ISO 8601 date (or datetime).

    Examples:
        >>> check_iso_date("2024-02-30").message
        'Invalid date format'
    """
    if is_blank(value):
        if required:
            return ValidationResult.fail(f"{label} is required")
        return ValidationResult.ok()
    if parse_date(value) is None:
        return ValidationResult.fail(invalid_message)
    return ValidationResult.ok()


def check_start_date(value: Any, *, today: date) -> ValidationResult:
    """Internship start date: required, at most two years before ``today``.

    Future start dates are allowed.
    """
    if is_blank(value):
        return ValidationResult.fail("Start Date is required")
    start = parse_date(value)
    if start is None:
        return ValidationResult.fail("Start Date is not a valid date")
    earliest = add_months(_as_day(today), -12 * START_DATE_MAX_AGE_YEARS)
    if earliest is not None and start < earliest:
        return ValidationResult.fail(
            f"Start Date cannot be more than {START_DATE_MAX_AGE_YEARS} years in the past"
        )
    return ValidationResult.ok()


def check_end_date(
    end_value: Any,
    start_value: Any,
    *,
    max_months: int = MAX_INTERNSHIP_MONTHS,
) -> ValidationResult:
    """End date of a start/end pair.

    Fails when the end date is missing or unparseable, when there is no usable
    start date, when the end is not strictly after the start, or when the end
    falls more than ``max_months`` calendar months after the start.

    Examples:
        >>> check_end_date("2024-01-01", "2024-01-01").message
        'End Date must be after Start Date'
        >>> check_end_date("2025-06-01", "2024-01-01").message
        'Internship duration cannot exceed 12 months'
        >>> check_end_date("2024-06-01", "2024-01-01").valid
        True
    """
    if is_blank(end_value):
        return ValidationResult.fail("End Date is required")
    if is_blank(start_value):
        return ValidationResult.fail("Please fill Start Date first")

    end = parse_date(end_value)
    if end is None:
        return ValidationResult.fail("End Date is not a valid date")
    start = parse_date(start_value)
    if start is None:
        return ValidationResult.fail("Please enter a valid Start Date first")

    if end <= start:
        return ValidationResult.fail("End Date must be after Start Date")
    latest = add_months(start, max_months)
    if latest is not None and end > latest:
        return ValidationResult.fail(f"Internship duration cannot exceed {max_months} months")
    return ValidationResult.ok()


def internship_duration(start_value: Any, end_value: Any) -> Optional[int]:
    """Duration in days between two raw date values, or None if either is unusable.

    Examples:
        >>> internship_duration("2024-01-01", "2024-06-01")
        152
    """
    start = parse_date(start_value)
    end = parse_date(end_value)
    if start is None or end is None:
        return None
    return duration_days(start, end)


def check_past_date(
    value: Any,
    *,
    today: date,
    label: str = "Problem Date",
    max_age_months: int = PROBLEM_DATE_MAX_AGE_MONTHS,
) -> ValidationResult:
    """Date within the last ``max_age_months`` months and not after ``today``."""
    if is_blank(value):
        return ValidationResult.fail(f"{label} is required")
    when = parse_date(value)
    if when is None:
        return ValidationResult.fail(f"{label} is not a valid date")

    day = _as_day(today)
    if when > day.replace(hour=23, minute=59, second=59, microsecond=999999):
        return ValidationResult.fail(f"{label} cannot be in the future")
    oldest = add_months(day, -max_age_months)
    if oldest is not None and when < oldest:
        return ValidationResult.fail(f"{label} cannot be more than {max_age_months} months old")
    return ValidationResult.ok()
