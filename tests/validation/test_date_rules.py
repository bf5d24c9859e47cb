"""Tests for date rules: ISO dates, internship date pairs and relative windows."""

from datetime import date

import pytest

from recordkeeper.validation.rules.dates import (
    check_end_date,
    check_iso_date,
    check_past_date,
    check_start_date,
    internship_duration,
)


def test_check_iso_date():
    """ISO dates and datetimes pass; impossible or free-form dates fail."""
    assert check_iso_date("2024-03-01").valid
    assert check_iso_date("2024-03-01T09:30:00Z").valid
    assert check_iso_date(date(2024, 3, 1)).valid
    assert check_iso_date("2024-02-30").message == "Invalid date format"
    assert check_iso_date("March 1st").message == "Invalid date format"
    assert check_iso_date("", label="Date").message == "Date is required"
    assert check_iso_date("", required=False).valid


def test_end_date_after_start_within_twelve_months():
    """A five month internship is accepted."""
    assert check_end_date("2024-06-01", "2024-01-01").valid


def test_end_date_equal_to_start_is_rejected():
    """The end must be strictly after the start."""
    assert check_end_date("2024-01-01", "2024-01-01").message == "End Date must be after Start Date"
    assert check_end_date("2023-12-31", "2024-01-01").message == "End Date must be after Start Date"


def test_end_date_twelve_month_boundary():
    """Exactly twelve calendar months is allowed, one day more is not."""
    assert check_end_date("2025-01-01", "2024-01-01").valid
    result = check_end_date("2025-01-02", "2024-01-01")
    assert result.message == "Internship duration cannot exceed 12 months"


def test_end_date_month_end_is_clamped():
    """Twelve months after a leap day ends on the last day of February."""
    assert check_end_date("2025-02-28", "2024-02-29").valid
    result = check_end_date("2025-03-01", "2024-02-29")
    assert result.message == "Internship duration cannot exceed 12 months"


@pytest.mark.parametrize(
    "end,start,expected",
    [
        ("", "2024-01-01", "End Date is required"),
        ("2024-06-01", "", "Please fill Start Date first"),
        ("not a date", "2024-01-01", "End Date is not a valid date"),
        ("2024-06-01", "not a date", "Please enter a valid Start Date first"),
    ],
)
def test_end_date_missing_or_unusable_values(end, start, expected):
    """Each missing or unparseable side has its own message."""
    assert check_end_date(end, start).message == expected


def test_internship_duration_rounds_up_days():
    """Duration is the whole number of days, rounded up."""
    assert internship_duration("2024-01-01", "2024-06-01") == 152
    assert internship_duration("2024-01-01T00:00:00", "2024-01-02T01:00:00") == 2
    assert internship_duration("2024-01-01", "") is None


def test_start_date_window(today):
    """Start dates may be up to two years back and any time in the future."""
    assert check_start_date("2022-07-15", today=today).valid
    assert check_start_date("2026-01-01", today=today).valid
    result = check_start_date("2022-07-14", today=today)
    assert result.message == "Start Date cannot be more than 2 years in the past"
    assert check_start_date("", today=today).message == "Start Date is required"
    assert check_start_date("soon", today=today).message == "Start Date is not a valid date"


def test_past_date_window(today):
    """Problem dates must lie between twelve months ago and the end of today."""
    assert check_past_date("2024-07-15", today=today).valid
    assert check_past_date("2024-07-15T23:00:00", today=today).valid
    assert check_past_date("2023-07-15", today=today).valid
    assert check_past_date("2024-07-16", today=today).message == "Problem Date cannot be in the future"
    assert (
        check_past_date("2023-07-14", today=today).message
        == "Problem Date cannot be more than 12 months old"
    )
    assert check_past_date(None, today=today).message == "Problem Date is required"


def test_date_rules_near_datetime_limits():
    """Month windows that leave the datetime range do not raise."""
    assert check_end_date("9999-12-01", "9999-06-01").valid
    assert check_end_date("9999-05-01", "9999-06-01").message == "End Date must be after Start Date"
    assert check_start_date("0001-01-01", today=date(1, 6, 1)).valid
    assert check_past_date("0001-01-01", today=date(1, 6, 1)).valid
    assert (
        check_past_date("0001-01-01T00:00:00+01:00", today=date(1, 6, 1)).message
        == "Problem Date is not a valid date"
    )
