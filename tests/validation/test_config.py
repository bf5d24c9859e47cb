"""Tests for the validation configuration constants and helpers.

Verifies `get_length_bounds` lookups and that the closed vocabularies used by
the forms stay in sync with the core enums.
"""

import pytest

from recordkeeper.core.enums import AttendanceStatus, Severity
from recordkeeper.validation.config import (
    ATTENDANCE_STATUSES,
    SEVERITIES,
    STIPEND_RANGE,
    WORKING_HOURS_RANGE,
    get_length_bounds,
)


def test_get_length_bounds_known_fields():
    """Test that get_length_bounds() returns the configured (min, max) pairs."""
    assert get_length_bounds("employee.name") == (2, 100)
    assert get_length_bounds("employee.department") == (2, 50)
    assert get_length_bounds("internship.companyName") == (2, 100)
    assert get_length_bounds("internship.projectTitle") == (5, 150)
    assert get_length_bounds("problem_report.problemDescription") == (20, 3000)


def test_get_length_bounds_unknown_field():
    """Test that get_length_bounds() raises ValueError for unknown fields."""
    with pytest.raises(ValueError, match="Unknown length-bounded field: employee.salary"):
        get_length_bounds("employee.salary")


def test_vocabularies_match_enums():
    """Status and severity vocabularies come from the enums, in declared order."""
    assert ATTENDANCE_STATUSES == ("present", "absent", "leave", "half-day")
    assert ATTENDANCE_STATUSES == tuple(s.value for s in AttendanceStatus)
    assert SEVERITIES == tuple(s.value for s in Severity)
    assert AttendanceStatus.HALF_DAY.label == "Half Day"


def test_numeric_ranges_are_ordered():
    """Every configured range has min <= max."""
    for low, high in (STIPEND_RANGE, WORKING_HOURS_RANGE):
        assert low <= high
