"""Validation configuration constants.

This module centralizes field bounds and closed vocabularies used by the form
rule tables. Adjust these constants to tune validation behavior; the forms in
`recordkeeper.validation.forms` only reference names defined here.

Bounds are inclusive and measured on the trimmed value unless a rule says
otherwise.
"""

from __future__ import annotations

from typing import Dict, Tuple

from recordkeeper.core.enums import ATTENDANCE_STATUSES, SEVERITIES

# ============================================================================
# LENGTH BOUNDS (min, max)
# ============================================================================

# HR employee records
EMPLOYEE_NAME_LENGTH = (2, 100)
EMPLOYEE_DEPARTMENT_LENGTH = (2, 50)
EMPLOYEE_POSITION_LENGTH = (2, 100)

# Internship details
COMPANY_NAME_LENGTH = (2, 100)
PROJECT_TITLE_LENGTH = (5, 150)

# Problem reports
PROBLEM_TITLE_LENGTH = (5, 150)
PROBLEM_DESCRIPTION_LENGTH = (20, 3000)

# ============================================================================
# MAXIMUM LENGTHS (optional free text)
# ============================================================================

ATTENDANCE_NOTES_MAX = 500
COMPANY_CITY_MAX = 50
COMPANY_STATE_MAX = 50
PROJECT_DESCRIPTION_MAX = 2000
SKILLS_ACQUIRED_MAX = 1000
WITNESSES_MAX = 500
EVIDENCE_MAX = 500

# ============================================================================
# MINIMUM LENGTHS
# ============================================================================

PERSON_NAME_MIN = 3  # full name, supervisor name
PREVIOUS_REPORT_DETAILS_MIN = 10
PASSWORD_MIN = 8
LOGIN_PASSWORD_MIN = 6

# ============================================================================
# NUMERIC RANGES (min, max)
# ============================================================================

STIPEND_RANGE = (0, 500000)
WORKING_HOURS_RANGE = (1, 10000)
SEMESTER_RANGE = (1, 8)
RECORD_ID_MIN = 1

# Maximum working hours credited per internship day
HOURS_PER_DAY = 8

# ============================================================================
# DATE WINDOWS
# ============================================================================

MAX_INTERNSHIP_MONTHS = 12
START_DATE_MAX_AGE_YEARS = 2
PROBLEM_DATE_MAX_AGE_MONTHS = 12

# ============================================================================
# CLOSED VOCABULARIES
# ============================================================================

COMPANY_TYPES = ("IT", "Finance", "Manufacturing", "Research", "Startup", "Government", "Other")
INTERNSHIP_TYPES = ("Technical", "Research", "Industrial", "Core", "Other")
PERFORMANCE_RATINGS = ("Excellent", "Very Good", "Good", "Average", "Poor")
DEPARTMENTS = ("CSE", "ECE", "ME", "CE", "BIO", "IT")
PROBLEM_CATEGORIES = (
    "Salary/Stipend",
    "Working Conditions",
    "Harassment",
    "Work Hours",
    "Task Mismatch",
    "Supervisor",
    "Academic",
    "Other",
)
REPORTED_CHOICES = ("yes", "no")

# ============================================================================
# LENGTH MAP (for get_length_bounds helper)
# ============================================================================

_LENGTH_MAP: Dict[str, Tuple[int, int]] = {
    "employee.name": EMPLOYEE_NAME_LENGTH,
    "employee.department": EMPLOYEE_DEPARTMENT_LENGTH,
    "employee.position": EMPLOYEE_POSITION_LENGTH,
    "internship.companyName": COMPANY_NAME_LENGTH,
    "internship.projectTitle": PROJECT_TITLE_LENGTH,
    "problem_report.problemTitle": PROBLEM_TITLE_LENGTH,
    "problem_report.problemDescription": PROBLEM_DESCRIPTION_LENGTH,
}


def get_length_bounds(field_key: str) -> Tuple[int, int]:
    """Get the (min, max) trimmed length bounds for a length-bounded field.

    Args:
        field_key: ``"<form>.<field>"`` key, e.g. ``"employee.name"``.

    Returns:
        Inclusive (min, max) tuple.

    Raises:
        ValueError: If the field has no configured bounds.

    Examples:
        >>> get_length_bounds("employee.name")
        (2, 100)
        >>> get_length_bounds("problem_report.problemDescription")
        (20, 3000)
    """
    if field_key not in _LENGTH_MAP:
        raise ValueError(
            f"Unknown length-bounded field: {field_key}. "
            f"Valid fields: {', '.join(sorted(_LENGTH_MAP))}"
        )
    return _LENGTH_MAP[field_key]


__all__ = [
    "ATTENDANCE_STATUSES",
    "SEVERITIES",
    "get_length_bounds",
]
