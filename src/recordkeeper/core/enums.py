"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class FormKind(str, Enum):
    """Kinds of forms known to the validation registry.

    Values are strings to ease serialization and CLI interchange.
    """

    EMPLOYEE = "EMPLOYEE"
    EMPLOYEE_UPDATE = "EMPLOYEE_UPDATE"
    ATTENDANCE = "ATTENDANCE"
    ATTENDANCE_UPDATE = "ATTENDANCE_UPDATE"
    ATTENDANCE_QUERY = "ATTENDANCE_QUERY"
    REGISTRATION = "REGISTRATION"
    LOGIN = "LOGIN"
    INTERNSHIP = "INTERNSHIP"
    PROBLEM_REPORT = "PROBLEM_REPORT"


class AttendanceStatus(str, Enum):
    """Attendance status codes as stored on attendance records."""

    PRESENT = "present"
    ABSENT = "absent"
    LEAVE = "leave"
    HALF_DAY = "half-day"

    @property
    def label(self) -> str:
        """Human readable label for summary widgets."""
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    AttendanceStatus.PRESENT: "Present",
    AttendanceStatus.ABSENT: "Absent",
    AttendanceStatus.LEAVE: "Leave",
    AttendanceStatus.HALF_DAY: "Half Day",
}


class Severity(str, Enum):
    """Severity levels of a reported internship problem."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


ATTENDANCE_STATUSES = tuple(s.value for s in AttendanceStatus)
SEVERITIES = tuple(s.value for s in Severity)


__all__ = [
    "FormKind",
    "AttendanceStatus",
    "Severity",
    "ATTENDANCE_STATUSES",
    "SEVERITIES",
]
