"""Attendance statistics.

Public API:
    AttendanceRecord: One attendance entry
    StatsBucket: Per-subject status counts
    StatusCounts: Overall status counts
    AttendanceStats: Overall and per-subject counts from one pass
    aggregate_attendance: Bucket records by subject and status
    filter_by_date: Restrict records to an inclusive day range
    records_from_frame: Build records from a pandas DataFrame
"""

from __future__ import annotations

from .aggregator import aggregate_attendance, filter_by_date, records_from_frame
from .models import AttendanceRecord, AttendanceStats, StatsBucket, StatusCounts

__all__ = [
    "AttendanceRecord",
    "AttendanceStats",
    "StatsBucket",
    "StatusCounts",
    "aggregate_attendance",
    "filter_by_date",
    "records_from_frame",
]
