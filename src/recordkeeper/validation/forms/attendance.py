"""Attendance record forms: create, partial update and list filters."""

from __future__ import annotations

from functools import partial
from typing import List

from ..config import ATTENDANCE_NOTES_MAX, ATTENDANCE_STATUSES
from ..models import FieldSpec
from ..rules.choice import check_one_of
from ..rules.dates import check_iso_date
from ..rules.numeric import check_record_id
from ..rules.text import check_max_length
from . import FormOptions

_check_notes = partial(check_max_length, label="Notes", max_len=ATTENDANCE_NOTES_MAX)


def build_fields(options: FormOptions) -> List[FieldSpec]:
    """Fields for creating an attendance record."""
    return [
        FieldSpec("employeeId", partial(check_record_id, label="Employee ID")),
        FieldSpec("date", partial(check_iso_date, label="Date")),
        FieldSpec("status", partial(check_one_of, choices=ATTENDANCE_STATUSES, label="Status")),
        FieldSpec("notes", _check_notes),
    ]


def build_update_fields(options: FormOptions) -> List[FieldSpec]:
    """Fields for a partial update. The employee of a record cannot change."""
    return [
        FieldSpec("date", partial(check_iso_date, label="Date"), optional=True),
        FieldSpec(
            "status",
            partial(check_one_of, choices=ATTENDANCE_STATUSES, label="Status"),
            optional=True,
        ),
        FieldSpec("notes", _check_notes, optional=True),
    ]


def build_query_fields(options: FormOptions) -> List[FieldSpec]:
    """Filters accepted when listing attendance records; all optional."""
    return [
        FieldSpec("employeeId", partial(check_record_id, label="Employee ID", required=False)),
        FieldSpec(
            "startDate",
            partial(
                check_iso_date,
                label="Start Date",
                required=False,
                invalid_message="Invalid start date format",
            ),
        ),
        FieldSpec(
            "endDate",
            partial(
                check_iso_date,
                label="End Date",
                required=False,
                invalid_message="Invalid end date format",
            ),
        ),
        FieldSpec(
            "status",
            partial(check_one_of, choices=ATTENDANCE_STATUSES, label="Status", required=False),
        ),
    ]
