"""Employee create/update form."""

from __future__ import annotations

from functools import partial
from typing import List

from ..config import EMPLOYEE_DEPARTMENT_LENGTH, EMPLOYEE_NAME_LENGTH, EMPLOYEE_POSITION_LENGTH
from ..models import FieldSpec
from ..rules.contact import check_email
from ..rules.dates import check_iso_date
from ..rules.text import check_length
from . import FormOptions


def _fields(optional: bool) -> List[FieldSpec]:
    return [
        FieldSpec(
            "name",
            partial(
                check_length,
                label="Name",
                min_len=EMPLOYEE_NAME_LENGTH[0],
                max_len=EMPLOYEE_NAME_LENGTH[1],
            ),
            optional=optional,
        ),
        FieldSpec(
            "email",
            partial(check_email, invalid_message="Invalid email format"),
            optional=optional,
        ),
        FieldSpec(
            "department",
            partial(
                check_length,
                label="Department",
                min_len=EMPLOYEE_DEPARTMENT_LENGTH[0],
                max_len=EMPLOYEE_DEPARTMENT_LENGTH[1],
            ),
            optional=optional,
        ),
        FieldSpec(
            "position",
            partial(
                check_length,
                label="Position",
                min_len=EMPLOYEE_POSITION_LENGTH[0],
                max_len=EMPLOYEE_POSITION_LENGTH[1],
            ),
            optional=optional,
        ),
        FieldSpec("joinDate", partial(check_iso_date, label="Join Date", required=False)),
    ]


def build_fields(options: FormOptions) -> List[FieldSpec]:
    """Fields for creating an employee; everything but joinDate is required."""
    return _fields(optional=False)


def build_update_fields(options: FormOptions) -> List[FieldSpec]:
    """Fields for a partial update: only supplied keys are checked."""
    return _fields(optional=True)
