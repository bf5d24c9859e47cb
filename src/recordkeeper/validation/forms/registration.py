"""Student registration form.

Uniqueness of email and student id needs the student store and is checked by
`recordkeeper.services.students.StudentService`, not here.
"""

from __future__ import annotations

from functools import partial
from typing import List

from ..config import DEPARTMENTS, PERSON_NAME_MIN, SEMESTER_RANGE
from ..models import FieldSpec
from ..rules.choice import check_one_of
from ..rules.contact import check_email, check_phone, check_student_id
from ..rules.numeric import check_integer_between
from ..rules.password import check_password_confirmation, check_password_strength
from ..rules.text import check_person_name
from . import FormOptions


def build_fields(options: FormOptions) -> List[FieldSpec]:
    return [
        FieldSpec("fullName", partial(check_person_name, label="Full Name", min_len=PERSON_NAME_MIN)),
        FieldSpec("email", check_email),
        FieldSpec("studentId", check_student_id),
        FieldSpec(
            "department",
            partial(
                check_one_of,
                choices=DEPARTMENTS,
                label="Department",
                invalid_message="Please select a valid department",
            ),
        ),
        FieldSpec(
            "semester",
            partial(
                check_integer_between,
                label="Current Semester",
                minimum=SEMESTER_RANGE[0],
                maximum=SEMESTER_RANGE[1],
                range_message=f"Semester must be between {SEMESTER_RANGE[0]} and {SEMESTER_RANGE[1]}",
            ),
        ),
        FieldSpec("phoneNumber", check_phone),
        FieldSpec("password", check_password_strength),
        FieldSpec("confirmPassword", check_password_confirmation, depends_on=("password",)),
    ]
