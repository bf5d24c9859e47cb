"""Internship details form.

Date-related fields read each other: the end date is checked against the
start date, and the working hours bound is derived from both.
"""

from __future__ import annotations

from functools import partial
from typing import List

from ..config import (
    COMPANY_CITY_MAX,
    COMPANY_NAME_LENGTH,
    COMPANY_STATE_MAX,
    COMPANY_TYPES,
    INTERNSHIP_TYPES,
    PERFORMANCE_RATINGS,
    PERSON_NAME_MIN,
    PROJECT_DESCRIPTION_MAX,
    PROJECT_TITLE_LENGTH,
    SKILLS_ACQUIRED_MAX,
)
from ..models import FieldSpec
from ..rules.choice import check_one_of
from ..rules.contact import check_email
from ..rules.dates import check_end_date, check_start_date
from ..rules.numeric import check_stipend, check_working_hours
from ..rules.text import check_length, check_max_length, check_person_name
from . import FormOptions


def build_fields(options: FormOptions) -> List[FieldSpec]:
    today = options.reference_day()
    return [
        # Company information
        FieldSpec(
            "companyName",
            partial(
                check_length,
                label="Company Name",
                min_len=COMPANY_NAME_LENGTH[0],
                max_len=COMPANY_NAME_LENGTH[1],
            ),
        ),
        FieldSpec("companyCity", partial(check_max_length, label="City name", max_len=COMPANY_CITY_MAX)),
        FieldSpec(
            "companyState", partial(check_max_length, label="State name", max_len=COMPANY_STATE_MAX)
        ),
        FieldSpec(
            "companyType",
            partial(
                check_one_of,
                choices=COMPANY_TYPES,
                label="Company Type",
                invalid_message="Please select a valid company type",
            ),
        ),
        # Internship details
        FieldSpec(
            "internshipType",
            partial(
                check_one_of,
                choices=INTERNSHIP_TYPES,
                label="Type of Internship",
                invalid_message="Please select a valid internship type",
            ),
        ),
        FieldSpec("startDate", partial(check_start_date, today=today)),
        FieldSpec("endDate", check_end_date, depends_on=("startDate",)),
        FieldSpec("workingHours", check_working_hours, depends_on=("startDate", "endDate")),
        FieldSpec("stipend", check_stipend),
        # Supervisor & project
        FieldSpec(
            "supervisorName",
            partial(check_person_name, label="Supervisor Name", min_len=PERSON_NAME_MIN),
        ),
        FieldSpec("supervisorEmail", partial(check_email, label="Supervisor Email")),
        FieldSpec(
            "projectTitle",
            partial(
                check_length,
                label="Project Title",
                min_len=PROJECT_TITLE_LENGTH[0],
                max_len=PROJECT_TITLE_LENGTH[1],
            ),
        ),
        FieldSpec(
            "projectDescription",
            partial(check_max_length, label="Project Description", max_len=PROJECT_DESCRIPTION_MAX),
        ),
        # Performance & skills
        FieldSpec(
            "performanceRating",
            partial(
                check_one_of,
                choices=PERFORMANCE_RATINGS,
                label="Performance Rating",
                invalid_message="Please select a valid rating",
            ),
        ),
        FieldSpec(
            "skillsAcquired",
            partial(check_max_length, label="Skills description", max_len=SKILLS_ACQUIRED_MAX),
        ),
    ]
